# runners/run_local.py
from __future__ import annotations

from typing import Dict, Any, Optional
import numpy as np

from config import AppConfig
from core.interfaces import Game, Policy, Ruleset
from core.snake_rules import Rules
from metrics.logging import CSVLogger, RESULT_KEYS, configure_logging
from metrics.stats import EMA, WindowedRate, CauseTally
from policy import logic
from policy.decider import build_decider
from viz.render_iface import RenderConfig, Renderer
from viz.renderer_headless import HeadlessRenderer


def ruleset_name(cfg: AppConfig) -> str:
    if cfg.num_snakes == 1:
        return "solo"
    return "royale" if cfg.hazard_shrink_every else "standard"


def play_game(
    rules: Rules,
    policies: Dict[str, Policy],
    game: Game,
    max_turns: int,
    renderer: Optional[Renderer] = None,
    fps: int = 0,
) -> Dict[str, Any]:
    """Play one game to the end; every snake asks its own policy each turn."""
    board = rules.reset()
    for sid in rules.snake_ids:
        logic.start(game, 0, board, rules.you(sid))
    while not rules.terminated and rules.turn < max_turns:
        moves = {
            s.id: policies[s.id].decide(game, rules.turn, board, s)
            for s in board.snakes
        }
        board = rules.step(moves)
        if renderer is not None:
            renderer.draw(board, rules.turn)
            renderer.tick(fps)
    for sid in rules.snake_ids:
        logic.end(game, rules.turn, board, rules.you(sid))

    # survivors first, then by how long they lasted
    order = sorted(
        rules.snakes.values(),
        key=lambda s: -(s.eliminated_turn if s.eliminated is not None else rules.turn + 1),
    )
    return {
        "turns": rules.turn,
        "winner": rules.winner(),
        "places": [s.id for s in order],
        "causes": {s.id: s.eliminated for s in rules.snakes.values()},
    }


def main(cfg: Optional[AppConfig] = None, renderer: Optional[Renderer] = None):
    # --- Config & rules ---
    cfg = cfg or AppConfig()
    configure_logging(cfg.log_level)
    ids = [f"snake-{i}" for i in range(cfg.num_snakes)]
    rules = Rules(cfg, snake_ids=ids)
    ours = ids[0]

    # --- Policies: one independent stream per snake ---
    seeds = np.random.SeedSequence(cfg.seed).spawn(len(ids))
    policies = {sid: build_decider(cfg, rng=np.random.default_rng(s)) for sid, s in zip(ids, seeds)}

    # --- Renderer (optional) ---
    if renderer is None:
        if cfg.render:
            from viz.renderer_pygame import PygameRenderer
            renderer = PygameRenderer()
        else:
            renderer = HeadlessRenderer()
    renderer.open(cfg.grid_w, cfg.grid_h, RenderConfig.from_app(cfg))

    # --- Logger ---
    logger = CSVLogger(cfg.results_path, fieldnames=RESULT_KEYS)
    ema_turns, win_rate, causes = EMA(0.05), WindowedRate(100), CauseTally()

    print("=== Battlesnake local games ===")
    print(f"board: {cfg.grid_w}x{cfg.grid_h}  snakes: {cfg.num_snakes}  "
          f"avoid_snakes: {cfg.avoid_snakes}  seek_food: {cfg.seek_food}")

    results = []
    try:
        for ep in range(cfg.episodes):
            game = Game(id=f"local-{ep}", ruleset=Ruleset(name=ruleset_name(cfg)))
            res = play_game(rules, policies, game, cfg.max_turns, renderer=renderer, fps=cfg.fps if cfg.render else 0)
            results.append(res)
            for reason in res["causes"].values():
                causes.add(reason)
            win_rate.add(res["winner"] == ours)
            logger.log(ep, {
                "turns": res["turns"],
                "winner": res["winner"] or "",
                "our_place": res["places"].index(ours) + 1,
                "our_cause": res["causes"][ours] or "",
                "turns_ema": ema_turns.update(res["turns"]),
                "win_rate100": win_rate.rate(),
                **causes.as_scalars(),
            })
            logger.flush()
            print(f"game {ep}: {res['turns']} turns, winner={res['winner']}")
    finally:
        logger.close()
        renderer.close()

    print(f"win rate ({ours}): {win_rate.rate():.2f}   eliminations: {dict(causes.counts)}")
    return results


if __name__ == "__main__":
    main()
