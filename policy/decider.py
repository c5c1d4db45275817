# policy/decider.py
from __future__ import annotations
import logging
from typing import FrozenSet, Optional, Sequence
import numpy as np
from config import AppConfig
from core.interfaces import ALL_MOVES, Board, Direction, Game, MoveFilter, MoveRanker, Policy, Snake
from core.filters import NeckFilter, BoundsFilter, CollisionFilter
from core.rankers import RandomRanker, FoodSeekingRanker

log = logging.getLogger(__name__)

# returned when every move is fatal; no choice improves on it
FALLBACK_MOVE = Direction.UP

BASELINE_FILTERS: tuple[MoveFilter, ...] = (NeckFilter(), BoundsFilter())

class MoveDecider(Policy):
    """
    Safety filters followed by a ranker:
      - each filter narrows the candidate set (starting from all four moves)
      - the ranker picks one survivor
      - if nothing survives we go FALLBACK_MOVE and log it
    rng: inject a seeded Generator for reproducible choices; when None every
    call draws from a freshly OS-seeded generator.
    """
    def __init__(
        self,
        filters: Sequence[MoveFilter] = BASELINE_FILTERS,
        ranker: Optional[MoveRanker] = None,
        rng: Optional[np.random.Generator] = None,
    ):
        self.filters = tuple(filters)
        self.ranker = ranker or RandomRanker()
        self.rng = rng

    def survivable_moves(self, board: Board, you: Snake) -> FrozenSet[Direction]:
        moves = ALL_MOVES
        for f in self.filters:
            moves = moves & f.allowed(board, you, moves)
        return moves

    def decide(self, game: Game, turn: int, board: Board, you: Snake) -> Direction:
        moves = self.survivable_moves(board, you)
        if moves:
            rng = self.rng if self.rng is not None else np.random.default_rng()
            chosen = self.ranker.choose(game, board, you, moves, rng)
        else:
            log.warning("%s turn %d: no safe move, going %s", game.id, turn, FALLBACK_MOVE)
            chosen = FALLBACK_MOVE
        log.info("%s MOVE %s", game.id, chosen)
        return chosen

def build_decider(cfg: AppConfig, rng: Optional[np.random.Generator] = None) -> MoveDecider:
    filters: list[MoveFilter] = list(BASELINE_FILTERS)
    if cfg.avoid_snakes:
        filters.append(CollisionFilter())
    ranker: MoveRanker = RandomRanker()
    if cfg.seek_food:
        ranker = FoodSeekingRanker(
            threshold=cfg.low_health_threshold,
            distance=cfg.food_distance,
            by_ruleset=cfg.food_distance_by_ruleset,
        )
    if rng is None and cfg.seed is not None:
        rng = np.random.default_rng(cfg.seed)
    return MoveDecider(filters=filters, ranker=ranker, rng=rng)
