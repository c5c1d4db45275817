# core/snake_rules.py  (pure standard rules, no pygame)
from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple
import random
from config import AppConfig
from .interfaces import Board, Coord, Direction, Snake
from .moves import next_position, in_bounds

MAX_HEALTH = 100

@dataclass
class SnakeState:
    id: str
    body: List[Coord]
    health: int = MAX_HEALTH
    eliminated: Optional[str] = None   # "wall", "starvation", "self", "body:<id>", "head:<id>"
    eliminated_turn: Optional[int] = None

    def freeze(self) -> Snake:
        return Snake(id=self.id, body=tuple(self.body), health=self.health, name=self.id)

class Rules:
    def __init__(self, cfg: AppConfig, snake_ids: Optional[List[str]] = None):
        self.cfg = cfg
        self.rng = random.Random(cfg.seed)
        self.snake_ids = snake_ids or [f"snake-{i}" for i in range(cfg.num_snakes)]
        self._reset_state()

    def _spawn_points(self) -> List[Coord]:
        w, h = self.cfg.grid_w, self.cfg.grid_h
        return [Coord(*p) for p in (
            (1, 1), (w - 2, h - 2), (1, h - 2), (w - 2, 1),
            (w // 2, 1), (w // 2, h - 2), (1, h // 2), (w - 2, h // 2),
        )]

    def _reset_state(self):
        points = self._spawn_points()
        if len(self.snake_ids) > len(points):
            raise ValueError(f"at most {len(points)} snakes supported, got {len(self.snake_ids)}")
        self.snakes: Dict[str, SnakeState] = {
            sid: SnakeState(sid, [points[i]] * self.cfg.start_len)
            for i, sid in enumerate(self.snake_ids)
        }
        self.food: List[Coord] = []
        self.hazards: List[Coord] = []
        self.safe_box = [0, self.cfg.grid_w - 1, 0, self.cfg.grid_h - 1]   # x0, x1, y0, y1
        self.turn = 0
        center = Coord(self.cfg.grid_w // 2, self.cfg.grid_h // 2)
        if center not in self._occupied():
            self.food.append(center)
        self._spawn_food(self.cfg.initial_food)

    def reset(self) -> Board:
        self._reset_state()
        return self.snapshot()

    def alive(self) -> List[SnakeState]:
        return [s for s in self.snakes.values() if s.eliminated is None]

    @property
    def terminated(self) -> bool:
        # a solo game runs until the last snake dies
        n = len(self.alive())
        return n == 0 or (n == 1 and len(self.snakes) > 1)

    def winner(self) -> Optional[str]:
        alive = self.alive()
        return alive[0].id if len(alive) == 1 else None

    def _occupied(self) -> set:
        occ = set(self.food)
        for s in self.alive():
            occ.update(s.body)
        return occ

    def _spawn_food(self, count: int) -> None:
        occ = self._occupied()
        free = [Coord(x, y) for x in range(self.cfg.grid_w) for y in range(self.cfg.grid_h) if (x, y) not in occ]
        for _ in range(min(count, len(free))):
            pos = self.rng.choice(free)
            free.remove(pos)
            self.food.append(pos)

    def step(self, moves: Dict[str, Direction]) -> Board:
        if self.terminated:
            return self.snapshot()
        alive = self.alive()

        # move: new head, health drain
        for s in alive:
            d = moves.get(s.id, Direction.UP)
            s.body.insert(0, next_position(s.body[0], d))
            s.body.pop()
            s.health -= 1
            if s.body[0] in self.hazards:
                s.health -= self.cfg.hazard_damage

        # feed
        eaten = set()
        for s in alive:
            if s.body[0] in self.food:
                s.health = MAX_HEALTH
                s.body.append(s.body[-1])
                eaten.add(s.body[0])
        self.food = [f for f in self.food if f not in eaten]

        # eliminate
        out: Dict[str, Tuple[str, int]] = {}
        for s in alive:
            if s.health <= 0:
                out[s.id] = ("starvation", self.turn)
            elif not in_bounds(s.body[0], self._board_dims()):
                out[s.id] = ("wall", self.turn)
        gone = set(out)
        for s in alive:
            if s.id in out:
                continue
            head = s.body[0]
            for other in alive:
                if other.id in gone:
                    continue
                if head in other.body[1:]:
                    out[s.id] = ("self" if other.id == s.id else f"body:{other.id}", self.turn)
                    break
            if s.id in out:
                continue
            for other in alive:
                if other.id != s.id and other.id not in gone and other.body[0] == head and len(other.body) >= len(s.body):
                    out[s.id] = (f"head:{other.id}", self.turn)
                    break
        for sid, (reason, turn) in out.items():
            self.snakes[sid].eliminated, self.snakes[sid].eliminated_turn = reason, turn

        if self.rng.random() < self.cfg.food_spawn_chance or not self.food:
            self._spawn_food(1)
        every = self.cfg.hazard_shrink_every
        if every and (self.turn + 1) % every == 0:
            self._shrink()
        self.turn += 1
        return self.snapshot()

    def _shrink(self) -> None:
        """Royale-style: one random edge of the safe box turns into hazard."""
        x0, x1, y0, y1 = self.safe_box
        sides = (["left", "right"] if x0 < x1 else []) + (["bottom", "top"] if y0 < y1 else [])
        if not sides:
            return
        side = self.rng.choice(sides)
        if side == "left":
            x0 += 1
        elif side == "right":
            x1 -= 1
        elif side == "bottom":
            y0 += 1
        else:
            y1 -= 1
        self.safe_box = [x0, x1, y0, y1]
        self.hazards = [
            Coord(x, y) for x in range(self.cfg.grid_w) for y in range(self.cfg.grid_h)
            if not (x0 <= x <= x1 and y0 <= y <= y1)
        ]

    def _board_dims(self) -> Board:
        return Board(width=self.cfg.grid_w, height=self.cfg.grid_h)

    def snapshot(self) -> Board:
        return Board(
            width=self.cfg.grid_w,
            height=self.cfg.grid_h,
            food=frozenset(self.food),
            hazards=frozenset(self.hazards),
            snakes=tuple(s.freeze() for s in self.alive()),
        )

    def you(self, snake_id: str) -> Snake:
        return self.snakes[snake_id].freeze()

    def get_state(self) -> dict:
        """Pure-Python, JSON-serializable state (plus RNG)."""
        return {
            "snakes": {
                sid: {"body": list(s.body), "health": s.health,
                      "eliminated": s.eliminated, "eliminated_turn": s.eliminated_turn}
                for sid, s in self.snakes.items()
            },
            "food": list(self.food),
            "hazards": list(self.hazards),
            "safe_box": list(self.safe_box),
            "turn": self.turn,
            "rng_state": self.rng.getstate(),
        }

    def set_state(self, state: dict) -> None:
        """Restore exact internal state (including RNG)."""
        self.snakes = {
            sid: SnakeState(
                sid,
                [Coord(*c) for c in s["body"]],
                int(s["health"]),
                s["eliminated"],
                s["eliminated_turn"],
            )
            for sid, s in state["snakes"].items()
        }
        self.snake_ids = list(self.snakes)
        self.food = [Coord(*c) for c in state["food"]]
        self.hazards = [Coord(*c) for c in state["hazards"]]
        self.safe_box = [int(v) for v in state["safe_box"]]
        self.turn = int(state["turn"])
        self.rng.setstate(_as_rng_state(state["rng_state"]))

def _as_rng_state(st):
    # JSON turns the inner tuple into a list
    version, internal, gauss = st
    return (version, tuple(internal), gauss)
