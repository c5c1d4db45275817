# core/rankers.py
from __future__ import annotations
from typing import Callable, FrozenSet, Iterable, Tuple
import numpy as np
from .interfaces import Board, Direction, Game, MoveRanker, Snake
from .moves import next_position, ordered, manhattan, chebyshev

DISTANCES: dict[str, Callable[..., int]] = {
    "manhattan": manhattan,
    "chebyshev": chebyshev,
}

def resolve_distance(name: str) -> Callable[..., int]:
    try:
        return DISTANCES[name]
    except KeyError:
        raise ValueError(f"unknown distance metric: {name!r}") from None

class RandomRanker(MoveRanker):
    """Uniform choice over the survivors."""
    def choose(
        self, game: Game, board: Board, you: Snake, moves: FrozenSet[Direction], rng: np.random.Generator
    ) -> Direction:
        options = ordered(moves)
        return options[int(rng.integers(len(options)))]

class FoodSeekingRanker(MoveRanker):
    """
    When hungry (health below threshold) keep only the moves that end closest
    to the nearest food, then break ties with `fallback`. Otherwise defer to
    `fallback` directly.

    The metric is looked up by `game.ruleset.name` in `by_ruleset`, falling
    back to `distance`.
    """
    def __init__(
        self,
        threshold: int = 30,
        distance: str = "manhattan",
        by_ruleset: Iterable[Tuple[str, str]] = (),
        fallback: MoveRanker | None = None,
    ):
        self.threshold = threshold
        self.distance = resolve_distance(distance)
        self.by_ruleset = {name: resolve_distance(metric) for name, metric in by_ruleset}
        self.fallback = fallback or RandomRanker()

    def metric_for(self, game: Game) -> Callable[..., int]:
        return self.by_ruleset.get(game.ruleset.name, self.distance)

    def choose(
        self, game: Game, board: Board, you: Snake, moves: FrozenSet[Direction], rng: np.random.Generator
    ) -> Direction:
        if you.health >= self.threshold or not board.food:
            return self.fallback.choose(game, board, you, moves, rng)
        dist = self.metric_for(game)
        scored = {d: min(dist(next_position(you.head, d), f) for f in board.food) for d in moves}
        best = min(scored.values())
        return self.fallback.choose(game, board, you, frozenset(d for d, v in scored.items() if v == best), rng)
