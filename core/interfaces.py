# core/interfaces.py
from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Tuple, Dict, Any, NamedTuple, Optional, Protocol, FrozenSet
import numpy as np

class Coord(NamedTuple):
    x: int
    y: int

class Direction(str, Enum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    @property
    def delta(self) -> Tuple[int, int]:
        return _DELTAS[self]

    def __str__(self) -> str:
        return self.value

_DELTAS = {
    Direction.UP: (0, 1),
    Direction.DOWN: (0, -1),
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
}

ALL_MOVES: FrozenSet[Direction] = frozenset(Direction)

@dataclass(frozen=True)
class Snake:
    id: str
    body: Tuple[Coord, ...]   # head first
    health: int = 100
    name: str = ""
    shout: str = ""
    latency: str = "0"

    @property
    def head(self) -> Coord:
        return self.body[0]

    @property
    def neck(self) -> Optional[Coord]:
        return self.body[1] if len(self.body) > 1 else None

    @property
    def tail(self) -> Coord:
        return self.body[-1]

    @property
    def length(self) -> int:
        return len(self.body)

@dataclass(frozen=True)
class Board:
    width: int
    height: int
    food: FrozenSet[Coord] = frozenset()
    hazards: FrozenSet[Coord] = frozenset()
    snakes: Tuple[Snake, ...] = ()

@dataclass(frozen=True)
class Ruleset:
    name: str = "standard"
    version: str = ""
    settings: Dict[str, Any] = field(default_factory=dict, compare=False)

@dataclass(frozen=True)
class Game:
    id: str
    ruleset: Ruleset = field(default_factory=Ruleset)
    map: str = ""
    source: str = ""
    timeout: int = 500

@dataclass(frozen=True)
class GameState:
    """One turn notification: what the webhook receives on /start, /move and /end."""
    game: Game
    turn: int
    board: Board
    you: Snake

class MoveFilter(Protocol):
    """Narrows a set of candidate moves down to the ones it considers survivable."""
    def allowed(self, board: Board, you: Snake, moves: FrozenSet[Direction]) -> FrozenSet[Direction]: ...

class MoveRanker(Protocol):
    """Picks one move out of a non-empty set of survivable moves; may consult game.ruleset."""
    def choose(
        self, game: Game, board: Board, you: Snake, moves: FrozenSet[Direction], rng: np.random.Generator
    ) -> Direction: ...

class Policy(Protocol):
    def decide(self, game: Game, turn: int, board: Board, you: Snake) -> Direction: ...
