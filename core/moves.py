# core/moves.py  (pure grid geometry)
from __future__ import annotations
from typing import Optional, Iterable, Tuple
from .interfaces import Coord, Direction, Board

# canonical order; sets of moves are sorted by it before any random draw
MOVE_ORDER: Tuple[Direction, ...] = (Direction.UP, Direction.DOWN, Direction.LEFT, Direction.RIGHT)

def ordered(moves: Iterable[Direction]) -> list[Direction]:
    return sorted(moves, key=MOVE_ORDER.index)

def next_position(pos: Coord, direction: Direction) -> Coord:
    dx, dy = direction.delta
    return Coord(pos[0] + dx, pos[1] + dy)

def in_bounds(pos: Coord, board: Board) -> bool:
    # width bounds x, height bounds y
    return 0 <= pos[0] < board.width and 0 <= pos[1] < board.height

def neck_direction(head: Coord, neck: Coord) -> Optional[Direction]:
    """Direction that would move the head back onto its neck, None if they overlap."""
    if neck[0] < head[0]:
        return Direction.LEFT
    if neck[0] > head[0]:
        return Direction.RIGHT
    if neck[1] < head[1]:
        return Direction.DOWN
    if neck[1] > head[1]:
        return Direction.UP
    return None

def neighbours(pos: Coord, board: Board) -> list[Coord]:
    return [q for q in (next_position(pos, d) for d in MOVE_ORDER) if in_bounds(q, board)]

def manhattan(a, b) -> int:
    return abs(a[0]-b[0]) + abs(a[1]-b[1])

def chebyshev(a, b) -> int:
    return max(abs(a[0]-b[0]), abs(a[1]-b[1]))
