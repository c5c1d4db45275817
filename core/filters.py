# core/filters.py
from __future__ import annotations
from typing import FrozenSet, Set
from .interfaces import Board, Coord, Direction, MoveFilter, Snake
from .moves import next_position, in_bounds, neck_direction, neighbours

class NeckFilter(MoveFilter):
    """Never reverse onto our own neck."""
    def allowed(self, board: Board, you: Snake, moves: FrozenSet[Direction]) -> FrozenSet[Direction]:
        if you.neck is None:
            return moves
        back = neck_direction(you.head, you.neck)
        return moves - {back} if back is not None else moves

class BoundsFilter(MoveFilter):
    """Keep the head on the board."""
    def allowed(self, board: Board, you: Snake, moves: FrozenSet[Direction]) -> FrozenSet[Direction]:
        return frozenset(d for d in moves if in_bounds(next_position(you.head, d), board))

class CollisionFilter(MoveFilter):
    """
    Don't move onto any snake's body (ours included).
      - A tail normally vacates this turn, so it counts as free
      - Unless it is stacked (snake just ate / game start)
      - Or another snake may eat now (food next to its head)
    """
    def allowed(self, board: Board, you: Snake, moves: FrozenSet[Direction]) -> FrozenSet[Direction]:
        blocked = self._occupied(board, you)
        keep = set()
        for d in moves:
            nxt = next_position(you.head, d)
            if nxt in blocked:
                continue
            keep.add(d)
        return frozenset(keep)

    def _occupied(self, board: Board, you: Snake) -> Set[Coord]:
        occ: Set[Coord] = set()
        snakes = board.snakes if any(s.id == you.id for s in board.snakes) else board.snakes + (you,)
        for s in snakes:
            body = s.body
            if len(body) < 2 or body[-1] == body[-2]:
                occ.update(body)
                continue
            if s.id != you.id and any(n in board.food for n in neighbours(s.head, board)):
                occ.update(body)
                continue
            occ.update(body[:-1])
        return occ

class NoopFilter(MoveFilter):
    def allowed(self, board: Board, you: Snake, moves: FrozenSet[Direction]) -> FrozenSet[Direction]:
        return moves
