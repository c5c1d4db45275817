# server/payload.py
from __future__ import annotations
from typing import Any, Dict, Mapping
from core.interfaces import Board, Coord, Game, GameState, Ruleset, Snake

class PayloadError(ValueError):
    """Turn notification is missing fields or breaks the board/snake preconditions."""

def _coord(raw: Mapping[str, Any]) -> Coord:
    return Coord(int(raw["x"]), int(raw["y"]))

def parse_snake(raw: Mapping[str, Any]) -> Snake:
    body = tuple(_coord(c) for c in raw["body"])
    if not body:
        raise PayloadError(f"snake {raw.get('id')!r} has an empty body")
    return Snake(
        id=str(raw["id"]),
        body=body,
        health=int(raw.get("health", 100)),
        name=str(raw.get("name", "")),
        shout=str(raw.get("shout", "") or ""),
        latency=str(raw.get("latency", "0")),
    )

def parse_board(raw: Mapping[str, Any]) -> Board:
    width, height = int(raw["width"]), int(raw["height"])
    if width <= 0 or height <= 0:
        raise PayloadError(f"board must be at least 1x1, got {width}x{height}")
    return Board(
        width=width,
        height=height,
        food=frozenset(_coord(c) for c in raw.get("food", ())),
        hazards=frozenset(_coord(c) for c in raw.get("hazards", ())),
        snakes=tuple(parse_snake(s) for s in raw.get("snakes", ())),
    )

def parse_game(raw: Mapping[str, Any]) -> Game:
    rs = raw.get("ruleset") or {}
    return Game(
        id=str(raw["id"]),
        ruleset=Ruleset(
            name=str(rs.get("name", "standard")),
            version=str(rs.get("version", "")),
            settings=dict(rs.get("settings") or {}),
        ),
        map=str(raw.get("map", "")),
        source=str(raw.get("source", "")),
        timeout=int(raw.get("timeout", 500)),
    )

def parse_game_state(data: Dict[str, Any] | None) -> GameState:
    """Battlesnake webhook JSON -> GameState, raising PayloadError on bad input."""
    if not isinstance(data, dict):
        raise PayloadError("request body must be a JSON object")
    try:
        state = GameState(
            game=parse_game(data["game"]),
            turn=int(data.get("turn", 0)),
            board=parse_board(data["board"]),
            you=parse_snake(data["you"]),
        )
    except PayloadError:
        raise
    except (KeyError, TypeError, ValueError) as e:
        raise PayloadError(f"malformed game state: {e!r}") from e
    return state

def require_movable(state: GameState) -> GameState:
    """/move needs a head and a neck."""
    if len(state.you.body) < 2:
        raise PayloadError(f"snake {state.you.id!r} needs at least 2 body segments to move")
    return state
