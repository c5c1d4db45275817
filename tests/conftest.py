# tests/conftest.py
import os
import sys

# Headless SDL so tests don't open a window
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

# Ensure project root is importable (so core.* imports work when running from repo root)
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

import numpy as np
import pytest

from core.interfaces import Board, Coord, Game, Snake

@pytest.fixture
def game():
    return Game(id="test-game")

@pytest.fixture
def snake_factory():
    def make(*cells, id="you", health=100):
        return Snake(id=id, body=tuple(Coord(*c) for c in cells), health=health)
    return make

@pytest.fixture
def board_factory():
    def make(width=10, height=10, snakes=(), food=(), hazards=()):
        return Board(
            width=width,
            height=height,
            food=frozenset(Coord(*f) for f in food),
            hazards=frozenset(Coord(*h) for h in hazards),
            snakes=tuple(snakes),
        )
    return make

@pytest.fixture
def rng():
    return np.random.default_rng(1234)

def _state_json(you, board, turn=3, game_id="test-game"):
    def cell(c): return {"x": c[0], "y": c[1]}
    def snake(s):
        return {"id": s.id, "name": s.id, "health": s.health, "body": [cell(c) for c in s.body],
                "head": cell(s.head), "length": len(s.body), "latency": "0", "shout": ""}
    return {
        "game": {"id": game_id, "ruleset": {"name": "standard", "version": "v1.2.3"}, "timeout": 500},
        "turn": turn,
        "board": {"width": board.width, "height": board.height,
                  "food": [cell(f) for f in board.food], "hazards": [cell(h) for h in board.hazards],
                  "snakes": [snake(s) for s in board.snakes]},
        "you": snake(you),
    }

@pytest.fixture
def state_json():
    return _state_json
