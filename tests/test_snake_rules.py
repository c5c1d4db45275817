# tests/test_snake_rules.py
import json

import pytest

from config import AppConfig
from core.interfaces import Coord, Direction
from core.snake_rules import Rules, MAX_HEALTH

U, D, L, R = Direction.UP, Direction.DOWN, Direction.LEFT, Direction.RIGHT

@pytest.fixture
def duel():
    cfg = AppConfig(grid_w=11, grid_h=11, seed=5, food_spawn_chance=0.0, initial_food=0, num_snakes=2)
    rules = Rules(cfg, snake_ids=["a", "b"])
    rules.reset()
    return rules

def place(rules, sid, *cells, health=MAX_HEALTH):
    s = rules.snakes[sid]
    s.body = [Coord(*c) for c in cells]
    s.health = health

def test_reset_spawns_stacked_snakes_and_center_food(duel):
    board = duel.snapshot()
    assert len(board.snakes) == 2
    for s in board.snakes:
        assert len(s.body) == 3 and len(set(s.body)) == 1
    assert Coord(5, 5) in board.food

def test_move_drains_health_and_follows_tail(duel):
    place(duel, "a", (2, 2), (2, 1), (2, 0))
    place(duel, "b", (8, 8), (8, 9), (8, 10))
    duel.food = []
    board = duel.step({"a": R, "b": L})
    a = next(s for s in board.snakes if s.id == "a")
    assert a.body == ((3, 2), (2, 2), (2, 1))
    assert a.health == MAX_HEALTH - 1

def test_eating_grows_and_heals(duel):
    place(duel, "a", (2, 2), (2, 1), (2, 0), health=40)
    place(duel, "b", (8, 8), (8, 9), (8, 10))
    duel.food = [Coord(3, 2)]
    duel.step({"a": R, "b": L})
    a = duel.snakes["a"]
    assert a.health == MAX_HEALTH
    assert a.body == [(3, 2), (2, 2), (2, 1), (2, 1)]
    assert Coord(3, 2) not in duel.food

def test_wall_elimination(duel):
    place(duel, "a", (0, 4), (1, 4), (2, 4))
    place(duel, "b", (8, 8), (8, 9), (8, 10))
    duel.step({"a": L, "b": L})
    assert duel.snakes["a"].eliminated == "wall"
    assert duel.terminated and duel.winner() == "b"

def test_starvation(duel):
    place(duel, "a", (2, 2), (2, 1), (2, 0), health=1)
    place(duel, "b", (8, 8), (8, 9), (8, 10))
    duel.food = []
    duel.step({"a": R, "b": L})
    assert duel.snakes["a"].eliminated == "starvation"

def test_self_collision(duel):
    place(duel, "a", (5, 5), (4, 5), (4, 6), (5, 6), (6, 6))
    place(duel, "b", (8, 1), (8, 0), (9, 0))
    duel.food = []
    duel.step({"a": U, "b": U})
    assert duel.snakes["a"].eliminated == "self"

def test_body_collision(duel):
    place(duel, "a", (3, 5), (2, 5), (1, 5))
    place(duel, "b", (4, 6), (4, 5), (4, 4), (4, 3))
    duel.food = []
    duel.step({"a": R, "b": U})
    assert duel.snakes["a"].eliminated == "body:b"
    assert duel.snakes["b"].eliminated is None

def test_head_to_head_longer_wins(duel):
    place(duel, "a", (3, 5), (2, 5), (1, 5))
    place(duel, "b", (5, 5), (6, 5), (7, 5), (8, 5))
    duel.food = []
    duel.step({"a": R, "b": L})
    assert duel.snakes["a"].eliminated == "head:b"
    assert duel.snakes["b"].eliminated is None

def test_head_to_head_equal_both_die(duel):
    place(duel, "a", (3, 5), (2, 5), (1, 5))
    place(duel, "b", (5, 5), (6, 5), (7, 5))
    duel.food = []
    duel.step({"a": R, "b": L})
    assert duel.snakes["a"].eliminated == "head:b"
    assert duel.snakes["b"].eliminated == "head:a"
    assert duel.terminated and duel.winner() is None

def test_hazard_damage(duel):
    place(duel, "a", (2, 2), (2, 1), (2, 0))
    place(duel, "b", (8, 8), (8, 9), (8, 10))
    duel.food = []
    duel.hazards = [Coord(3, 2)]
    duel.step({"a": R, "b": L})
    assert duel.snakes["a"].health == MAX_HEALTH - 1 - duel.cfg.hazard_damage

def test_state_roundtrip_through_json(duel):
    duel.step({"a": U, "b": D})
    saved = json.loads(json.dumps(duel.get_state()))
    expected = duel.step({"a": U, "b": D})
    duel.set_state(saved)
    assert duel.step({"a": U, "b": D}) == expected

def test_too_many_snakes():
    with pytest.raises(ValueError):
        Rules(AppConfig(num_snakes=9))

@pytest.fixture
def royale():
    cfg = AppConfig(grid_w=11, grid_h=11, seed=3, food_spawn_chance=0.0, initial_food=0,
                    num_snakes=2, hazard_shrink_every=2)
    rules = Rules(cfg, snake_ids=["a", "b"])
    rules.reset()
    return rules

def test_border_shrinks_into_hazard(royale):
    assert royale.snapshot().hazards == frozenset()
    board = royale.step({"a": U, "b": D})
    assert board.hazards == frozenset()
    board = royale.step({"a": U, "b": D})
    assert len(board.hazards) == 11
    xs = {h.x for h in board.hazards}
    ys = {h.y for h in board.hazards}
    assert xs in ({0}, {10}) or ys in ({0}, {10})
    royale.step({"a": U, "b": D})
    board = royale.step({"a": U, "b": D})
    assert len(board.hazards) in (21, 22)

def test_reset_clears_hazards(royale):
    for _ in range(4):
        royale.step({"a": U, "b": D})
    assert royale.hazards
    board = royale.reset()
    assert board.hazards == frozenset()
    assert royale.safe_box == [0, 10, 0, 10]

def test_no_hazards_when_disabled():
    cfg = AppConfig(grid_w=11, grid_h=11, seed=3, num_snakes=2, hazard_shrink_every=0)
    rules = Rules(cfg, snake_ids=["a", "b"])
    rules.reset()
    for _ in range(8):
        board = rules.step({"a": U, "b": D})
    assert board.hazards == frozenset()

def test_shrunk_border_drains_health(royale):
    place(royale, "a", (5, 5), (5, 4), (5, 3))
    place(royale, "b", (3, 7), (3, 8), (3, 9))
    royale.food = [Coord(10, 10)]
    royale.step({"a": U, "b": D})
    royale.step({"a": U, "b": D})
    x0, x1, y0, y1 = royale.safe_box
    # step "a" from just inside the shrunk edge into the hazard
    if x0 == 1:
        body, move = [(1, 2), (2, 2), (3, 2)], L
    elif x1 == 9:
        body, move = [(9, 2), (8, 2), (7, 2)], R
    elif y0 == 1:
        body, move = [(6, 1), (6, 2), (6, 3)], D
    else:
        body, move = [(6, 9), (6, 8), (6, 7)], U
    place(royale, "a", *body, health=50)
    royale.step({"a": move, "b": D})
    assert royale.snakes["a"].health == 50 - 1 - royale.cfg.hazard_damage

def test_state_roundtrip_keeps_safe_box(royale):
    royale.step({"a": U, "b": D})
    saved = json.loads(json.dumps(royale.get_state()))
    expected = [royale.step({"a": U, "b": D}) for _ in range(3)]
    royale.set_state(saved)
    assert [royale.step({"a": U, "b": D}) for _ in range(3)] == expected
