# policy/logic.py
from __future__ import annotations
import logging
from typing import Dict, Any
from config import AppConfig
from core.interfaces import Board, Game, Policy, Snake

log = logging.getLogger(__name__)

def get_info(cfg: AppConfig) -> Dict[str, Any]:
    # static personalization, see https://docs.battlesnake.com/references/personalization
    log.info("INFO")
    return {
        "apiversion": cfg.api_version,
        "author": cfg.author,
        "color": cfg.color,
        "head": cfg.head,
        "tail": cfg.tail,
    }

def start(game: Game, turn: int, board: Board, you: Snake) -> None:
    log.info("%s START", game.id)

def end(game: Game, turn: int, board: Board, you: Snake) -> None:
    log.info("%s END", game.id)

def get_move(policy: Policy, game: Game, turn: int, board: Board, you: Snake) -> str:
    return policy.decide(game, turn, board, you).value
