# server/app.py  (Battlesnake webhook transport)
from __future__ import annotations
import logging
from typing import Optional
from flask import Flask, jsonify, request
from config import AppConfig
from core.interfaces import Policy
from policy import logic
from policy.decider import build_decider
from server.payload import PayloadError, parse_game_state, require_movable

log = logging.getLogger(__name__)

def create_app(cfg: Optional[AppConfig] = None, decider: Optional[Policy] = None) -> Flask:
    cfg = cfg or AppConfig()
    decider = decider or build_decider(cfg)
    app = Flask("battlesnake")

    @app.get("/")
    def on_info():
        return jsonify(logic.get_info(cfg))

    @app.post("/start")
    def on_start():
        s = parse_game_state(request.get_json(silent=True))
        logic.start(s.game, s.turn, s.board, s.you)
        return "ok"

    @app.post("/move")
    def on_move():
        s = require_movable(parse_game_state(request.get_json(silent=True)))
        move = logic.get_move(decider, s.game, s.turn, s.board, s.you)
        return jsonify({"move": move})

    @app.post("/end")
    def on_end():
        s = parse_game_state(request.get_json(silent=True))
        logic.end(s.game, s.turn, s.board, s.you)
        return "ok"

    @app.errorhandler(PayloadError)
    def on_bad_payload(e: PayloadError):
        log.warning("rejected %s: %s", request.path, e)
        return jsonify({"error": str(e)}), 400

    @app.after_request
    def identify(response):
        response.headers.set("server", "battlesnake/python")
        return response

    return app

def run_server(cfg: Optional[AppConfig] = None) -> None:
    cfg = AppConfig.from_env(cfg)
    app = create_app(cfg)
    print(f"=== Battlesnake server on {cfg.host}:{cfg.port} ===")
    app.run(host=cfg.host, port=cfg.port)
