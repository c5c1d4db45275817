# config.py
from __future__ import annotations
import os
from dataclasses import dataclass, replace
from typing import Optional, Literal, Tuple

@dataclass(frozen=True, slots=True)
class AppConfig:
    # shared / global
    grid_w: int = 11
    grid_h: int = 11
    seed: Optional[int] = None
    log_level: str = "INFO"

    # personalization (GET /)
    api_version: str = "1"
    author: str = "nomad"
    color: str = "#F09383"
    head: str = "default"
    tail: str = "default"

    # decider extensions (baseline: both off)
    avoid_snakes: bool = False
    seek_food: bool = False
    low_health_threshold: int = 30
    food_distance: Literal["manhattan", "chebyshev"] = "manhattan"
    # ruleset name -> metric, e.g. (("royale", "chebyshev"),); overrides food_distance
    food_distance_by_ruleset: Tuple[Tuple[str, str], ...] = ()

    # server
    host: str = "0.0.0.0"
    port: int = 8000

    # local games
    num_snakes: int = 4
    episodes: int = 20
    max_turns: int = 500
    start_len: int = 3
    initial_food: int = 1
    food_spawn_chance: float = 0.15
    hazard_damage: int = 14
    hazard_shrink_every: int = 20      # turns between border shrinks (royale); 0 = no hazards
    results_path: str = "runs/local/results.csv"

    # render
    fps: int = 8
    render: bool = False
    render_cell: int = 40
    render_title: str = "Battlesnake"
    render_grid_lines: bool = True
    render_show_hud: bool = True
    render_record_dir: Optional[str] = None

    def with_(self, **kwargs) -> "AppConfig":
        """Convenience: clone with updated values"""
        return replace(self, **kwargs)

    @classmethod
    def from_env(cls, base: "AppConfig | None" = None) -> "AppConfig":
        """Override server/logging settings from PORT, HOST and LOG_LEVEL."""
        cfg = base or cls()
        overrides = {}
        if os.environ.get("PORT"):
            overrides["port"] = int(os.environ["PORT"])
        if os.environ.get("HOST"):
            overrides["host"] = os.environ["HOST"]
        if os.environ.get("LOG_LEVEL"):
            overrides["log_level"] = os.environ["LOG_LEVEL"].upper()
        return cfg.with_(**overrides)
