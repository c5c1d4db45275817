# viz/render_iface.py
from __future__ import annotations
from typing import Protocol, Optional
from core.interfaces import Board

class RenderConfig:
    def __init__(
        self,
        cell_px: int = 40,
        title: str = "Battlesnake",
        grid_lines: bool = True,
        show_hud: bool = True,
        record_dir: Optional[str] = None,   # if set, save frames here as PNGs
    ):
        self.cell_px = cell_px
        self.title = title
        self.grid_lines = grid_lines
        self.show_hud = show_hud
        self.record_dir = record_dir

    @classmethod
    def from_app(cls, cfg) -> "RenderConfig":
        return cls(
            cell_px=cfg.render_cell,
            title=cfg.render_title,
            grid_lines=cfg.render_grid_lines,
            show_hud=cfg.render_show_hud,
            record_dir=cfg.render_record_dir,
        )

class Renderer(Protocol):
    def open(self, grid_w: int, grid_h: int, cfg: RenderConfig) -> None: ...
    def draw(self, board: Board, turn: int = 0) -> None: ...
    def tick(self, fps: int) -> None: ...
    def close(self) -> None: ...
