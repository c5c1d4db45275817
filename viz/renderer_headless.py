# viz/renderer_headless.py
from __future__ import annotations
from core.interfaces import Board
from viz.render_iface import RenderConfig, Renderer

class HeadlessRenderer(Renderer):
    def open(self, grid_w: int, grid_h: int, cfg: RenderConfig) -> None:
        self.cfg = cfg
        self.w = grid_w
        self.h = grid_h
        self.frames = 0
    def draw(self, board: Board, turn: int = 0) -> None:
        self.frames += 1
    def tick(self, fps: int) -> None:
        pass
    def close(self) -> None:
        pass
