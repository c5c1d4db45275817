# viz/renderer_pygame.py
from __future__ import annotations
import os
import pygame as pg
from typing import Dict, Optional, Tuple
from core.interfaces import Board
from viz.render_iface import RenderConfig, Renderer
import viz.renderer_colors as theme

class PygameRenderer(Renderer):
    def __init__(self):
        self.cell = 40
        self.cfg: Optional[RenderConfig] = None
        self.surf: Optional[pg.Surface] = None
        self.clock: Optional[pg.time.Clock] = None
        self._grid_w = 0
        self._grid_h = 0
        self._frame_idx = 0
        self._colors: Dict[str, Tuple[int, int, int]] = {}

    def open(self, grid_w: int, grid_h: int, cfg: RenderConfig) -> None:
        self.cfg = cfg
        self._grid_w, self._grid_h = grid_w, grid_h
        self.cell = cfg.cell_px

        pg.init()
        pg.display.set_caption(cfg.title)
        self.surf = pg.display.set_mode((grid_w * self.cell, grid_h * self.cell))
        self.clock = pg.time.Clock()
        self._frame_idx = 0

        if cfg.record_dir:
            os.makedirs(cfg.record_dir, exist_ok=True)

    def cell_rect(self, x: int, y: int) -> pg.Rect:
        # board origin is bottom-left, screen origin is top-left
        c = self.cell
        return pg.Rect(x * c, (self._grid_h - 1 - y) * c, c, c)

    def color_of(self, snake_id: str) -> Tuple[int, int, int]:
        if snake_id not in self._colors:
            self._colors[snake_id] = theme.SNAKES[len(self._colors) % len(theme.SNAKES)]
        return self._colors[snake_id]

    def draw(self, board: Board, turn: int = 0) -> None:
        assert self.surf is not None, "Renderer not opened"
        assert self.cfg is not None, "Renderer config not set (call open first)"
        surf = self.surf

        pg.event.pump()

        surf.fill(theme.BG)
        for hx, hy in board.hazards:
            pg.draw.rect(surf, theme.HAZARD, self.cell_rect(hx, hy))

        if self.cfg.grid_lines:
            w, h = self._grid_w * self.cell, self._grid_h * self.cell
            for i in range(1, self._grid_w):
                pg.draw.line(surf, theme.GRID, (i * self.cell, 0), (i * self.cell, h))
            for j in range(1, self._grid_h):
                pg.draw.line(surf, theme.GRID, (0, j * self.cell), (w, j * self.cell))

        for fx, fy in board.food:
            pg.draw.ellipse(surf, theme.FOOD, self.cell_rect(fx, fy).inflate(-self.cell // 3, -self.cell // 3))

        for s in board.snakes:
            col = self.color_of(s.id)
            for i, (x, y) in enumerate(reversed(s.body)):
                is_head = i == len(s.body) - 1
                pg.draw.rect(surf, theme.head_color(col) if is_head else col, self.cell_rect(x, y).inflate(-2, -2))

        if self.cfg.show_hud:
            font = pg.font.SysFont(None, 22)
            txt = font.render(f"Turn: {turn}   Snakes: {len(board.snakes)}", True, theme.TEXT)
            surf.blit(txt, (6, 4))

        pg.display.flip()

        if self.cfg.record_dir:
            self._save_surface_frame()

    def tick(self, fps: int) -> None:
        if self.clock:
            self.clock.tick(fps)

    def close(self) -> None:
        try:
            pg.quit()
        finally:
            self.surf = None
            self.clock = None

    # internals
    def _save_surface_frame(self) -> None:
        assert self.surf is not None and self.cfg is not None
        fname = os.path.join(self.cfg.record_dir, f"frame_{self._frame_idx:06d}.png")
        pg.image.save(self.surf, fname)
        self._frame_idx += 1
