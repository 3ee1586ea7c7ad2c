
"""
Rendering helpers for the game session.

- Pre-render block cell Surfaces per piece id (solid + ghost) and blit them.
- Pre-render static background (grid + panel frame + preview frame).
- Cache HUD text surfaces; re-render only when values change.
- Cache a BOARD SURFACE with all *locked* blocks; rebuild it only when the
  board contents change (lock / line clear / restart).
"""
from __future__ import annotations
import pygame
from dataclasses import dataclass
from typing import Dict, Optional, Tuple
from tetris_layout import Dims
from tetris_piece import COLORS, COLS, ROWS, SHAPES

GHOST_FILL = (255,255,255,26)
GHOST_EDGE = (255,255,255,77)
TEXT = (200,210,240)
DIM_TEXT = (165,175,215)

@dataclass
class HudCache:
    score: int = -1
    level: int = -1
    lines: int = -1
    sound_on: Optional[bool] = None
    next_type: int = 0
    title: Optional[pygame.Surface] = None
    score_s: Optional[pygame.Surface] = None
    level_s: Optional[pygame.Surface] = None
    lines_s: Optional[pygame.Surface] = None
    sound_s: Optional[pygame.Surface] = None
    next_preview: Optional[pygame.Surface] = None
    controls: Optional[list] = None

class RenderAssets:
    """Holds all pre-rendered assets and draws a full frame from a session."""
    def __init__(self, dims: Dims, font: pygame.font.Font, big_font: pygame.font.Font):
        self.dims = dims
        self.font = font
        self.big_font = big_font
        self._make_static()
        self._make_cells()
        self.hud = HudCache()
        self.board_surface = pygame.Surface((dims.board_w, dims.board_h), pygame.SRCALPHA)
        self._board_key: Optional[Tuple] = None
        self.particle_surf: Dict[Tuple, pygame.Surface] = {}

    # ---------- Static background (grid + panel) ----------
    def _make_static(self):
        d = self.dims
        self.bg = pygame.Surface((d.total_w, d.total_h))
        self.bg.fill((10,13,34))
        pygame.draw.rect(self.bg, (0,0,0), self.board_rect)
        grid_col = (30,36,64)
        for x in range(COLS+1):
            X = d.board_x + x*d.cell
            pygame.draw.line(self.bg, grid_col, (X, d.board_y), (X, d.board_y + d.board_h))
        for y in range(ROWS+1):
            Y = d.board_y + y*d.cell
            pygame.draw.line(self.bg, grid_col, (d.board_x, Y), (d.board_x + d.board_w, Y))
        pygame.draw.rect(self.bg, (21,25,53), self.panel_rect)
        pygame.draw.rect(self.bg, (50,60,100), self.panel_rect, 1)
        self.pv_x = d.panel_x + 12
        self.pv_y = d.panel_y + 150
        frame = pygame.Rect(self.pv_x-6, self.pv_y-6, d.preview_cell*6+12, d.preview_cell*6+12)
        pygame.draw.rect(self.bg, (15,18,40), frame)
        pygame.draw.rect(self.bg, (55,65,110), frame, 1)

    @property
    def board_rect(self) -> pygame.Rect:
        d = self.dims
        return pygame.Rect(d.board_x, d.board_y, d.board_w, d.board_h)

    @property
    def panel_rect(self) -> pygame.Rect:
        d = self.dims
        return pygame.Rect(d.panel_x, d.panel_y, d.panel_w, d.board_h)

    # ---------- Cell sprites (solid with bevel edge + ghost) ----------
    def _make_cells(self):
        self.cell_surf: Dict[int, pygame.Surface] = {}
        c = self.dims.cell
        for t, col in COLORS.items():
            s = pygame.Surface((c, c))
            s.fill(col)
            pygame.draw.rect(s, tuple(min(255, v + 120) for v in col), (0,0,c,c), 2)
            self.cell_surf[t] = s
        g = pygame.Surface((c, c), pygame.SRCALPHA)
        g.fill(GHOST_FILL)
        pygame.draw.rect(g, GHOST_EDGE, (0,0,c,c), 1)
        self.ghost_surf = g

    def cell_pos(self, bx: int, by: int) -> Tuple[int,int]:
        return self.dims.board_x + bx*self.dims.cell, self.dims.board_y + by*self.dims.cell

    # ---------- Board surface cache ----------
    def rebuild_board_surface(self, board):
        """Rebuilds the "locked blocks" surface from board contents."""
        self.board_surface.fill((0,0,0,0))
        c = self.dims.cell
        for y in range(ROWS):
            for x in range(COLS):
                t = board[y][x]
                if t:
                    self.board_surface.blit(self.cell_surf[t], (x*c, y*c))

    def _sync_board(self, board):
        key = tuple(map(tuple, board))
        if key != self._board_key:
            self._board_key = key
            self.rebuild_board_surface(board)

    # ---------- Frame ----------
    def draw(self, screen: pygame.Surface, session):
        screen.blit(self.bg, (0,0))
        self._sync_board(session.board)
        screen.blit(self.board_surface, (self.dims.board_x, self.dims.board_y))
        p = session.current
        if p is not None and not session.game_over:
            gy = session.ghost_y
            for x, y in p.moved(dy=gy - p.y).cells():
                if y >= 0: screen.blit(self.ghost_surf, self.cell_pos(x, y))
            for x, y in p.cells():
                if y >= 0: screen.blit(self.cell_surf[p.t], self.cell_pos(x, y))
        self.draw_particles(screen, session.particles)
        self.draw_panel_hud(screen, session)
        if session.paused:
            self.draw_banner(screen, "PAUSED", "P to resume")
        elif session.game_over:
            self.draw_banner(screen, "GAME OVER", f"Score {session.score}  -  R to restart")

    def particle_sprite(self, size: int, color) -> pygame.Surface:
        """One cached square per (size, color); alpha is set per blit."""
        key = (size, color)
        s = self.particle_surf.get(key)
        if s is None:
            s = pygame.Surface((size, size))
            s.fill(color)
            self.particle_surf[key] = s
        return s

    def draw_particles(self, screen: pygame.Surface, particles):
        bx, by = self.dims.board_x, self.dims.board_y
        screen.set_clip(self.board_rect)
        for pt in particles:
            s = self.particle_sprite(max(1, int(pt.size)), pt.color)
            s.set_alpha(max(0, min(255, int(255 * pt.life))))
            screen.blit(s, (bx + pt.x, by + pt.y))
        screen.set_clip(None)

    def draw_banner(self, screen: pygame.Surface, title: str, hint: str):
        r = self.board_rect
        shade = pygame.Surface(r.size, pygame.SRCALPHA)
        shade.fill((0,0,0,170))
        screen.blit(shade, r.topleft)
        t = self.big_font.render(title, True, (255,230,230))
        screen.blit(t, t.get_rect(center=(r.centerx, r.centery - 20)))
        h = self.font.render(hint, True, TEXT)
        screen.blit(h, h.get_rect(center=(r.centerx, r.centery + 18)))

    # ---------- HUD / Panel ----------
    def _preview(self, next_type: int) -> pygame.Surface:
        pc = self.dims.preview_cell
        s = pygame.Surface((pc*6, pc*6), pygame.SRCALPHA)
        shape = SHAPES[next_type]
        offx = (6 - len(shape[0])) // 2
        offy = (6 - len(shape)) // 2
        for y, row in enumerate(shape):
            for x, v in enumerate(row):
                if v:
                    block = pygame.Surface((pc, pc))
                    block.fill(COLORS[v])
                    pygame.draw.rect(block, (255,255,255), (0,0,pc,pc), 1)
                    s.blit(block, ((x + offx) * pc, (y + offy) * pc))
        return s

    def draw_panel_hud(self, screen: pygame.Surface, session):
        d = self.dims
        f = self.font
        h = self.hud
        if h.title is None:
            h.title = f.render("TETRIS", True, (197,202,233))
        if session.score != h.score:
            h.score = session.score
            h.score_s = f.render(f"Score: {session.score}", True, TEXT)
        if session.level != h.level:
            h.level = session.level
            h.level_s = f.render(f"Level: {session.level}", True, TEXT)
        if session.lines != h.lines:
            h.lines = session.lines
            h.lines_s = f.render(f"Lines: {session.lines}", True, TEXT)
        if session.sound_on != h.sound_on:
            h.sound_on = session.sound_on
            h.sound_s = f.render(f"Sound: {'ON' if session.sound_on else 'OFF'}", True, DIM_TEXT)
        if session.next_type != h.next_type:
            h.next_type = session.next_type
            h.next_preview = self._preview(session.next_type)
        screen.blit(h.title, (d.panel_x + 12, d.panel_y + 12))
        screen.blit(h.score_s, (d.panel_x + 12, d.panel_y + 44))
        screen.blit(h.level_s, (d.panel_x + 12, d.panel_y + 68))
        screen.blit(h.lines_s, (d.panel_x + 12, d.panel_y + 92))
        screen.blit(f.render("Next:", True, TEXT), (d.panel_x + 12, d.panel_y + 126))
        screen.blit(h.next_preview, (self.pv_x, self.pv_y))
        if not h.controls:
            h.controls = [
                f.render("Controls:", True, TEXT),
                f.render("←/→ Move", True, DIM_TEXT),
                f.render("↓ Soft drop", True, DIM_TEXT),
                f.render("↑ Rot CW • Z Rot CCW", True, DIM_TEXT),
                f.render("Space Hard drop", True, DIM_TEXT),
                f.render("P Pause • R Restart", True, DIM_TEXT),
                f.render("M Sound", True, DIM_TEXT),
            ]
        y = self.pv_y + d.preview_cell*6 + 24
        screen.blit(h.sound_s, (d.panel_x + 12, y)); y += 32
        for surf in h.controls:
            screen.blit(surf, (d.panel_x + 12, y)); y += 20
