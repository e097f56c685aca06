"""
Rendering helpers. Reads engine snapshots only; never touches game state.

- Pre-render the static background (frame + grid) once per Dims.
- Pre-render one block Surface per color and blit it.
- Cache a board Surface of locked blocks; rebuild it only when the grid changes.
"""
from typing import Dict, Optional, Tuple
import pygame
from tetris_engine import Snapshot
from tetris_layout import Dims
from tetris_piece import COLORS

Color = Tuple[int,int,int]


class RenderAssets:
    """Holds pre-rendered assets for fast blitting."""
    def __init__(self, dims: Dims, font: pygame.font.Font):
        self.dims = dims
        self.font = font
        self._make_static()
        self.cell_surf: Dict[Color, pygame.Surface] = {}
        self.board_surface = pygame.Surface((dims.board_w, dims.board_h), pygame.SRCALPHA)
        self._board_cells = None
        self.game_over_s: Optional[pygame.Surface] = None

    def _make_static(self):
        d = self.dims
        self.bg = pygame.Surface((d.total_w, d.total_h))
        self.bg.fill((10,13,34))
        grid_col = (40,50,90)
        for x in range(d.cols+1):
            X = d.board_x + x*d.block_w
            pygame.draw.line(self.bg, grid_col, (X, d.board_y), (X, d.board_y + d.board_h))
        for y in range(d.rows+1):
            Y = d.board_y + y*d.block_h
            pygame.draw.line(self.bg, grid_col, (d.board_x, Y), (d.board_x + d.board_w, Y))

    def block(self, color: Color) -> pygame.Surface:
        s = self.cell_surf.get(color)
        if s is None:
            s = pygame.Surface((self.dims.block_w-2, self.dims.block_h-2))
            s.fill(color)
            self.cell_surf[color] = s
        return s

    def rebuild_board_surface(self, snap: Snapshot):
        """Redraws the locked blocks from snapshot cells."""
        self.board_surface.fill((0,0,0,0))
        d = self.dims
        for y in range(snap.height):
            for x in range(snap.width):
                col = snap.color_at(x, y, COLORS)
                if col:
                    self.board_surface.blit(self.block(col), (x*d.block_w + 1, y*d.block_h + 1))
        self._board_cells = snap.cells

    def draw(self, screen: pygame.Surface, snap: Snapshot):
        d = self.dims
        if snap.cells is not self._board_cells:
            self.rebuild_board_surface(snap)
        screen.blit(self.bg, (0,0))
        screen.blit(self.board_surface, (d.board_x, d.board_y))
        blk = self.block(snap.piece_color)
        for x, y in snap.piece_cells:
            if y >= 0:
                screen.blit(blk, (d.board_x + x*d.block_w + 1, d.board_y + y*d.block_h + 1))
        if snap.game_over:
            if self.game_over_s is None:
                self.game_over_s = self.font.render("GAME OVER (R)", True, (255,220,220))
            rect = self.game_over_s.get_rect(center=(d.board_x + d.board_w // 2, d.board_y + d.board_h // 2))
            screen.blit(self.game_over_s, rect)
