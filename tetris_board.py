"""Board value and the collision validator"""
from dataclasses import dataclass
from typing import List, Optional, Tuple

from tetris_piece import ActivePiece, Shape

Cell = Optional[str]   # None or the name of the piece kind that locked there
Grid = Tuple[Tuple[Cell, ...], ...]


@dataclass(frozen=True)
class Board:
    width: int
    height: int
    rows: Grid

    @staticmethod
    def empty(width: int, height: int) -> "Board":
        assert width > 0 and height > 0, "board dimensions must be positive"
        return Board(width, height, tuple((None,) * width for _ in range(height)))

    def in_bounds(self, col: int, row: int) -> bool:
        return 0 <= col < self.width and 0 <= row < self.height

    def cell(self, col: int, row: int) -> Cell:
        assert self.in_bounds(col, row), f"cell ({col},{row}) outside {self.width}x{self.height} board"
        return self.rows[row][col]

    def is_occupied(self, col: int, row: int) -> bool:
        return self.cell(col, row) is not None

    def locked(self, piece: ActivePiece) -> "Board":
        """Return a new board with the piece merged in. Sub-cells above row 0 are dropped."""
        grid = [list(r) for r in self.rows]
        for x, y in piece.cells():
            if y < 0:
                continue
            assert self.in_bounds(x, y), f"locking out of bounds at ({x},{y})"
            grid[y][x] = piece.kind.name
        return Board(self.width, self.height, tuple(tuple(r) for r in grid))

    def full_rows(self) -> List[int]:
        return [y for y, r in enumerate(self.rows) if all(c is not None for c in r)]

    def occupied_count(self) -> int:
        return sum(c is not None for r in self.rows for c in r)


def is_valid_placement(shape: Shape, origin: Tuple[int, int], board: Board) -> bool:
    """True if every 1-bit of shape at origin is inside the walls, above the floor
    and on an empty cell. Sub-cells above row 0 only need to be between the walls."""
    ox, oy = origin
    for r, row in enumerate(shape):
        for c, v in enumerate(row):
            if not v:
                continue
            bx, by = ox + c, oy + r
            if bx < 0 or bx >= board.width or by >= board.height:
                return False
            if by >= 0 and board.rows[by][bx] is not None:
                return False
    return True


def piece_fits(board: Board, piece: ActivePiece) -> bool:
    return is_valid_placement(piece.shape, (piece.x, piece.y), board)
