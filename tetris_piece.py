"""Piece model: shape catalog, rotation cycle, active piece"""
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence, Tuple

from tetris_rng import PieceRandom

Shape = Tuple[Tuple[int, ...], ...]

# Rotation states in minimal bounding boxes, cycled in order.
SHAPES: Dict[str, List[List[List[int]]]] = {
    "I": [[[1,1,1,1]],
          [[1],[1],[1],[1]]],
    "O": [[[1,1],[1,1]]],
    "T": [[[0,1,0],[1,1,1]],
          [[1,0],[1,1],[1,0]],
          [[1,1,1],[0,1,0]],
          [[0,1],[1,1],[0,1]]],
    "S": [[[0,1,1],[1,1,0]],
          [[1,0],[1,1],[0,1]]],
    "Z": [[[1,1,0],[0,1,1]],
          [[0,1],[1,1],[1,0]]],
    "J": [[[1,0,0],[1,1,1]],
          [[1,1],[1,0],[1,0]],
          [[1,1,1],[0,0,1]],
          [[0,1],[0,1],[1,1]]],
    "L": [[[0,0,1],[1,1,1]],
          [[1,0],[1,0],[1,1]],
          [[1,1,1],[1,0,0]],
          [[1,1],[0,1],[0,1]]],
}

COLORS: Dict[str, Tuple[int,int,int]] = {
    "I": (102,224,255),
    "J": (106,119,255),
    "L": (255,158,94),
    "O": (255,224,102),
    "S": (94,224,142),
    "T": (200,119,255),
    "Z": (255,102,119),
}


def freeze(mat: Sequence[Sequence[int]]) -> Shape:
    return tuple(tuple(1 if v else 0 for v in row) for row in mat)


@dataclass(frozen=True)
class PieceKind:
    name: str
    rotations: Tuple[Shape, ...]
    color: Tuple[int,int,int]

    def __post_init__(self):
        assert 1 <= len(self.rotations) <= 4, f"{self.name}: need 1-4 rotation states"
        for s in self.rotations:
            assert s and any(any(row) for row in s), f"{self.name}: empty shape"
            assert all(len(row) == len(s[0]) for row in s), f"{self.name}: ragged shape"


def default_kinds() -> Tuple[PieceKind, ...]:
    return tuple(PieceKind(t, tuple(freeze(m) for m in SHAPES[t]), COLORS[t]) for t in SHAPES)


@dataclass(frozen=True)
class ActivePiece:
    """The falling piece. Replaced, never mutated, on every accepted transform."""
    kind: PieceKind
    rotation: int
    x: int
    y: int

    @property
    def shape(self) -> Shape:
        return self.kind.rotations[self.rotation]

    @property
    def color(self) -> Tuple[int,int,int]:
        return self.kind.color

    def cells(self) -> List[Tuple[int,int]]:
        """Absolute (col, row) of every occupied sub-cell, including rows above the board."""
        return [(self.x + c, self.y + r)
                for r, row in enumerate(self.shape)
                for c, v in enumerate(row) if v]

    def moved(self, dx: int, dy: int) -> "ActivePiece":
        return ActivePiece(self.kind, self.rotation, self.x + dx, self.y + dy)

    def with_rotation(self, rotation: int) -> "ActivePiece":
        return ActivePiece(self.kind, rotation, self.x, self.y)


class ShapeCatalog:
    """Fixed library of piece kinds plus the randomness used to spawn them."""
    def __init__(self, kinds: Optional[Sequence[PieceKind]] = None, rng: Optional[PieceRandom] = None):
        self.kinds: Tuple[PieceKind, ...] = tuple(kinds) if kinds else default_kinds()
        self._by_name = {k.name: k for k in self.kinds}
        assert len(self._by_name) == len(self.kinds), "duplicate piece kind names"
        self.rng = rng if rng is not None else PieceRandom()

    def kind(self, name: str) -> PieceKind:
        return self._by_name[name]

    def rotations_of(self, kind: PieceKind) -> Tuple[Shape, ...]:
        return kind.rotations

    def next_rotation(self, kind: PieceKind, index: int) -> int:
        return (index + 1) % len(kind.rotations)

    def spawn(self, width: int) -> ActivePiece:
        """Random kind, rotation 0, horizontally centered at row 0."""
        kind = self.kind(self.rng.next_kind([k.name for k in self.kinds]))
        w = len(kind.rotations[0][0])
        return ActivePiece(kind, 0, (width - w) // 2, 0)
