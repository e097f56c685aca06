import pytest

from tetris_board import Board
from tetris_piece import ShapeCatalog, default_kinds
from tetris_rng import PieceRandom


def only(name):
    """Catalog that always spawns the named kind."""
    return ShapeCatalog(kinds=[k for k in default_kinds() if k.name == name])


@pytest.fixture
def board():
    return Board.empty(10, 20)


@pytest.fixture
def o_catalog():
    return only("O")


@pytest.fixture
def seeded_catalog():
    return ShapeCatalog(rng=PieceRandom(1234))
