"""Transition engine: pure (state, event) -> state rules for move, rotate, lock and spawn.

Every function here takes a GameState and returns a GameState. A rejected move
returns the very same object, so callers can test ``new is old`` to tell a
rejection from an accepted transform. The only randomness comes from the
ShapeCatalog passed in.
"""
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from tetris_board import Board, Grid, is_valid_placement, piece_fits
from tetris_piece import ActivePiece, ShapeCatalog

logger = logging.getLogger(__name__)


class Phase(Enum):
    FALLING = "falling"
    LOCKING = "locking"     # only ever seen inside lock_and_spawn
    GAME_OVER = "game_over"


class Command(Enum):
    LEFT = "left"
    RIGHT = "right"
    DOWN = "down"
    ROTATE = "rotate"


@dataclass(frozen=True)
class Tick:
    """Periodic gravity event. Carries no payload."""


TICK = Tick()

DIRECTIONS = {
    Command.LEFT: (-1, 0),
    Command.RIGHT: (1, 0),
    Command.DOWN: (0, 1),
}


@dataclass(frozen=True)
class GameState:
    board: Board
    piece: ActivePiece
    game_over: bool = False

    @property
    def phase(self) -> Phase:
        return Phase.GAME_OVER if self.game_over else Phase.FALLING


def new_game(catalog: ShapeCatalog, width: int, height: int) -> GameState:
    board = Board.empty(width, height)
    piece = catalog.spawn(width)
    state = GameState(board, piece, not piece_fits(board, piece))
    logger.debug("new game %dx%d, first piece %s at (%d,%d)", width, height, piece.kind.name, piece.x, piece.y)
    return state


def lock_and_spawn(state: GameState, catalog: ShapeCatalog) -> GameState:
    """Merge the active piece into the board, then install a fresh piece.
    If the fresh piece does not fit the updated board the game is over."""
    piece = state.piece
    logger.debug("%s: locking %s at (%d,%d)", Phase.LOCKING.value, piece.kind.name, piece.x, piece.y)
    board = state.board.locked(piece)
    nxt = catalog.spawn(board.width)
    if not piece_fits(board, nxt):
        logger.info("game over: %s cannot spawn at (%d,%d)", nxt.kind.name, nxt.x, nxt.y)
        return GameState(board, nxt, True)
    logger.debug("spawned %s at (%d,%d)", nxt.kind.name, nxt.x, nxt.y)
    return GameState(board, nxt, False)


def attempt_move(state: GameState, direction: Command, catalog: ShapeCatalog) -> GameState:
    if state.game_over:
        return state
    dx, dy = DIRECTIONS[direction]
    piece = state.piece
    if is_valid_placement(piece.shape, (piece.x + dx, piece.y + dy), state.board):
        return GameState(state.board, piece.moved(dx, dy), False)
    if direction is Command.DOWN:
        return lock_and_spawn(state, catalog)
    return state


def attempt_rotate(state: GameState, catalog: ShapeCatalog) -> GameState:
    if state.game_over:
        return state
    piece = state.piece
    nxt = piece.with_rotation(catalog.next_rotation(piece.kind, piece.rotation))
    if piece_fits(state.board, nxt):
        return GameState(state.board, nxt, False)
    return state


def reduce(state: GameState, event, catalog: ShapeCatalog) -> GameState:
    """Apply one tick or command. Anything else leaves the state alone."""
    if state.game_over:
        return state
    if isinstance(event, Tick):
        return attempt_move(state, Command.DOWN, catalog)
    if event is Command.ROTATE:
        return attempt_rotate(state, catalog)
    if isinstance(event, Command):
        return attempt_move(state, event, catalog)
    logger.debug("ignoring unknown event %r", event)
    return state


@dataclass(frozen=True)
class Snapshot:
    """Read-only view handed to renderers after each processed event."""
    width: int
    height: int
    cells: Grid
    piece_kind: str
    piece_cells: Tuple[Tuple[int, int], ...]
    piece_color: Tuple[int, int, int]
    game_over: bool
    locked_pieces: int = 0

    def color_at(self, col: int, row: int, colors: dict) -> Optional[Tuple[int, int, int]]:
        t = self.cells[row][col]
        return colors[t] if t is not None else None


def snapshot(state: GameState, locked_pieces: int = 0) -> Snapshot:
    p = state.piece
    return Snapshot(
        width=state.board.width, height=state.board.height,
        cells=state.board.rows,
        piece_kind=p.kind.name,
        piece_cells=tuple(p.cells()),
        piece_color=p.color,
        game_over=state.game_over,
        locked_pieces=locked_pieces,
    )
