# tetris_layout.py
from dataclasses import dataclass
from tetris_config import CONFIG

@dataclass
class Dims:
    cols: int
    rows: int
    block_w: int
    block_h: int
    margin: int
    board_w: int
    board_h: int
    total_w: int
    total_h: int
    board_x: int
    board_y: int

def compute_dims(cols: int = None, rows: int = None,
                 canvas_w: int = None, canvas_h: int = None) -> Dims:
    cols = cols or CONFIG["COLS"]
    rows = rows or CONFIG["ROWS"]
    canvas_w = canvas_w or CONFIG["CANVAS_WIDTH"]
    canvas_h = canvas_h or CONFIG["CANVAS_HEIGHT"]
    margin = 16

    # Blocks are sized so the grid fills the canvas exactly
    block_w = max(1, canvas_w // cols)
    block_h = max(1, canvas_h // rows)
    board_w = cols * block_w
    board_h = rows * block_h

    return Dims(
        cols=cols, rows=rows,
        block_w=block_w, block_h=block_h, margin=margin,
        board_w=board_w, board_h=board_h,
        total_w=margin + board_w + margin,
        total_h=margin + board_h + margin,
        board_x=margin, board_y=margin,
    )
