CONFIG = {
    "COLS": 10,
    "ROWS": 20,
    "TICK_MS": 500,
    "CANVAS_WIDTH": 200,
    "CANVAS_HEIGHT": 400,
    "SEED": None,
    "LOG_LEVEL": "INFO",
}
