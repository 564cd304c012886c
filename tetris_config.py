
CONFIG = {
    "CELL_SIZE": 30,
    "PREVIEW_CELL_SIZE": 18,
    "FALL_INTERVAL_MS": 1000,
    "FALL_STEP_MS": 60,
    "FALL_MIN_MS": 60,
    "LINES_PER_LEVEL": 10,
    "SEED": None,
    "MODE": None,
}
