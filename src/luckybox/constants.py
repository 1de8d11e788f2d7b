EMPTY = 0
BOARD_COLS = 3
SLOT_COUNT = 9

# Color ids are 1-based positions in this tuple.
COLOR_NAMES = (
    "Red", "Yellow", "Purple", "Orange", "Green",
    "Cyan", "Pink", "Blue", "Brown", "Magenta",
)

# Rich styles used when drawing each color on the console board.
COLOR_STYLES = {
    "Red": "bold red",
    "Yellow": "bold yellow",
    "Purple": "bold purple",
    "Orange": "bold orange1",
    "Green": "bold green",
    "Cyan": "bold cyan",
    "Pink": "bold pink1",
    "Blue": "bold blue",
    "Brown": "bold orange4",
    "Magenta": "bold magenta",
}
EMPTY_LABEL = "Empty"

# Toys per package offered at the start of a session.
PACKAGE_SIZES = (9, 18, 30)

# Lines of three slots that score a Lucky Strike, in scan order.
# Columns, rows, then the two "diagonals". (2, 3, 6) is game data, not (2, 4, 6).
TRIPLE_LINES = (
    (0, 3, 6),
    (1, 4, 7),
    (2, 5, 8),
    (0, 1, 2),
    (3, 4, 5),
    (6, 7, 8),
    (0, 4, 8),
    (2, 3, 6),
)

# Environment variables read by the console entry point.
ENV_SEED = "LUCKYBOX_SEED"
ENV_LOG_LEVEL = "LUCKYBOX_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"
