"""Grid-size limits shared by the CLI and the terminal menu."""

MIN_SIZE = 2
MAX_SIZE = 8
DEFAULT_SIZE = 3

# Sizes offered by the menu picker before the arrows widen the range.
MENU_SIZES = (3, 4, 5)
