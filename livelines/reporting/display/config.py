"""Display configuration constants.

Centralizes magic numbers and control sequences for the live display.
"""

# Refresh settings
DEFAULT_REFRESH_INTERVAL = 0.05  # Seconds between redraws (50ms)

# Terminal defaults
DEFAULT_TERMINAL_WIDTH = 80

# Separator printed between the name column and the line content
NAME_SEPARATOR = "> "

# Columns reserved beyond the name column: separator plus right margin
DECORATION_WIDTH = 6

# Prefix for lines elided from the left
ELLIPSIS = "..."

# Cursor up one row, clear the row, carriage return
ESC = "\033"
CURSOR_UP = f"{ESC}[1A"
CLEAR_LINE = f"{ESC}[2K"
ERASE_LINE = f"{CURSOR_UP}{CLEAR_LINE}\r"
