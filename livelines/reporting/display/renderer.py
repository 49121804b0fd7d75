"""Display rendering utilities.

Static helper functions for measuring the terminal and laying out the
status block. Widths are terminal columns, not characters: wide
characters (CJK, emoji) take two columns.
"""

import shutil
import unicodedata
from typing import List, Optional, Sequence, Tuple

from livelines.reporting.display import config


def char_width(ch: str) -> int:
    """Columns occupied by a single character (2 for wide, else 1)."""
    return 2 if unicodedata.east_asian_width(ch) in ("W", "F") else 1


def display_width(text: str) -> int:
    """Calculate terminal display width of a string.

    Args:
        text: String to measure

    Returns:
        Number of terminal columns the text occupies
    """
    return sum(char_width(ch) for ch in text)


def _head_to_width(text: str, width: int) -> Tuple[str, int]:
    """Longest prefix of *text* that fits in *width* columns, and its width."""
    used = 0
    end = 0
    for ch in text:
        w = char_width(ch)
        if used + w > width:
            break
        used += w
        end += 1
    return text[:end], used


def _tail_to_width(text: str, width: int) -> str:
    """Longest suffix of *text* that fits in *width* columns.

    The result is left-padded with spaces to exactly *width* columns.
    """
    used = 0
    start = len(text)
    while start > 0:
        w = char_width(text[start - 1])
        if used + w > width:
            break
        used += w
        start -= 1
    return " " * (width - used) + text[start:]


def get_terminal_width(fallback: int = config.DEFAULT_TERMINAL_WIDTH) -> int:
    """Get current terminal width, with fallback.

    Args:
        fallback: Columns to assume when the width cannot be determined
            (e.g. output is not an interactive terminal)

    Returns:
        Terminal width in columns.
    """
    try:
        columns = shutil.get_terminal_size(fallback=(fallback, 24)).columns
    except (ValueError, OSError):
        return fallback
    return columns if columns > 0 else fallback


def compute_name_width(names: Sequence[str]) -> int:
    """Return the width of the name column: the widest name in columns, or 0."""
    return max((display_width(name) for name in names), default=0)


def content_width(term_width: int, name_width: int) -> int:
    """Number of content columns that fit on one line.

    Args:
        term_width: Terminal width in columns
        name_width: Width of the name column

    Returns:
        Columns left for the line content (may be zero or negative on
        very narrow terminals).
    """
    return term_width - name_width - config.DECORATION_WIDTH


def fit_name(name: str, name_width: int) -> str:
    """Cut *name* to *name_width* columns and right-align it.

    Names longer than the column (streams added after the width was
    measured) are cut, never allowed to widen the column.
    """
    head, used = _head_to_width(name, name_width)
    return " " * (name_width - used) + head


def elide_line(line: str, max_width: int) -> str:
    """Keep the tail of *line* so it fits in *max_width* columns.

    Long lines are rendered as ``"..."`` plus their trailing characters,
    exactly *max_width* columns in total including the ellipsis. When a
    wide character would straddle the cut it is dropped and a space
    fills the gap.

    Examples:
        >>> elide_line("abcdefghijklmno", 9)
        '...jklmno'
        >>> elide_line("short", 9)
        'short'

    Args:
        line: Line content to fit
        max_width: Maximum columns allowed

    Returns:
        The line, unchanged if it already fits.
    """
    if max_width <= 0:
        return ""
    if display_width(line) <= max_width:
        return line
    if max_width <= len(config.ELLIPSIS):
        return _tail_to_width(line, max_width)
    return config.ELLIPSIS + _tail_to_width(line, max_width - len(config.ELLIPSIS))


def format_stream_line(name: str, line: str, name_width: int, max_width: int) -> str:
    """Format one stream's display line (without trailing newline).

    Produces ``<name right-aligned to name_width>> <content>``.
    """
    return f"{fit_name(name, name_width)}{config.NAME_SEPARATOR}{elide_line(line, max_width)}"


def build_block(
    rows: Sequence[Tuple[str, str]],
    name_width: int,
    term_width: Optional[int] = None,
) -> str:
    """Build the full status block for one render pass.

    Args:
        rows: (name, last_line) pairs in display order
        name_width: Width of the name column
        term_width: Terminal width (auto-detected if None)

    Returns:
        All lines joined, each terminated by a newline.
    """
    if term_width is None:
        term_width = get_terminal_width()
    max_width = content_width(term_width, name_width)

    lines: List[str] = [
        format_stream_line(name, line, name_width, max_width) + "\n"
        for name, line in rows
    ]
    return "".join(lines)


def erase_sequence(count: int) -> str:
    """Control codes that wipe the last *count* printed lines."""
    return config.ERASE_LINE * max(count, 0)
