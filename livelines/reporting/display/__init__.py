"""Display package for the live status block.

Layout helpers and constants used by the Aggregator's render loop.
"""

from livelines.reporting.display.renderer import (
    build_block,
    display_width,
    elide_line,
    erase_sequence,
    get_terminal_width,
)

__all__ = [
    "build_block",
    "display_width",
    "elide_line",
    "erase_sequence",
    "get_terminal_width",
]
