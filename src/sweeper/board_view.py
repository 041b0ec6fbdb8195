"""
Text rendering of board snapshots.
"""
from typing import List, Sequence

from .cell import DisplayValue


def draw_board(snapshot: Sequence[Sequence[DisplayValue]]) -> str:
    """
    Render display values as a framed text grid.

    An empty 2x1 board becomes:

        +-+-+
        | | |
        +-+-+

    Args:
        snapshot: Rows of display values, e.g. from Game.snapshot().

    Returns:
        Board text without a trailing newline.
    """
    if not snapshot:
        return ""
    separator = "+" + "-+" * len(snapshot[0])
    lines: List[str] = [separator]
    for row in snapshot:
        lines.append("|" + "".join(f"{value}|" for value in row))
        lines.append(separator)
    return "\n".join(lines)
