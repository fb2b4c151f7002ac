"""
Move parser for console TicTacToe.
Turns text like "2b" into a board Move.
"""

from typing import Optional

from logic.board import Move
from .config import ConsoleConfig


def parse_move(text: str) -> Optional[Move]:
    """
    Parse a move typed by a player.

    A move is a row digit (1-3) followed by a column letter (a-c),
    case-insensitive, surrounding whitespace ignored.

    Args:
        text: Raw input line.

    Returns:
        The Move, or None if the text is malformed.
    """
    text = text.strip().lower()
    if len(text) != 2:
        return None

    row = ConsoleConfig.ROW_KEYS.get(text[0])
    col = ConsoleConfig.COL_KEYS.get(text[1])

    if row is None or col is None:
        return None

    return Move(row, col)


# Quick test
if __name__ == "__main__":
    for sample in ["2b", "1A", " 3c ", "4a", "2d", "xx", "b2", ""]:
        print(f"{sample!r:8} -> {parse_move(sample)}")
