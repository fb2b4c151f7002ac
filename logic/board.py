"""
Board for console TicTacToe.
Owns the 3x3 grid and answers the rule queries: valid move, win, full.
"""

from enum import Enum
from typing import List, Union
from dataclasses import dataclass

import numpy as np


# TicTacToe is a 3x3 grid
BOARD_SIZE = 3

# Column letters shown above the board
COLUMN_LABELS = "abc"


class InvalidMoveError(ValueError):
    """Raised when a move is applied without checking it first."""


class Cell(str, Enum):
    """The three states a board cell can be in."""
    EMPTY = " "
    X = "X"
    O = "O"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Move:
    """
    A move on the board.
    """
    row: int                # Row (0-2)
    col: int                # Column (0-2)


class Board:
    """
    The 3x3 TicTacToe board.

    Cells are kept row-major in a numpy character array. A cell goes from
    EMPTY to a symbol exactly once and is never reset during a game.
    """

    def __init__(self):
        self.grid = np.full((BOARD_SIZE, BOARD_SIZE), Cell.EMPTY.value, dtype="<U1")

    def cell(self, row: int, col: int) -> Cell:
        """Get the state of one cell."""
        return Cell(str(self.grid[row, col]))

    def is_valid_move(self, row: int, col: int) -> bool:
        """
        Check whether a move can be played.

        Args:
            row: Row index (0-2).
            col: Column index (0-2).

        Returns:
            True if both coordinates are on the board and the cell is empty.
        """
        # Range check first: numpy would accept negative indices
        if not (0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE):
            return False
        return bool(self.grid[row, col] == Cell.EMPTY.value)

    def apply_move(self, row: int, col: int, symbol: Union[Cell, str]):
        """
        Place a symbol on the board.

        The caller must check the move with is_valid_move() first.

        Args:
            row: Row index (0-2).
            col: Column index (0-2).
            symbol: Cell.X or Cell.O.

        Raises:
            InvalidMoveError: If the cell is off the board or already taken.
            ValueError: If symbol is not a player symbol.
        """
        symbol = Cell(symbol)
        if symbol is Cell.EMPTY:
            raise ValueError("Cannot place an empty cell")

        if not self.is_valid_move(row, col):
            raise InvalidMoveError(f"Cell ({row}, {col}) is not available")

        self.grid[row, col] = symbol.value

    def lines(self) -> List[np.ndarray]:
        """
        Get the 8 lines of the board.

        Returns:
            Rows 0-2, columns 0-2, main diagonal, anti-diagonal.
        """
        return [
            *self.grid,
            *self.grid.T,
            self.grid.diagonal(),
            np.fliplr(self.grid).diagonal(),
        ]

    def check_win(self, symbol: Union[Cell, str]) -> bool:
        """
        Check if a symbol has completed a line.

        Args:
            symbol: The symbol to check.

        Returns:
            True if any row, column or diagonal is all `symbol`.
        """
        symbol = Cell(symbol)
        if symbol is Cell.EMPTY:
            return False

        return any(bool(np.all(line == symbol.value)) for line in self.lines())

    def is_full(self) -> bool:
        """True if no empty cell remains."""
        return not bool(np.any(self.grid == Cell.EMPTY.value))

    def render(self) -> List[str]:
        """
        Render the board as printable rows.

        Returns:
            Header, borders and one line per board row.
        """
        border = "  +" + "---+" * BOARD_SIZE
        rows = ["", "    " + "   ".join(COLUMN_LABELS), border]

        for index, row in enumerate(self.grid):
            rows.append(f"{index + 1} | " + " | ".join(row) + " |")
            rows.append(border)

        return rows


# Quick test
if __name__ == "__main__":
    print("Testing Board...")

    board = Board()
    for row, col in [(0, 0), (0, 1), (0, 2)]:
        board.apply_move(row, col, Cell.X)

    print("\n".join(board.render()))
    print(f"X wins: {board.check_win(Cell.X)}")
    print(f"Board full: {board.is_full()}")

    print("\nBoard test done!")
