"""
Move validator for console TicTacToe.
Explains why a move is rejected so the player can be told.
"""

from typing import Optional
from dataclasses import dataclass

from .board import Board, Move, BOARD_SIZE


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error_message: Optional[str] = None


class MoveValidator:
    """
    Validates TicTacToe moves.

    Rules:
    1. Row and column must be on the board
    2. Can only place on empty cells
    """

    def validate_move(self, board: Board, move: Move) -> ValidationResult:
        """
        Validate a move.

        Args:
            board: Current board.
            move: The move to check.

        Returns:
            ValidationResult with is_valid and error_message.
        """
        if board.is_valid_move(move.row, move.col):
            return ValidationResult(is_valid=True)

        if not (0 <= move.row < BOARD_SIZE and 0 <= move.col < BOARD_SIZE):
            return ValidationResult(
                is_valid=False,
                error_message=f"Invalid position ({move.row}, {move.col}). Out of range."
            )

        return ValidationResult(
            is_valid=False,
            error_message="Invalid move. That cell is already taken."
        )


# Quick test
if __name__ == "__main__":
    print("Testing MoveValidator...")

    board = Board()
    validator = MoveValidator()

    result = validator.validate_move(board, Move(1, 1))
    print(f"Move (1,1): valid={result.is_valid}, error={result.error_message}")

    board.apply_move(1, 1, "X")

    result = validator.validate_move(board, Move(1, 1))
    print(f"Move (1,1) again: valid={result.is_valid}, error={result.error_message}")

    result = validator.validate_move(board, Move(5, 5))
    print(f"Move (5,5): valid={result.is_valid}, error={result.error_message}")

    print("\nMoveValidator test done!")
