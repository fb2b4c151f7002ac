"""
Game state management for console TicTacToe.
Tracks the players, whose turn it is, and how the game ended.
"""

from enum import Enum
from typing import Callable, Optional
from dataclasses import dataclass

from .board import Board, Cell, Move


# Anything that, given the current board, supplies the next move
MoveSource = Callable[[Board], Move]


class GameStatus(Enum):
    """Where the game is in its lifecycle."""
    IN_PROGRESS = "in_progress"
    WON = "won"
    DRAW = "draw"

    @property
    def is_terminal(self) -> bool:
        return self is not GameStatus.IN_PROGRESS


@dataclass(frozen=True)
class Player:
    """
    One of the two players.
    """
    name: str                   # Display name, e.g. "P1"
    symbol: Cell                # Cell.X or Cell.O
    choose_move: MoveSource     # Asked for a move on this player's turn

    def __str__(self) -> str:
        return f"{self.name} ({self.symbol})"


@dataclass
class GameState:
    """
    Turn and result of a single game.

    Only moves forward: IN_PROGRESS -> WON or IN_PROGRESS -> DRAW.
    """

    # Index of the player whose turn it is (0 or 1)
    current_index: int = 0

    # Game result
    status: GameStatus = GameStatus.IN_PROGRESS
    winner: Optional[Player] = None

    @property
    def is_game_over(self) -> bool:
        return self.status.is_terminal

    def switch_turn(self):
        """Give the turn to the other player."""
        self._require_in_progress()
        self.current_index = 1 - self.current_index

    def declare_win(self, player: Player):
        """End the game with a winner."""
        self._require_in_progress()
        self.status = GameStatus.WON
        self.winner = player

    def declare_draw(self):
        """End the game without a winner."""
        self._require_in_progress()
        self.status = GameStatus.DRAW

    def _require_in_progress(self):
        if self.is_game_over:
            raise RuntimeError("Game is already over!")
