"""
Logic module for console TicTacToe.
Handles the board, rules, and turn order.
"""

__version__ = "1.0.0"

from .board import Board, Cell, Move, InvalidMoveError
from .game_state import GameState, GameStatus, Player, MoveSource
from .move_validator import MoveValidator, ValidationResult
from .game_loop import GameLoop, Display
