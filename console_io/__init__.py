"""
Console module for TicTacToe.
Handles move parsing, prompts and printing the board.
"""

from .config import ConsoleConfig
from .parser import parse_move
from .terminal import Console
