"""
Console configuration for TicTacToe.
Prompt texts, player defaults and terminal settings.
"""

from logic.board import Cell


class ConsoleConfig:
    """
    Configuration class for the console front end.
    Command line flags override some of these values.
    """

    # ==================== PLAYERS ====================
    # Player 1 moves first
    P1_NAME = "P1"
    P1_SYMBOL = Cell.O
    P2_NAME = "P2"
    P2_SYMBOL = Cell.X

    # ==================== INPUT ====================
    # Row digits and column letters accepted by the move parser
    ROW_KEYS = {"1": 0, "2": 1, "3": 2}
    COL_KEYS = {"a": 0, "b": 1, "c": 2}

    PROMPT_TEMPLATE = "{name} ({symbol}) - enter your move (e.g., 1a, 2c): "
    FORMAT_HINT = "Invalid format. Please use row(1-3) + column(a-c), like 2b."

    # Echo each move read from a moves file so the transcript reads like a game
    ECHO_FILE_INPUT = True

    # ==================== OUTPUT ====================
    # Clear the terminal before drawing the board
    CLEAR_SCREEN = True
    CLEAR_SEQUENCE = "\033[2J\033[H"
