"""
Terminal module for console TicTacToe.
Handles reading moves from the player and printing the board.
"""

import sys
from typing import List, Optional, TextIO

from logic.board import Board, Cell, Move
from logic.game_state import MoveSource
from .config import ConsoleConfig
from .parser import parse_move


class Console:
    """
    Console wrapper around an input and an output stream.

    Use it as a context manager so a moves file is always closed:

        with Console() as console:
            ...
    """

    def __init__(
        self,
        config: Optional[ConsoleConfig] = None,
        input_stream: Optional[TextIO] = None,
        output_stream: Optional[TextIO] = None,
        moves_file: Optional[str] = None,
        clear_screen: Optional[bool] = None
    ):
        """
        Initialize the console.

        Args:
            config: Console configuration. Uses defaults if not provided.
            input_stream: Where moves are read from. Defaults to stdin.
            output_stream: Where the board and messages go. Defaults to stdout.
            moves_file: Read moves from this file instead of input_stream.
            clear_screen: Clear the terminal before each board. Uses config if not provided.
        """
        self.config = config or ConsoleConfig()
        self.input = input_stream
        self.output = output_stream or sys.stdout
        self.moves_file = moves_file
        self.clear_screen = self.config.CLEAR_SCREEN if clear_screen is None else clear_screen
        self._owned_input: Optional[TextIO] = None
        self.is_opened = False

    def open(self) -> bool:
        """
        Open the console.

        Returns:
            True if the input is ready, False otherwise.
        """
        if self.moves_file is not None:
            try:
                self._owned_input = open(self.moves_file, "r", encoding="utf-8")
            except OSError as e:
                self.show_message(f"ERROR: Could not open moves file {self.moves_file}: {e}")
                return False
            self.input = self._owned_input
        elif self.input is None:
            self.input = sys.stdin

        self.is_opened = True
        return True

    def close(self):
        """Close the console and release the moves file."""
        if self._owned_input is not None:
            self._owned_input.close()
            self._owned_input = None
        self.output.flush()
        self.is_opened = False

    def read_line(self, prompt: str) -> str:
        """
        Show a prompt and read one line.

        Raises:
            EOFError: If the input has run out.
        """
        if not self.is_opened:
            raise RuntimeError("Console is not opened!")

        self.output.write(prompt)
        self.output.flush()

        line = self.input.readline()
        if not line:
            raise EOFError("No more input")

        if self._owned_input is not None and self.config.ECHO_FILE_INPUT:
            self.output.write(line if line.endswith("\n") else line + "\n")

        return line

    def request_move(self, prompt: str) -> Move:
        """
        Ask until the player types a well-formed move.

        Args:
            prompt: Text shown before each attempt.

        Returns:
            The parsed Move. Its cell may still be taken.
        """
        while True:
            move = parse_move(self.read_line(prompt))
            if move is not None:
                return move
            self.show_message(self.config.FORMAT_HINT)

    def move_source(self, name: str, symbol: Cell) -> MoveSource:
        """
        Get a move source that asks a human at this console.

        Args:
            name: Player name shown in the prompt.
            symbol: Player symbol shown in the prompt.
        """
        prompt = self.config.PROMPT_TEMPLATE.format(name=name, symbol=symbol)

        def choose_move(board: Board) -> Move:
            return self.request_move(prompt)

        return choose_move

    def show_board(self, rows: List[str]):
        """Print the board rows."""
        if self.clear_screen:
            self.output.write(self.config.CLEAR_SEQUENCE)
        print("\n".join(rows), file=self.output)

    def show_message(self, text: str):
        """Print a status or error message."""
        print(text, file=self.output)

    def __enter__(self):
        """Context manager entry."""
        self.open()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()


# Quick test
if __name__ == "__main__":
    print("Testing console...")

    with Console(clear_screen=False) as console:
        console.show_board(Board().render())
        move = console.request_move("Enter a move (e.g., 2b): ")
        print(f"Parsed: {move}")

    print("Console test done!")
