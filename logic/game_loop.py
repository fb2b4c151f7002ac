"""
Game loop for console TicTacToe.
Alternates turns between two players until someone wins or the board fills.
"""

from typing import List, Optional, Protocol, Sequence

from .board import Board, Cell
from .game_state import GameState, Player
from .move_validator import MoveValidator


class Display(Protocol):
    """Where the loop sends the board and status messages."""

    def show_board(self, rows: List[str]) -> None:
        ...

    def show_message(self, text: str) -> None:
        ...


class GameLoop:
    """
    Runs one game of TicTacToe.

    Game flow:
    1. Current player supplies a move
    2. Invalid move -> report it, same player goes again
    3. Valid move -> apply it, then check for a win, then for a full board
    4. Otherwise the other player's turn
    """

    def __init__(
        self,
        players: Sequence[Player],
        display: Display,
        board: Optional[Board] = None
    ):
        """
        Initialize the game.

        Args:
            players: Exactly two players with different symbols.
            display: Receives the board and status messages.
            board: Board to play on. A new empty board if not provided.
        """
        if len(players) != 2:
            raise ValueError(f"TicTacToe needs 2 players, got {len(players)}")

        try:
            symbols = {Cell(player.symbol) for player in players}
        except ValueError:
            symbols = set()

        if symbols != {Cell.X, Cell.O}:
            raise ValueError("Players need distinct X and O symbols")

        self.players = list(players)
        self.display = display
        self.board = board or Board()
        self.state = GameState()
        self.validator = MoveValidator()

    @property
    def current_player(self) -> Player:
        return self.players[self.state.current_index]

    def play_turn(self) -> bool:
        """
        Ask the current player for one move and resolve it.

        Returns:
            True if the move was applied, False if it was rejected.
        """
        if self.state.is_game_over:
            raise RuntimeError("Game is already over!")

        player = self.current_player
        move = player.choose_move(self.board)

        result = self.validator.validate_move(self.board, move)
        if not result.is_valid:
            # Same player goes again
            self.display.show_message(result.error_message)
            return False

        self.board.apply_move(move.row, move.col, player.symbol)
        self.display.show_board(self.board.render())

        if self.board.check_win(player.symbol):
            self.state.declare_win(player)
            self.display.show_message(f"{player} wins!")
        elif self.board.is_full():
            self.state.declare_draw()
            self.display.show_message("It's a draw!")
        else:
            self.state.switch_turn()

        return True

    def run(self) -> GameState:
        """
        Play until the game is won or drawn.

        Returns:
            The final game state.
        """
        self.display.show_board(self.board.render())

        while not self.state.is_game_over:
            self.play_turn()

        return self.state
