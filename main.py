"""
Main entry point for console TicTacToe.

This script ties together:
- Logic (board, move validation, turn order)
- Console (move parsing, prompts, board printing)

Run this script to play TicTacToe against a friend on one terminal!
"""

import argparse
import sys
from typing import List, Optional

# Logic imports
from logic.game_loop import GameLoop
from logic.game_state import GameState, Player

# Console imports
from console_io.config import ConsoleConfig
from console_io.terminal import Console


def play_game(
    console: Console,
    p1_name: str = ConsoleConfig.P1_NAME,
    p2_name: str = ConsoleConfig.P2_NAME
) -> GameState:
    """
    Play one game between two humans at the same console.

    Args:
        console: An opened console.
        p1_name: Name of the player who moves first.
        p2_name: Name of the second player.

    Returns:
        The final game state.
    """
    config = console.config
    players = [
        Player(p1_name, config.P1_SYMBOL, console.move_source(p1_name, config.P1_SYMBOL)),
        Player(p2_name, config.P2_SYMBOL, console.move_source(p2_name, config.P2_SYMBOL)),
    ]

    game = GameLoop(players, console)
    return game.run()


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Two-player TicTacToe in the terminal")
    parser.add_argument(
        "--p1-name",
        default=ConsoleConfig.P1_NAME,
        help=f"Name of player 1, who plays {ConsoleConfig.P1_SYMBOL} and moves first"
    )
    parser.add_argument(
        "--p2-name",
        default=ConsoleConfig.P2_NAME,
        help=f"Name of player 2, who plays {ConsoleConfig.P2_SYMBOL}"
    )
    parser.add_argument(
        "--moves-file",
        default=None,
        help="Read moves from this file (one per line) instead of the keyboard"
    )
    parser.add_argument(
        "--no-clear",
        action="store_true",
        help="Don't clear the screen before drawing the board"
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = parse_args(argv)

    console = Console(
        moves_file=args.moves_file,
        clear_screen=False if args.no_clear else None
    )

    try:
        with console:
            if not console.is_opened:
                return 1
            play_game(console, args.p1_name, args.p2_name)
    except KeyboardInterrupt:
        console.show_message("\n\nGame interrupted by user.")
        return 1
    except EOFError:
        console.show_message("\n\nInput ended before the game finished.")
        return 1
    finally:
        console.show_message("Goodbye!")

    return 0


if __name__ == "__main__":
    sys.exit(main())
