"""
cli.py - Command-line front end for Connect Four

Two commands:
    play    two people take turns at one terminal
    replay  drop a comma separated list of columns and report each result

The CLI only translates input into drop_piece() calls and prints what the
game reports back through a GameListener.
"""

import argparse
import sys
from typing import Callable, List, Optional

from connectfour.debug import DebugLevel, debug
from connectfour.game.rules import (GameListener, GameState, Placed, Player, Rejected,
                                    RejectReason, Status, new_game)
from connectfour.utils import DEFAULT_HEIGHT, DEFAULT_WIDTH

REJECT_MESSAGES = {
    RejectReason.INVALID_COLUMN: "That column does not exist.",
    RejectReason.COLUMN_FULL: "That column is full.",
    RejectReason.GAME_OVER: "The game is over.",
    RejectReason.INVALID_DIMENSIONS: "The board must be at least 4x4.",
}


class ConsoleListener(GameListener):
    """Prints game notifications."""

    def __init__(self, out: Callable[[str], None] = print):
        self.out = out

    def piece_landed(self, game: GameState, row: int, column: int, player: Player) -> None:
        self.out(f"{player} dropped into column {column} (row {row})")

    def game_ended(self, game: GameState, status: Status, winner: Optional[Player]) -> None:
        if status == Status.WON:
            self.out(f"Player {winner} won!")
        else:
            self.out("TIE!")


class SimpleCLI:
    """Simple command-line interface for Connect Four."""

    def __init__(self, input_fn: Callable[[str], str] = input,
                 output_fn: Callable[[str], None] = print):
        self.input = input_fn
        self.out = output_fn
        self.args = None
        self.game: Optional[GameState] = None

    def parse_args(self, argv: Optional[List[str]] = None) -> argparse.Namespace:
        """Parse command-line arguments."""
        parser = argparse.ArgumentParser(prog='connectfour', description='Connect Four')

        common = argparse.ArgumentParser(add_help=False)
        common.add_argument('--height', type=int, default=DEFAULT_HEIGHT, help='Number of rows')
        common.add_argument('--width', type=int, default=DEFAULT_WIDTH, help='Number of columns')
        common.add_argument('--player1', default='', help='First player name')
        common.add_argument('--marker1', default='red', help='First player marker')
        common.add_argument('--player2', default='', help='Second player name')
        common.add_argument('--marker2', default='blue', help='Second player marker')
        common.add_argument('--debug', action='store_true', help='Enable debug logging')
        common.add_argument('--debug-level', default=None,
                            choices=[level.name.lower() for level in DebugLevel],
                            help='Logging level')

        subparsers = parser.add_subparsers(dest='command', help='Command to run')
        subparsers.add_parser('play', parents=[common], help='Play a game interactively')
        replay_parser = subparsers.add_parser('replay', parents=[common],
                                              help='Drop a list of columns')
        replay_parser.add_argument('--moves', required=True,
                                   help='Comma separated column indices, e.g. 0,1,0,1')

        self.args = parser.parse_args(argv)

        if getattr(self.args, 'debug', False):
            debug.configure(level=DebugLevel.DEBUG)
        elif getattr(self.args, 'debug_level', None):
            debug.set_from_string(self.args.debug_level)

        return self.args

    def run(self, argv: Optional[List[str]] = None) -> int:
        """Run the CLI; returns the process exit status."""
        if argv is not None or not self.args:
            self.parse_args(argv)

        if self.args.command not in ('play', 'replay'):
            self.out("Please specify a command. Use --help for options.")
            return 1

        if not self.start_game():
            return 1

        if self.args.command == 'play':
            self.play_game()
            return 0
        return self.replay_moves(self.args.moves)

    def start_game(self) -> bool:
        player1 = Player.create(self.args.marker1, self.args.player1)
        player2 = Player.create(self.args.marker2, self.args.player2)
        game = new_game(self.args.height, self.args.width, player1, player2)
        if isinstance(game, Rejected):
            self.out(REJECT_MESSAGES[game.reason])
            return False

        game.add_listener(ConsoleListener(self.out))
        self.game = game
        return True

    def play_game(self) -> None:
        """Alternate prompts until the game ends or someone quits."""
        self.out("Starting a new Connect Four game!")
        self.out(f"Enter a column (0-{self.game.width - 1}); 'q' quits, 'r' restarts.")
        self.out(self.game.render())

        while True:
            if self.game.status.is_game_over():
                answer = self.input("Play again? (y/n): ").strip().lower()
                if answer != 'y':
                    return
                self.game.reset_game()
                self.out(self.game.render())
                continue

            command = self.input(f"{self.game.current_player}'s move: ").strip().lower()
            if command == 'q':
                self.out("Quitting game.")
                return
            if command == 'r':
                self.game.reset_game()
                self.out("Game restarted.")
                self.out(self.game.render())
                continue

            try:
                column = int(command)
            except ValueError:
                self.out("Invalid input. Enter a column number, 'q' or 'r'.")
                continue

            result = self.game.drop_piece(column)
            if isinstance(result, Rejected):
                self.out(REJECT_MESSAGES[result.reason])
                continue
            self.out(self.game.render())

    def replay_moves(self, moves: str) -> int:
        """Drop every column in moves; returns 1 if the list cannot be parsed."""
        try:
            columns = [int(c) for c in moves.split(',') if c.strip()]
        except ValueError:
            self.out(f"Error parsing moves: {moves!r}")
            return 1

        for column in columns:
            result = self.game.drop_piece(column)
            if isinstance(result, Placed):
                self.out(f"column {column}: row {result.row}, {result.outcome.name}")
            else:
                self.out(f"column {column}: rejected, {result.reason.name}")

        self.out(self.game.render())
        self.out(f"Status: {self.game.status.name}")
        return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI."""
    return SimpleCLI().run(argv)


if __name__ == "__main__":
    sys.exit(main())
