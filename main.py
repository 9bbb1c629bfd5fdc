"""
Main entry point for TicTacToe.

This script ties together:
- Logic (derived game state, move validation)
- Move log (remote service, or in-memory when offline)
- Audio (sound effects)
- UI (Tkinter window, or a console loop with --no-ui)

Run this script to play!
"""

import argparse
from typing import Optional, List

from logic.game_state import NUM_CELLS
from move_log.config import ServiceConfig
from move_log.client import MoveLogClient
from audio.config import SoundConfig
from audio.player import SoundPlayer
from game_session import GameSession


class ConsoleGame:
    """
    Plays TicTacToe in the terminal.

    Commands:
    1-9  place a mark (cells numbered left to right, top to bottom)
    r    reset the board
    n    new game
    s    toggle sound
    f    re-read the move log (pick up the other player's moves)
    q    quit
    """

    def __init__(self, session: GameSession):
        self.session = session
        self.is_running = False

    def start(self):
        """Start the game loop."""
        print("\nStarting TicTacToe game...")
        print("Enter 1-9 to play, 'r' reset, 'n' new game, 's' sound, 'f' refresh, 'q' quit\n")

        self.is_running = True
        self.session.refresh()
        self._show()

        while self.is_running:
            try:
                command = input("> ").strip().lower()
            except EOFError:
                break
            self.handle_command(command)

    def handle_command(self, command: str) -> bool:
        """
        Run one console command.

        Args:
            command: What the player typed.

        Returns:
            False if the command was not understood.
        """
        if command == "q":
            print("\nGame quit by user.")
            self.is_running = False
            return True
        if command == "r":
            self.session.reset_game()
        elif command == "n":
            self.session.new_game()
        elif command == "s":
            enabled = self.session.toggle_sound()
            print(f"Sound {'on' if enabled else 'off'}")
            return True
        elif command == "f":
            self.session.refresh()
        else:
            cell = self._parse_cell(command)
            if cell is None:
                return False
            self.session.make_move(cell - 1)

        self._show()
        return True

    def _parse_cell(self, command: str) -> Optional[int]:
        """Cell number 1-9 as shown on screen, or None."""
        try:
            cell = int(command)
        except ValueError:
            print(f"Unknown command: {command!r}")
            return None

        if not 1 <= cell <= NUM_CELLS:
            print(f"Invalid move. Pick a cell from 1 to {NUM_CELLS}.")
            return None
        return cell

    def _show(self):
        print(self.session.state.render())
        print(self.session.status_text)
        # A failure is also the announcement, show it once
        if self.session.error:
            print(f"  ERROR: {self.session.error}")
        elif self.session.announcement:
            print(f"  {self.session.announcement}")


def build_parser() -> argparse.ArgumentParser:
    """Command line options."""
    parser = argparse.ArgumentParser(description="TicTacToe")
    parser.add_argument(
        "--url",
        default=ServiceConfig.BASE_URL,
        help="Base URL of the move log service"
    )
    parser.add_argument(
        "--game-id",
        default=ServiceConfig.GAME_ID,
        help="Which game to join"
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=ServiceConfig.TIMEOUT_S,
        help="Seconds before a service request is given up on"
    )
    parser.add_argument(
        "--offline",
        action="store_true",
        help="Keep the move log in memory (no service needed)"
    )
    parser.add_argument(
        "--no-ui",
        action="store_true",
        help="Run without UI (console mode)"
    )
    parser.add_argument(
        "--mute",
        action="store_true",
        help="Start with sound off"
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Print every service request"
    )
    return parser


def build_session(args: argparse.Namespace, simulate_audio: bool = False) -> GameSession:
    """
    Wire up the client, sound player and session from parsed options.

    Args:
        args: Parsed command line options.
        simulate_audio: If True, don't open the audio device.
    """
    config = ServiceConfig()
    config.BASE_URL = args.url
    config.TIMEOUT_S = args.timeout
    config.DEBUG_MODE = args.debug

    client = MoveLogClient(config, simulate=args.offline)

    sound = SoundPlayer(SoundConfig(), simulate=simulate_audio)
    sound.enabled = not args.mute

    return GameSession(client, args.game_id, sound=sound)


def main(argv: Optional[List[str]] = None):
    """Main entry point."""
    args = build_parser().parse_args(argv)

    print("\n" + "="*60)
    print("   TicTacToe")
    print("="*60)
    print(f"   Move log: {'offline (in memory)' if args.offline else args.url}")
    print(f"   Game: {args.game_id}")
    print("="*60 + "\n")

    session = build_session(args)

    try:
        # Launch UI by default
        if not args.no_ui:
            from ui import TicTacToeUI
            ui = TicTacToeUI(session, config=session.client.config)
            ui.run()
            return

        ConsoleGame(session).start()
    except KeyboardInterrupt:
        print("\n\nGame interrupted by user.")
    finally:
        session.client.close()
        if session.sound is not None:
            session.sound.close()
        print("Goodbye!")


if __name__ == "__main__":
    main()
