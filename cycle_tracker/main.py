"""Main entry point for the card cycle tracker."""

import argparse
import logging
import sys
from pathlib import Path
from typing import TextIO

from cycle_tracker.catalog import CatalogError, load_catalog
from cycle_tracker.config import SessionLogConfig, load_config
from cycle_tracker.game.session import CycleSession
from cycle_tracker.logging import SessionLogger
from cycle_tracker.utils.logger import CycleDisplay, setup_logging

logger = logging.getLogger(__name__)

QUIT_COMMANDS = {"q", "quit", "exit"}


def parse_slot(arg: str) -> int | None:
    """Parse a 1-based slot number into a 0-based index."""
    try:
        number = int(arg)
    except ValueError:
        return None
    return number - 1 if number >= 1 else None


def handle_command(session: CycleSession, display: CycleDisplay, line: str) -> bool:
    """Run one command line against the session.

    Args:
        session: Active session.
        display: Display used for output.
        line: Raw command line.

    Returns:
        False if the user asked to quit, True otherwise.
    """
    command, _, arg = line.strip().partition(" ")
    command = command.lower()
    arg = arg.strip()

    if not command:
        return True

    if command in QUIT_COMMANDS:
        return False

    if command in ("h", "d"):
        index = parse_slot(arg)
        if index is None:
            print("Usage: h N / d N with N from 1 to 4")
            return True
        if command == "h":
            played = session.play_from_hand(index)
        else:
            played = session.play_from_draw_pile(index)
        if not played:
            print("No card in that slot")
    elif command == "add":
        entry = next(session.search(arg), None)
        if entry is None:
            print("No matching card")
        elif not session.select_card(entry):
            print(f"Cannot add {entry.name}")
    elif command == "search":
        display.print_results(session.search(arg))
    elif command in ("undo", "z"):
        if not session.undo():
            print("Nothing to undo")
    elif command == "reset":
        session.reset()
    elif command == "show":
        display.print_state(session.state)
    elif command == "help":
        display.print_help()
    else:
        print(f"Unknown command: {command} (type help)")

    return True


def run_loop(
    session: CycleSession,
    display: CycleDisplay,
    stream: TextIO = sys.stdin,
) -> None:
    """Read commands until end of input or quit."""
    display.print_state(session.state)
    for line in stream:
        if not handle_command(session, display, line):
            break


def main() -> int:
    """Main entry point.

    Returns:
        Exit code (0 for success)
    """
    parser = argparse.ArgumentParser(
        description="Clash Royale card cycle tracker"
    )
    parser.add_argument(
        "-c",
        "--config",
        type=Path,
        help="Path to config file (YAML)",
    )
    parser.add_argument(
        "--catalog",
        type=Path,
        help="Path to cards.json (overrides config)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose output",
    )
    parser.add_argument(
        "--session-log",
        type=Path,
        help="Write session events to this JSONL file",
    )

    args = parser.parse_args()

    # Load config
    config = load_config(args.config)

    # Apply command-line overrides
    if args.catalog:
        config.catalog.path = str(args.catalog)
    if args.verbose:
        config.logging.level = "DEBUG"
    if args.session_log:
        config.session_log = SessionLogConfig(enabled=True, output_path=str(args.session_log))

    setup_logging(config.logging.level)

    display = CycleDisplay(show_cycles=config.logging.show_cycles)

    try:
        catalog = load_catalog(config.catalog.path)
    except CatalogError as e:
        logger.error(f"Could not load catalog: {e}")
        return 1

    try:
        with SessionLogger(config.session_log) as session_logger:
            session = CycleSession(catalog, session_logger)
            session.set_callbacks(on_change=display.print_state)
            session_logger.log_session_start(len(catalog))

            display.print_separator()
            display.print_help()
            display.print_separator()

            run_loop(session, display)

            session_logger.log_session_end(session.cards_played)
        return 0

    except KeyboardInterrupt:
        print("\nInterrupted by user")
        return 1
    except Exception as e:
        logger.exception(f"Tracker error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
