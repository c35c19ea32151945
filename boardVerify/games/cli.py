"""
Copyright (C) 2025 boardVerify Contributors

This program is free software: you can redistribute it and/or modify
it under the terms of the GNU General Public License as published by
the Free Software Foundation, either version 3 of the License, or
(at your option) any later version.

This program is distributed in the hope that it will be useful,
but WITHOUT ANY WARRANTY; without even the implied warranty of
MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
GNU General Public License for more details.

You should have received a copy of the GNU General Public License
along with this program.  If not, see <https://www.gnu.org/licenses/>.
"""

#!/usr/bin/env python3
"""
Command Line Interface for boardVerify games.
"""

import argparse
import sys
from typing import List, Optional

from .checkers import (
    checkers_verify,
    checkers_show
)


def _add_common_arguments(parser: argparse.ArgumentParser):
    """
    Arguments shared by the checkers commands.
    """
    parser.add_argument("--config", help="YAML configuration file")
    parser.add_argument("--delimiter", help="Separator between the four coordinates of a move (default: ',')")
    parser.add_argument("--debug", action="store_true", help="Show the board after each move")
# end def _add_common_arguments


def build_parser() -> argparse.ArgumentParser:
    """
    Build the argument parser of the CLI.
    """
    parser = argparse.ArgumentParser(prog="boardverify", description="Command Line Interface for boardVerify games.")
    subparsers = parser.add_subparsers(dest="game", help="Game to interact with")

    # Checkers commands
    checkers_parser = subparsers.add_parser("checkers", help="Commands for Checkers game")
    checkers_subparsers = checkers_parser.add_subparsers(dest="command", help="Command to execute")

    # Checkers verify
    checkers_verify_parser = checkers_subparsers.add_parser("verify", help="Verify recorded Checkers games")
    checkers_verify_parser.add_argument("files", nargs="+", metavar="FILE", help="Move files (one 'x1,y1,x2,y2' move per line)")
    _add_common_arguments(checkers_verify_parser)
    checkers_verify_parser.add_argument("--show-board", action="store_true", help="Display the final board")
    checkers_verify_parser.add_argument("--plot", help="Save the final board as an image")
    checkers_verify_parser.set_defaults(func=checkers_verify)

    # Checkers show
    checkers_show_parser = checkers_subparsers.add_parser("show", help="Replay a Checkers game and display the final board")
    checkers_show_parser.add_argument("file", metavar="FILE", help="Move file")
    _add_common_arguments(checkers_show_parser)
    checkers_show_parser.set_defaults(func=checkers_show)

    return parser
# end def build_parser


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point for the CLI.

    Returns:
        int: Exit status
    """
    parser = build_parser()

    # Parse arguments
    args = parser.parse_args(argv)

    # Execute the appropriate function
    if hasattr(args, "func"):
        return args.func(args)
    # end if

    parser.print_help()
    return 2
# end def main


if __name__ == "__main__":
    sys.exit(main())
# end if
