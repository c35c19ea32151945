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

"""
Command-line interface for the checkers game.
"""

# Imports
import argparse
import os
from typing import Optional

from boardVerify.utils import console, info, warning, error, success, result, log_exception
from boardVerify.utils.config import VerifyConfig, load_config

from .checkers_game import CheckersGame
from .checkers_utils import MoveParseError, load_moves, board_to_string


def _load_config(args: argparse.Namespace) -> VerifyConfig:
    """
    Load the configuration file and apply command line overrides.
    """
    config = load_config(getattr(args, "config", None))
    return config.override(
        debug=True if getattr(args, "debug", False) else None,
        delimiter=getattr(args, "delimiter", None),
        show_board=True if getattr(args, "show_board", False) else None,
        plot=getattr(args, "plot", None),
    )
# end def _load_config


def _plot_path(plot: str, input_file: str, several: bool) -> str:
    """
    Image path for a game, suffixed with the input name when several games are plotted.
    """
    if not several:
        return plot
    # end if
    root, ext = os.path.splitext(plot)
    stem = os.path.splitext(os.path.basename(input_file))[0]
    return f"{root}_{stem}{ext or '.png'}"
# end def _plot_path


def _replay(input_file: str, config: VerifyConfig) -> Optional[CheckersGame]:
    """
    Load a move file and build the game to replay.

    Returns:
        Optional[CheckersGame]: The game, or None if the file could not be read
    """
    try:
        moves = load_moves(input_file, config.delimiter)
    except FileNotFoundError:
        error(f"File {input_file} not found.")
        return None
    except MoveParseError as e:
        error(f"{input_file}: {e}")
        return None
    except UnicodeDecodeError as e:
        error(f"{input_file}: not a UTF-8 text file ({e.reason} at byte {e.start})")
        return None
    except OSError:
        log_exception(f"Cannot read {input_file}")
        return None
    # end try

    if not moves:
        warning(f"{input_file} contains no moves")
    # end if

    info(f"Verifying {input_file} ({len(moves)} moves)")
    return CheckersGame(moves, debug=config.debug)
# end def _replay


def checkers_verify(args: argparse.Namespace) -> int:
    """
    Verify one or more recorded checkers games.

    Prints one verdict per file on stdout.

    Args:
        args (argparse.Namespace): Arguments parsed by argparse.

    Returns:
        int: 0 if every file could be read, 1 otherwise
    """
    config = _load_config(args)
    several = len(args.files) > 1
    status = 0

    for input_file in args.files:
        game = _replay(input_file, config)
        if game is None:
            status = 1
            continue
        # end if

        verdict = game.validate()
        result(f"{input_file}: {verdict}" if several else str(verdict))

        if config.show_board:
            console.print(board_to_string(game.board), markup=False, highlight=False)
        # end if

        if config.plot:
            # Imported here so that matplotlib is only loaded when plotting
            from .viz import plot_board
            output = _plot_path(config.plot, input_file, several)
            plot_board(game.board, output=output, title=str(verdict))
            success(f"Saved board to {output}")
        # end if
    # end for

    return status
# end def checkers_verify


def checkers_show(args: argparse.Namespace) -> int:
    """
    Replay a recorded game and display the final board and verdict.

    Args:
        args (argparse.Namespace): Arguments parsed by argparse.

    Returns:
        int: 0 if the file could be read, 1 otherwise
    """
    config = _load_config(args)
    game = _replay(args.file, config)
    if game is None:
        return 1
    # end if

    verdict = game.validate()
    console.print(board_to_string(game.board), markup=False, highlight=False)
    result(str(verdict))
    return 0
# end def checkers_show
