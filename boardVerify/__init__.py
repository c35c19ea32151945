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

# Imports
from typing import Union, Sequence

from .games.checkers.checkers_game import CheckersGame
from .games.checkers.checkers_utils import parse_moves, verify_file
from .games.checkers.move import Move
from .games.checkers.validation import Validation


__version__ = "0.1.0"


def checkers(moves: Union[str, Sequence[str], Sequence[Move]], debug: bool = False) -> Validation:
    """
    Verify a checkers game.

    Args:
        moves (Union[str, Sequence[str], Sequence[Move]]): The game as the text of a
            move file, as its lines, or as already parsed moves
        debug (bool): Show the board after each move

    Returns:
        Validation: Verdict of the game

    Raises:
        MoveParseError: If a line cannot be read as a move
    """
    # Parse the input into a list of moves
    if isinstance(moves, str):
        moves = parse_moves(moves.splitlines())
    elif moves and not isinstance(moves[0], Move):
        moves = parse_moves(moves)
    # end if

    return CheckersGame(list(moves), debug=debug).validate()
# end checkers


def checkers_file(input_file: str, delimiter: str = ",", debug: bool = False) -> Validation:
    """
    Verify the checkers game stored in a move file.

    Args:
        input_file (str): Path to the move file (one "x1,y1,x2,y2" move per line)
        delimiter (str): Token separator (default: ",")
        debug (bool): Show the board after each move

    Returns:
        Validation: Verdict of the game
    """
    return verify_file(input_file, delimiter=delimiter, debug=debug)
# end checkers_file


__all__ = [
    "__version__",
    "checkers",
    "checkers_file"
]
