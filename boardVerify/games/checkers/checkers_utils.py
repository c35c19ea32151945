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
from typing import Iterable, List, Sequence

from .checkers_board import CheckersBoard, SYMBOLS
from .checkers_game import CheckersGame
from .move import Move, Position
from .validation import Validation


# Number of integers on a move line: x1, y1, x2, y2
TOKENS_PER_MOVE = 4


class MoveParseError(ValueError):
    """
    A line of a move file could not be read as a move.

    Attributes:
        line (int): 1-based line number
        src (str): Raw text of the line
        reason (str): What is wrong with the line
    """

    def __init__(self, line: int, src: str, reason: str):
        super().__init__(f"line {line}: {reason}: {src!r}")
        self.line = line
        self.src = src
        self.reason = reason
    # end __init__

# end class MoveParseError


def parse_move(src: str, line: int, delimiter: str = ",") -> Move:
    """
    Parse a single move line (e.g. "1,2,0,3").

    Args:
        src (str): Raw text of the line
        line (int): 1-based line number
        delimiter (str): Token separator (default: ",")

    Returns:
        Move: The parsed move

    Raises:
        MoveParseError: If the line does not hold exactly four integers,
            or the delimiter is empty
    """
    if not delimiter:
        raise MoveParseError(line, src, "empty delimiter")
    # end if

    tokens = [token.strip() for token in src.split(delimiter)]
    if len(tokens) != TOKENS_PER_MOVE:
        raise MoveParseError(line, src, f"expected {TOKENS_PER_MOVE} tokens, got {len(tokens)}")
    # end if

    coords = []
    for token in tokens:
        try:
            coords.append(int(token))
        except ValueError:
            raise MoveParseError(line, src, f"invalid token {token!r}") from None
        # end try
    # end for

    x1, y1, x2, y2 = coords
    return Move(initial=Position(x1, y1), destination=Position(x2, y2), line=line, src=src)
# end def parse_move


def parse_moves(lines: Iterable[str], delimiter: str = ",") -> List[Move]:
    """
    Parse the lines of a move file.

    Blank lines are skipped but still counted in line numbers.

    Args:
        lines (Iterable[str]): Lines of the file
        delimiter (str): Token separator (default: ",")

    Returns:
        List[Move]: Moves in file order

    Raises:
        MoveParseError: On the first malformed line
    """
    moves = []
    for i, raw in enumerate(lines):
        src = raw.rstrip("\r\n")
        if not src.strip():
            continue
        # end if
        moves.append(parse_move(src, i + 1, delimiter))
    # end for
    return moves
# end def parse_moves


def load_moves(input_file: str, delimiter: str = ",") -> List[Move]:
    """
    Load the moves of a game from a file.

    Args:
        input_file (str): Path to the move file
        delimiter (str): Token separator (default: ",")

    Returns:
        List[Move]: Moves in file order

    Raises:
        MoveParseError: On the first malformed line
        UnicodeDecodeError: If the file is not UTF-8 text
    """
    with open(input_file, "r", encoding="utf-8") as f:
        return parse_moves(f, delimiter)
    # end with
# end def load_moves


def verify_game(moves: Sequence[Move], debug: bool = False) -> Validation:
    """
    Verify a game given as parsed moves.

    Args:
        moves (Sequence[Move]): Moves of the game
        debug (bool): Show the board after each move

    Returns:
        Validation: Verdict of the game
    """
    return CheckersGame(moves, debug=debug).validate()
# end def verify_game


def verify_file(input_file: str, delimiter: str = ",", debug: bool = False) -> Validation:
    """
    Verify the game stored in a move file.

    Args:
        input_file (str): Path to the move file
        delimiter (str): Token separator (default: ",")
        debug (bool): Show the board after each move

    Returns:
        Validation: Verdict of the game

    Raises:
        MoveParseError: If the file contains a malformed line
    """
    return verify_game(load_moves(input_file, delimiter), debug=debug)
# end def verify_file


def board_to_string(board: CheckersBoard) -> str:
    """
    Convert a board to a string with coordinate labels.

    Args:
        board (CheckersBoard): Board to display

    Returns:
        str: String representation of the board, row y=0 first
    """
    header = "  " + " ".join(str(x) for x in range(board.SIZE))
    result = header + "\n"

    for y in range(board.SIZE):
        cells = [SYMBOLS[board.get_piece(x, y)] for x in range(board.SIZE)]
        result += f"{y} " + " ".join(cells) + f" {y}\n"
    # end for

    result += header
    return result
# end def board_to_string
