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

from .cli import (
    checkers_verify,
    checkers_show
)

from .player import Player
from .move import Position, Move
from .checkers_board import CheckersBoard
from .checkers_game import CheckersGame
from .validation import Validation, Illegal, IncompleteGame, Tie, Winner
from .checkers_utils import (
    MoveParseError,
    parse_move,
    parse_moves,
    load_moves,
    verify_game,
    verify_file,
    board_to_string
)

__all__ = [
    "checkers_verify",
    "checkers_show",
    "Player",
    "Position",
    "Move",
    "CheckersBoard",
    "CheckersGame",
    "Validation",
    "Illegal",
    "IncompleteGame",
    "Tie",
    "Winner",
    "MoveParseError",
    "parse_move",
    "parse_moves",
    "load_moves",
    "verify_game",
    "verify_file",
    "board_to_string"
]
