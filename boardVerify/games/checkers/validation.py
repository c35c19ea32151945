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
Verdicts of a game validation.

A verdict is exactly one of Illegal, IncompleteGame, Tie or Winner.
"""

# Imports
from dataclasses import dataclass
from typing import Union

from .move import Move
from .player import Player


@dataclass(frozen=True)
class Illegal:
    """
    The game contains an illegal move.

    Attributes:
        move (Move): First move that could not be played
    """
    move: Move

    def __str__(self):
        return f"line {self.move.line} illegal move: {self.move.src}"
    # end def __str__

# end class Illegal


@dataclass(frozen=True)
class IncompleteGame:
    """Every move was legal but both players could still play."""

    def __str__(self):
        return "incomplete game"

# end class IncompleteGame


@dataclass(frozen=True)
class Tie:
    """The game is over and both sides have the same number of pieces."""

    def __str__(self):
        return "tie"

# end class Tie


@dataclass(frozen=True)
class Winner:
    """
    The game is over and one side has more pieces.

    Attributes:
        player (Player): Side with the most remaining pieces
    """
    player: Player

    def __str__(self):
        return str(self.player)

# end class Winner


Validation = Union[Illegal, IncompleteGame, Tie, Winner]
