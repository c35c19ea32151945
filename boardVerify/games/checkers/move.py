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
Positions and moves of a checkers game.

A move only knows its own geometry. Whether it can be played depends on the
board and is decided by CheckersBoard.make_move().
"""

# Imports
from dataclasses import dataclass
from typing import Optional

from .player import Player


# Highest coordinate on the 8x8 board
MAX_COORD = 7


@dataclass(frozen=True)
class Position:
    """
    A cell reference (x, y).

    Coordinates are not bounds-checked here, see Position.is_on_board().
    """
    x: int
    y: int

    def is_on_board(self) -> bool:
        """
        Check if both coordinates are within [0, 7].

        Returns:
            bool: True if the position designates a board cell
        """
        return 0 <= self.x <= MAX_COORD and 0 <= self.y <= MAX_COORD
    # end def is_on_board

    def __str__(self):
        return f"({self.x}, {self.y})"
    # end def __str__

# end class Position


@dataclass(frozen=True)
class Move:
    """
    A single proposed move read from a game record.

    Attributes:
        initial (Position): Cell the piece starts from
        destination (Position): Cell the piece lands on
        line (int): 1-based line number in the source file
        src (str): Raw source text of the line
    """
    initial: Position
    destination: Position
    line: int = 0
    src: str = ""

    @property
    def dx(self) -> int:
        return self.destination.x - self.initial.x

    @property
    def dy(self) -> int:
        return self.destination.y - self.initial.y

    def is_valid(self, player: Player) -> bool:
        """
        Check if the move has a legal shape for the given player.

        A legal shape is one diagonal step forward or a two cell diagonal
        jump forward. Both endpoints must be on the board.

        Args:
            player (Player): Player making the move

        Returns:
            bool: True if the geometry is legal for this player
        """
        if not (self.initial.is_on_board() and self.destination.is_on_board()):
            return False
        # end if

        step = abs(self.dx) == 1 and self.dy == player.forward
        return step or self.is_jump(player)
    # end def is_valid

    def is_jump(self, player: Player) -> bool:
        """
        Check if the move is a forward jump for the given player.

        Args:
            player (Player): Player making the move

        Returns:
            bool: True if the move spans two diagonal cells forward
        """
        return abs(self.dx) == 2 and self.dy == 2 * player.forward
    # end def is_jump

    def jumped_position(self, player: Player) -> Optional[Position]:
        """
        Position of the cell jumped over.

        Args:
            player (Player): Player making the move

        Returns:
            Optional[Position]: The cell between origin and destination, or None
                                if the move is not a jump
        """
        if not self.is_jump(player):
            return None
        # end if

        x = self.initial.x + (1 if self.dx > 0 else -1)
        y = self.initial.y + player.forward
        return Position(x, y)
    # end def jumped_position

    def landing(self) -> "Move":
        """
        A probe move starting where this move lands.

        Used to ask the board whether the piece that just moved can keep
        jumping.

        Returns:
            Move: A move whose origin is this move's destination
        """
        return Move(initial=self.destination, destination=self.destination, line=self.line, src=self.src)
    # end def landing

    def __str__(self):
        return f"{self.initial} to {self.destination}"
    # end def __str__

# end class Move
