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
Players of a checkers game.
"""

from enum import Enum


class Player(Enum):
    """
    The two sides of a checkers game.

    The value of each member is the code stored in the board grid for a cell
    occupied by that player (0 is reserved for empty cells).
    """

    WHITE = 1
    RED = 2

    @property
    def forward(self) -> int:
        """
        Row offset of a single forward step.

        Returns:
            int: +1 for White (towards increasing y), -1 for Red
        """
        return 1 if self is Player.WHITE else -1
    # end def forward

    @property
    def other(self) -> "Player":
        """
        The opponent of this player.

        Returns:
            Player: The other player
        """
        return Player.RED if self is Player.WHITE else Player.WHITE
    # end def other

    def is_red(self) -> bool:
        return self is Player.RED

    def is_white(self) -> bool:
        return self is Player.WHITE

    def __str__(self):
        """
        Display name of the player ("red" or "white").
        """
        return self.name.lower()
    # end def __str__

# end class Player
