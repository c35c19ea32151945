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
Checkers board.

This module implements the board representation and the per-move legality
checks: move geometry, occupancy, mandatory jumps and captures.
"""

# Imports
from typing import List, Optional, Tuple
import numpy as np

from .move import Move, Position
from .player import Player


# Starting cells of each side, as (x, y)
INITIAL_WHITE_POSITIONS: Tuple[Tuple[int, int], ...] = (
    (1, 0), (3, 0), (5, 0), (7, 0),
    (0, 1), (2, 1), (4, 1), (6, 1),
    (1, 2), (3, 2), (5, 2), (7, 2),
)

INITIAL_RED_POSITIONS: Tuple[Tuple[int, int], ...] = (
    (0, 5), (2, 5), (4, 5), (6, 5),
    (1, 6), (3, 6), (5, 6), (7, 6),
    (0, 7), (2, 7), (4, 7), (6, 7),
)

# Display symbols
SYMBOLS = {
    None: "_",
    Player.WHITE: "o",
    Player.RED: "x",
}


class CheckersBoard:
    """
    Represents an 8x8 checkers board.

    The grid is indexed [x, y]. A cell holds 0 when empty, otherwise the
    value of the Player occupying it.
    """

    SIZE = 8
    EMPTY = 0

    def __init__(self):
        """
        Initialize a new board with the starting layout.
        """
        self.board = np.zeros((self.SIZE, self.SIZE), dtype=int)

        # Set up the initial board state
        self._setup_board()
    # end __init__

    def _setup_board(self):
        """
        Put the twelve pieces of each side in their starting positions.
        """
        for x, y in INITIAL_WHITE_POSITIONS:
            self.set_piece(x, y, Player.WHITE)
        # end for

        for x, y in INITIAL_RED_POSITIONS:
            self.set_piece(x, y, Player.RED)
        # end for
    # end def _setup_board

    def is_on_board(self, x: int, y: int) -> bool:
        return 0 <= x < self.SIZE and 0 <= y < self.SIZE

    def set_piece(self, x: int, y: int, player: Optional[Player]) -> bool:
        """
        Set the occupant of a cell.

        Args:
            x (int): Column index
            y (int): Row index
            player (Optional[Player]): New occupant, None to empty the cell

        Returns:
            bool: True if successful, False if the cell is off the board
        """
        if not self.is_on_board(x, y):
            return False
        # end if
        self.board[x, y] = self.EMPTY if player is None else player.value
        return True
    # end def set_piece

    def get_piece(self, x: int, y: int) -> Optional[Player]:
        """
        Get the occupant of a cell.

        Args:
            x (int): Column index
            y (int): Row index

        Returns:
            Optional[Player]: The player on the cell, None if the cell is empty
                              or off the board
        """
        if not self.is_on_board(x, y):
            return None
        # end if
        value = int(self.board[x, y])
        return None if value == self.EMPTY else Player(value)
    # end def get_piece

    def get(self, position: Position) -> Optional[Player]:
        return self.get_piece(position.x, position.y)

    def is_empty(self, x: int, y: int) -> bool:
        """
        Check that a cell exists and holds no piece.
        """
        return self.is_on_board(x, y) and self.board[x, y] == self.EMPTY
    # end def is_empty

    def make_move(self, current_player: Player, move: Move) -> bool:
        """
        Apply a move for the current player if it is legal.

        Checks run in order and stop at the first failure: geometry, origin
        owned by the current player, empty destination, mandatory jump,
        and for jumps an opposing piece on the jumped cell.

        Args:
            current_player (Player): Player making the move
            move (Move): Move to apply

        Returns:
            bool: True if the move was accepted and applied, False otherwise
        """
        if not move.is_valid(current_player):
            return False
        # end if

        if self.get(move.initial) != current_player:
            return False
        # end if

        if self.get(move.destination) is not None:
            return False
        # end if

        is_jump = move.is_jump(current_player)

        # Captures are compulsory
        if not is_jump and self.is_jumping_possible(current_player, move):
            return False
        # end if

        if is_jump:
            jumped = move.jumped_position(current_player)
            if self.get(jumped) != current_player.other:
                return False
            # end if
            self.set_piece(jumped.x, jumped.y, None)
        # end if

        self.set_piece(move.initial.x, move.initial.y, None)
        self.set_piece(move.destination.x, move.destination.y, current_player)

        return True
    # end def make_move

    def _can_jump_from(self, player: Player, x: int, y: int) -> bool:
        """
        Check both forward diagonals of (x, y) for a capture.

        Off-board probes count as no jump in that direction.
        """
        forward = player.forward
        for side in (-1, 1):
            # Piece to capture
            if self.get_piece(x + side, y + forward) != player.other:
                continue
            # end if

            # Landing cell
            if self.is_empty(x + 2 * side, y + 2 * forward):
                return True
            # end if
        # end for
        return False
    # end def _can_jump_from

    def _can_step_from(self, player: Player, x: int, y: int) -> bool:
        forward = player.forward
        return self.is_empty(x - 1, y + forward) or self.is_empty(x + 1, y + forward)

    def is_jumping_possible(self, player: Player, move: Move) -> bool:
        """
        Check if a jump is available from the origin of the move.

        Args:
            player (Player): Player to move
            move (Move): Move whose origin is inspected

        Returns:
            bool: True if the piece on the origin could capture
        """
        return self._can_jump_from(player, move.initial.x, move.initial.y)
    # end def is_jumping_possible

    def has_legal_moves(self, player: Player) -> bool:
        """
        Check if the player could still play anywhere on the board.

        Args:
            player (Player): Player to check

        Returns:
            bool: True if at least one piece of the player can step or jump
        """
        for x, y in self.pieces(player):
            if self._can_step_from(player, x, y) or self._can_jump_from(player, x, y):
                return True
            # end if
        # end for
        return False
    # end def has_legal_moves

    def pieces(self, player: Player) -> List[Tuple[int, int]]:
        """
        List the cells occupied by a player.

        Args:
            player (Player): Player whose pieces are listed

        Returns:
            List[Tuple[int, int]]: (x, y) of every piece of the player
        """
        xs, ys = np.nonzero(self.board == player.value)
        return [(int(x), int(y)) for x, y in zip(xs, ys)]
    # end def pieces

    def score(self, player: Player) -> int:
        return int(np.count_nonzero(self.board == player.value))

    def red_score(self) -> int:
        return self.score(Player.RED)

    def white_score(self) -> int:
        return self.score(Player.WHITE)

    def to_array(self) -> np.ndarray:
        """
        Copy of the grid, indexed [x, y].
        """
        return np.copy(self.board)
    # end def to_array

    def __str__(self):
        """
        Return a string representation of the board, one line per row y.

        Returns:
            str: String representation of the board
        """
        result = ""
        for y in range(self.SIZE):
            for x in range(self.SIZE):
                result += f" {SYMBOLS[self.get_piece(x, y)]}"
            # end for
            result += "\n"
        # end for
        return result
    # end def __str__

    def __repr__(self):
        return self.__str__()

# end class CheckersBoard
