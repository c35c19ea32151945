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
Checkers game replay.

This module replays a recorded sequence of moves against a CheckersBoard,
manages whose turn it is and produces the final verdict.
"""

# Imports
from typing import Sequence

from boardVerify.utils.logging import console, debug, move_log
from .checkers_board import CheckersBoard
from .move import Move
from .player import Player
from .validation import Illegal, IncompleteGame, Tie, Validation, Winner


class CheckersGame:
    """
    Validates a recorded checkers game.

    White moves first. The turn passes to the other side when the next move
    starts from one of the opponent's pieces, so a multi-jump spans several
    consecutive moves of the same player.
    """

    def __init__(self, moves: Sequence[Move], debug: bool = False):
        """
        Initialize a new game.

        Args:
            moves (Sequence[Move]): Moves to replay, in order
            debug (bool): Show the board after each move (default: False)
        """
        self.board = CheckersBoard()
        self.current_player = Player.WHITE
        self.moves = moves
        self.debug = debug
    # end __init__

    def toggle_debug(self):
        self.debug = not self.debug

    def next_player(self):
        """Switch the current player."""
        self.current_player = self.current_player.other
    # end def next_player

    def _show(self, title: str):
        debug(title)
        console.print(str(self.board), markup=False, highlight=False)
    # end def _show

    def validate(self) -> Validation:
        """
        Replay every move and return the verdict.

        Returns:
            Validation: Illegal for the first move that cannot be played,
                        otherwise IncompleteGame, Tie or Winner
        """
        if self.debug:
            self._show("Initial board")
        # end if

        for i, move in enumerate(self.moves):
            if self.debug:
                move_log(f"Player: {self.current_player}, line {move.line}: {move}")
            # end if

            if not self.board.make_move(self.current_player, move):
                return Illegal(move)
            # end if

            if self.debug:
                self._show(f"Board after line {move.line}")
            # end if

            if i + 1 >= len(self.moves):
                break
            # end if

            next_move = self.moves[i + 1]
            next_player = self.board.get(next_move.initial)

            if next_player is None:
                return Illegal(next_move)
            elif next_player == self.current_player:
                # Only a multi-jump lets the same player move again
                if not move.is_jump(self.current_player) or not next_move.is_jump(self.current_player):
                    return Illegal(next_move)
                # end if
            else:
                # The piece that just jumped must keep jumping while it can
                if move.is_jump(self.current_player) and \
                        self.board.is_jumping_possible(self.current_player, move.landing()):
                    return Illegal(next_move)
                # end if
                self.next_player()
            # end if
        # end for

        return self.outcome()
    # end def validate

    def outcome(self) -> Validation:
        """
        Verdict of the board once every move has been played.

        Returns:
            Validation: IncompleteGame if both sides can still play, otherwise
                        Tie or Winner depending on the piece counts
        """
        if self.board.has_legal_moves(Player.RED) and self.board.has_legal_moves(Player.WHITE):
            return IncompleteGame()
        # end if

        red_score = self.board.red_score()
        white_score = self.board.white_score()

        if white_score == red_score:
            return Tie()
        elif white_score > red_score:
            return Winner(Player.WHITE)
        # end if
        return Winner(Player.RED)
    # end def outcome

    def __len__(self):
        return len(self.moves)

    def __str__(self):
        """
        Return a string representation of the game.
        """
        return f"Current player: {self.current_player}\n{self.board}"
    # end def __str__

# end class CheckersGame
