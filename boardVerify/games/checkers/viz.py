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
Visualization utilities for the checkers game.
"""

from typing import Optional

import matplotlib.pyplot as plt

from .checkers_board import CheckersBoard
from .player import Player


# Piece colors
PIECE_COLORS = {
    Player.WHITE: ("white", "black"),
    Player.RED: ("firebrick", "black"),
}


def plot_board(
        board: CheckersBoard,
        output: Optional[str] = None,
        title: Optional[str] = None
) -> plt.Figure:
    """
    Draw a checkers board with matplotlib.

    Args:
        board (CheckersBoard): Board to draw
        output (Optional[str]): Path of the image file to write, if any
        title (Optional[str]): Title of the figure

    Returns:
        plt.Figure: The figure
    """
    fig, ax = plt.subplots(figsize=(6, 6))

    # Draw the checkerboard pattern
    for x in range(board.SIZE):
        for y in range(board.SIZE):
            color = 'wheat' if (x + y) % 2 == 0 else 'saddlebrown'
            ax.add_patch(plt.Rectangle((x, y), 1, 1, color=color))
        # end for
    # end for

    # Draw the pieces
    for player, (face, edge) in PIECE_COLORS.items():
        for x, y in board.pieces(player):
            ax.add_patch(plt.Circle((x + 0.5, y + 0.5), 0.38, facecolor=face, edgecolor=edge, linewidth=1.5))
        # end for
    # end for

    ax.set_xlim(0, board.SIZE)
    ax.set_ylim(board.SIZE, 0)
    ax.set_xticks([i + 0.5 for i in range(board.SIZE)])
    ax.set_yticks([i + 0.5 for i in range(board.SIZE)])
    ax.set_xticklabels([str(i) for i in range(board.SIZE)])
    ax.set_yticklabels([str(i) for i in range(board.SIZE)])
    ax.set_aspect('equal')

    if title is not None:
        ax.set_title(title)
    # end if

    if output is not None:
        fig.savefig(output, bbox_inches='tight')
    # end if

    return fig
# end def plot_board
