"""Board rendering widgets."""

from gambit.ui.board.board_scene import BoardScene
from gambit.ui.board.board_view import BoardView

__all__ = ["BoardScene", "BoardView"]
