from .board import assemble, build_board
from .models import BoardModel, ClueRecord

__all__ = ["assemble", "build_board", "BoardModel", "ClueRecord"]
