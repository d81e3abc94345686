"""Chess position model and pseudo-legal move generator."""

from chessgrid.core import STARTING_FEN, Board, Color, Move, PieceKind, Troop

__version__ = "0.1.0"

__all__ = ["STARTING_FEN", "Board", "Color", "Move", "PieceKind", "Troop", "__version__"]
