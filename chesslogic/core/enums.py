"""Enumerations shared by the board, move and game-state modules."""

from __future__ import annotations

from enum import Enum


class Player(Enum):
    WHITE = "white"
    BLACK = "black"

    def opponent(self) -> Player:
        return Player.BLACK if self is Player.WHITE else Player.WHITE

    def __str__(self) -> str:
        return self.value


class PieceType(Enum):
    """Piece kinds; the value is the upper-case letter used in text boards."""

    PAWN = "P"
    KNIGHT = "N"
    BISHOP = "B"
    ROOK = "R"
    QUEEN = "Q"
    KING = "K"


class MoveType(Enum):
    NORMAL = "normal"
    DOUBLE_PAWN = "double_pawn"
    PROMOTION = "promotion"
    CASTLE_KING_SIDE = "castle_king_side"
    CASTLE_QUEEN_SIDE = "castle_queen_side"
    EN_PASSANT = "en_passant"


class EndReason(Enum):
    CHECKMATE = "checkmate"
    STALEMATE = "stalemate"
    FIFTY_MOVE_RULE = "fifty-move rule"
    INSUFFICIENT_MATERIAL = "insufficient material"
    THREEFOLD_REPETITION = "threefold repetition"


# Promotion choices in preference order; the first one is the default.
PROMOTION_TYPES = (PieceType.QUEEN, PieceType.ROOK, PieceType.BISHOP, PieceType.KNIGHT)
