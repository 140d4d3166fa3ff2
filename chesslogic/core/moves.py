"""Move values and how each kind of move is applied to a board.

A ``Move`` is a small frozen record. Its ``type`` picks the executor that
mutates the board, so moves stay hashable and cheap to create during
search while still covering castling, en passant and promotion.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Callable, Dict, Optional

from chesslogic.core.enums import MoveType, PieceType, Player
from chesslogic.core.position import Position

if TYPE_CHECKING:
    from chesslogic.core.board import Board


@dataclass(frozen=True)
class Move:
    from_pos: Position
    to_pos: Position
    type: MoveType = MoveType.NORMAL
    promotion: Optional[PieceType] = None

    @property
    def is_castle(self) -> bool:
        return self.type in (MoveType.CASTLE_KING_SIDE, MoveType.CASTLE_QUEEN_SIDE)

    def is_capture(self, board: Board) -> bool:
        """True if executing this move on ``board`` removes an enemy piece."""
        return self.type is MoveType.EN_PASSANT or not board.is_empty(self.to_pos)

    def execute(self, board: Board) -> bool:
        """Apply the move to ``board``.

        Returns True when a piece was captured or a pawn moved, which
        resets the fifty-move counter.
        """
        return _EXECUTORS[self.type](self, board)

    def is_legal(self, board: Board) -> bool:
        """Check that the mover's king is safe after the move.

        The move is played on a copy, ``board`` itself is untouched.
        """
        piece = board[self.from_pos]
        if piece is None:
            return False
        if self.is_castle and not self._castle_path_is_safe(board, piece.color):
            return False
        copy = board.copy()
        self.execute(copy)
        return not copy.is_in_check(piece.color)

    def _castle_path_is_safe(self, board: Board, color: Player) -> bool:
        if board.is_in_check(color):
            return False
        step = 1 if self.to_pos.column > self.from_pos.column else -1
        passed = Position(self.from_pos.row, self.from_pos.column + step)
        return not board.is_attacked(passed, color.opponent())

    def uci(self) -> str:
        suffix = self.promotion.value.lower() if self.promotion else ""
        return f"{self.from_pos.name}{self.to_pos.name}{suffix}"

    def __str__(self) -> str:
        return self.uci()


def _move_piece(board: Board, from_pos: Position, to_pos: Position) -> None:
    board[to_pos] = board[from_pos].moved()
    board[from_pos] = None


def _execute_normal(move: Move, board: Board) -> bool:
    piece = board[move.from_pos]
    captured = not board.is_empty(move.to_pos)
    _move_piece(board, move.from_pos, move.to_pos)
    board.en_passant_target = None
    return captured or piece.type is PieceType.PAWN


def _execute_double_pawn(move: Move, board: Board) -> bool:
    _move_piece(board, move.from_pos, move.to_pos)
    board.en_passant_target = Position((move.from_pos.row + move.to_pos.row) // 2, move.from_pos.column)
    return True


def _execute_promotion(move: Move, board: Board) -> bool:
    pawn = board[move.from_pos]
    board[move.from_pos] = None
    board[move.to_pos] = replace(pawn, type=move.promotion or PieceType.QUEEN, has_moved=True)
    board.en_passant_target = None
    return True


def _execute_en_passant(move: Move, board: Board) -> bool:
    _move_piece(board, move.from_pos, move.to_pos)
    board[Position(move.from_pos.row, move.to_pos.column)] = None
    board.en_passant_target = None
    return True


def _execute_castle(move: Move, board: Board) -> bool:
    row = move.from_pos.row
    if move.type is MoveType.CASTLE_KING_SIDE:
        rook_from, rook_to = Position(row, 7), Position(row, 5)
    else:
        rook_from, rook_to = Position(row, 0), Position(row, 3)
    _move_piece(board, move.from_pos, move.to_pos)
    _move_piece(board, rook_from, rook_to)
    board.en_passant_target = None
    return False


_EXECUTORS: Dict[MoveType, Callable[[Move, "Board"], bool]] = {
    MoveType.NORMAL: _execute_normal,
    MoveType.DOUBLE_PAWN: _execute_double_pawn,
    MoveType.PROMOTION: _execute_promotion,
    MoveType.EN_PASSANT: _execute_en_passant,
    MoveType.CASTLE_KING_SIDE: _execute_castle,
    MoveType.CASTLE_QUEEN_SIDE: _execute_castle,
}
