"""Piece values and their pseudo-legal move generation.

Pieces are immutable. Generators only look at occupancy and board edges;
whether a move leaves the king in check is decided by ``Move.is_legal``.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from itertools import count
from typing import TYPE_CHECKING, Callable, Dict, Iterable, Iterator

from chesslogic.core.enums import PROMOTION_TYPES, MoveType, PieceType, Player
from chesslogic.core.moves import Move
from chesslogic.core.position import (
    ALL_DIRECTIONS,
    DIAGONALS,
    KNIGHT_JUMPS,
    ORTHOGONALS,
    Direction,
    Position,
)

if TYPE_CHECKING:
    from chesslogic.core.board import Board


@dataclass(frozen=True)
class Piece:
    type: PieceType
    color: Player
    has_moved: bool = False

    @property
    def symbol(self) -> str:
        """Letter used in text boards: upper case for White, lower for Black."""
        letter = self.type.value
        return letter if self.color is Player.WHITE else letter.lower()

    @staticmethod
    def from_symbol(symbol: str, has_moved: bool = False) -> Piece:
        color = Player.WHITE if symbol.isupper() else Player.BLACK
        return Piece(PieceType(symbol.upper()), color, has_moved)

    def moved(self) -> Piece:
        return self if self.has_moved else replace(self, has_moved=True)

    def get_moves(self, from_pos: Position, board: Board) -> Iterator[Move]:
        return _GENERATORS[self.type](self, from_pos, board)

    def __str__(self) -> str:
        return self.symbol


def pawn_direction(color: Player) -> Direction:
    return Direction.NORTH if color is Player.WHITE else Direction.SOUTH


def pawn_start_row(color: Player) -> int:
    return 6 if color is Player.WHITE else 1


def _can_land(piece: Piece, to_pos: Position, board: Board) -> bool:
    if not to_pos.is_valid():
        return False
    target = board[to_pos]
    return target is None or target.color is not piece.color


def _slide(piece: Piece, from_pos: Position, board: Board, directions: Iterable[Direction]) -> Iterator[Move]:
    for direction in directions:
        for distance in count(1):
            to_pos = from_pos + distance * direction
            if not to_pos.is_valid():
                break
            target = board[to_pos]
            if target is None:
                yield Move(from_pos, to_pos)
                continue
            if target.color is not piece.color:
                yield Move(from_pos, to_pos)
            break


def _step(piece: Piece, from_pos: Position, board: Board, offsets: Iterable[Direction]) -> Iterator[Move]:
    for offset in offsets:
        to_pos = from_pos + offset
        if _can_land(piece, to_pos, board):
            yield Move(from_pos, to_pos)


def _bishop_moves(piece: Piece, from_pos: Position, board: Board) -> Iterator[Move]:
    return _slide(piece, from_pos, board, DIAGONALS)


def _rook_moves(piece: Piece, from_pos: Position, board: Board) -> Iterator[Move]:
    return _slide(piece, from_pos, board, ORTHOGONALS)


def _queen_moves(piece: Piece, from_pos: Position, board: Board) -> Iterator[Move]:
    return _slide(piece, from_pos, board, ALL_DIRECTIONS)


def _knight_moves(piece: Piece, from_pos: Position, board: Board) -> Iterator[Move]:
    return _step(piece, from_pos, board, KNIGHT_JUMPS)


def _unmoved_rook(piece: Piece, pos: Position, board: Board) -> bool:
    rook = board[pos]
    return rook is not None and rook.type is PieceType.ROOK and rook.color is piece.color and not rook.has_moved


def _all_empty(board: Board, row: int, columns: Iterable[int]) -> bool:
    return all(board.is_empty(Position(row, column)) for column in columns)


def _king_moves(piece: Piece, from_pos: Position, board: Board) -> Iterator[Move]:
    yield from _step(piece, from_pos, board, ALL_DIRECTIONS)
    if piece.has_moved or from_pos.column != 4:
        return
    row = from_pos.row
    # Attacked-square rules are checked by Move.is_legal.
    if _unmoved_rook(piece, Position(row, 7), board) and _all_empty(board, row, (5, 6)):
        yield Move(from_pos, Position(row, 6), MoveType.CASTLE_KING_SIDE)
    if _unmoved_rook(piece, Position(row, 0), board) and _all_empty(board, row, (1, 2, 3)):
        yield Move(from_pos, Position(row, 2), MoveType.CASTLE_QUEEN_SIDE)


def _pawn_advances(from_pos: Position, to_pos: Position) -> Iterator[Move]:
    if to_pos.row in (0, 7):
        for promotion in PROMOTION_TYPES:
            yield Move(from_pos, to_pos, MoveType.PROMOTION, promotion)
    else:
        yield Move(from_pos, to_pos)


def _pawn_moves(piece: Piece, from_pos: Position, board: Board) -> Iterator[Move]:
    forward = pawn_direction(piece.color)
    one_step = from_pos + forward
    if not one_step.is_valid():
        return

    if board.is_empty(one_step):
        yield from _pawn_advances(from_pos, one_step)
        two_steps = one_step + forward
        if not piece.has_moved and from_pos.row == pawn_start_row(piece.color) and board.is_empty(two_steps):
            yield Move(from_pos, two_steps, MoveType.DOUBLE_PAWN)

    for side in (Direction.WEST, Direction.EAST):
        to_pos = one_step + side
        if not to_pos.is_valid():
            continue
        target = board[to_pos]
        if target is not None:
            if target.color is not piece.color:
                yield from _pawn_advances(from_pos, to_pos)
        elif to_pos == board.en_passant_target:
            victim = board[Position(from_pos.row, to_pos.column)]
            if victim is not None and victim.type is PieceType.PAWN and victim.color is not piece.color:
                yield Move(from_pos, to_pos, MoveType.EN_PASSANT)


_GENERATORS: Dict[PieceType, Callable[[Piece, Position, "Board"], Iterator[Move]]] = {
    PieceType.PAWN: _pawn_moves,
    PieceType.KNIGHT: _knight_moves,
    PieceType.BISHOP: _bishop_moves,
    PieceType.ROOK: _rook_moves,
    PieceType.QUEEN: _queen_moves,
    PieceType.KING: _king_moves,
}
