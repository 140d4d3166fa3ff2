"""8x8 board stored as a flat 64-cell list of optional pieces."""

from __future__ import annotations

from typing import Iterator, List, Optional, Tuple

from chesslogic.core.enums import PieceType, Player
from chesslogic.core.pieces import Piece, pawn_direction, pawn_start_row
from chesslogic.core.position import (
    ALL_DIRECTIONS,
    ALL_POSITIONS,
    DIAGONALS,
    KNIGHT_JUMPS,
    ORTHOGONALS,
    Direction,
    Position,
)

INITIAL_TEXT = """\
rnbqkbnr
pppppppp
........
........
........
........
PPPPPPPP
RNBQKBNR"""

_ORTHOGONAL_SLIDERS = (PieceType.ROOK, PieceType.QUEEN)
_DIAGONAL_SLIDERS = (PieceType.BISHOP, PieceType.QUEEN)


class Board:
    def __init__(self, squares: Optional[List[Optional[Piece]]] = None,
                 en_passant_target: Optional[Position] = None):
        """Create a board from 64 cells (a8 first), or an empty one."""
        self._squares: List[Optional[Piece]] = list(squares) if squares is not None else [None] * 64
        # Square skipped by the last double pawn step, if any.
        self.en_passant_target = en_passant_target

    def __getitem__(self, pos: Position) -> Optional[Piece]:
        return self._squares[pos.index]

    def __setitem__(self, pos: Position, piece: Optional[Piece]) -> None:
        self._squares[pos.index] = piece

    def __eq__(self, other) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._squares == other._squares and self.en_passant_target == other.en_passant_target

    def is_empty(self, pos: Position) -> bool:
        return self._squares[pos.index] is None

    def copy(self) -> Board:
        """Independent board; pieces are immutable so a flat copy suffices."""
        return Board(self._squares, self.en_passant_target)

    # ── Queries ─────────────────────────────────────────────────────────────

    def occupied(self) -> Iterator[Tuple[Position, Piece]]:
        for index, piece in enumerate(self._squares):
            if piece is not None:
                yield ALL_POSITIONS[index], piece

    def piece_positions(self) -> Iterator[Position]:
        for pos, _ in self.occupied():
            yield pos

    def piece_positions_for(self, player: Player) -> Iterator[Position]:
        for pos, piece in self.occupied():
            if piece.color is player:
                yield pos

    def find_king(self, player: Player) -> Optional[Position]:
        for pos, piece in self.occupied():
            if piece.type is PieceType.KING and piece.color is player:
                return pos
        return None

    def is_attacked(self, pos: Position, by: Player) -> bool:
        """True if any piece of ``by`` attacks ``pos``."""
        for directions, sliders in ((ORTHOGONALS, _ORTHOGONAL_SLIDERS), (DIAGONALS, _DIAGONAL_SLIDERS)):
            for direction in directions:
                target = pos + direction
                while target.is_valid():
                    piece = self[target]
                    if piece is not None:
                        if piece.color is by and piece.type in sliders:
                            return True
                        break
                    target = target + direction

        if self._any_at(pos, KNIGHT_JUMPS, by, PieceType.KNIGHT):
            return True
        if self._any_at(pos, ALL_DIRECTIONS, by, PieceType.KING):
            return True
        # A pawn attacks diagonally forward, so look one row behind it.
        behind = pawn_direction(by) * -1
        return self._any_at(pos, (behind + Direction.EAST, behind + Direction.WEST), by, PieceType.PAWN)

    def _any_at(self, pos: Position, offsets, by: Player, piece_type: PieceType) -> bool:
        for offset in offsets:
            target = pos + offset
            if target.is_valid():
                piece = self[target]
                if piece is not None and piece.color is by and piece.type is piece_type:
                    return True
        return False

    def is_in_check(self, player: Player) -> bool:
        king = self.find_king(player)
        if king is None:
            return False
        return self.is_attacked(king, player.opponent())

    def castling_rights(self) -> str:
        """Castling availability in FEN notation, e.g. 'KQkq' or '-'."""
        rights = ""
        for player, row in ((Player.WHITE, 7), (Player.BLACK, 0)):
            king = self[Position(row, 4)]
            if king is None or king.type is not PieceType.KING or king.color is not player or king.has_moved:
                continue
            for column, letter in ((7, "K"), (0, "Q")):
                rook = self[Position(row, column)]
                if rook is not None and rook.type is PieceType.ROOK and rook.color is player and not rook.has_moved:
                    rights += letter if player is Player.WHITE else letter.lower()
        return rights or "-"

    # ── Text form ───────────────────────────────────────────────────────────

    def placement(self) -> str:
        """Piece placement field of a FEN string."""
        ranks = []
        for row in range(8):
            rank, empty = "", 0
            for piece in self._squares[row * 8:row * 8 + 8]:
                if piece is None:
                    empty += 1
                    continue
                if empty:
                    rank += str(empty)
                    empty = 0
                rank += piece.symbol
            if empty:
                rank += str(empty)
            ranks.append(rank)
        return "/".join(ranks)

    def to_text(self) -> str:
        rows = []
        for row in range(8):
            cells = self._squares[row * 8:row * 8 + 8]
            rows.append("".join(piece.symbol if piece else "." for piece in cells))
        return "\n".join(rows)

    def __str__(self) -> str:
        return self.to_text()

    def __repr__(self) -> str:
        return f"Board({self.placement()!r})"

    @staticmethod
    def from_text(text: str, castling: Optional[str] = None) -> Board:
        """Parse an 8-line board, rank 8 first, '.' for empty squares.

        Pieces on their home squares count as unmoved. When ``castling``
        (FEN availability such as 'Kq') is given, kings and rooks without
        a matching right are marked as moved.
        """
        lines = [line.strip() for line in text.strip().splitlines() if line.strip()]
        if len(lines) != 8 or any(len(line) != 8 for line in lines):
            raise ValueError("Board text must have 8 rows of 8 squares")

        board = Board()
        for row, line in enumerate(lines):
            for column, symbol in enumerate(line):
                if symbol == ".":
                    continue
                if symbol.upper() not in "PNBRQK":
                    raise ValueError(f"Unknown piece symbol: {symbol!r}")
                pos = Position(row, column)
                piece = Piece.from_symbol(symbol)
                board[pos] = Piece(piece.type, piece.color, not _on_home_square(piece, pos))

        if castling is not None:
            board._apply_castling_rights(castling)
        return board

    def _apply_castling_rights(self, castling: str) -> None:
        for player, row in ((Player.WHITE, 7), (Player.BLACK, 0)):
            king_side, queen_side = ("K", "Q") if player is Player.WHITE else ("k", "q")
            for column, letter in ((7, king_side), (0, queen_side)):
                pos = Position(row, column)
                rook = self[pos]
                if rook is not None and rook.type is PieceType.ROOK and letter not in castling:
                    self[pos] = rook.moved()
            king_pos = Position(row, 4)
            king = self[king_pos]
            if king is not None and king.type is PieceType.KING and king_side not in castling \
                    and queen_side not in castling:
                self[king_pos] = king.moved()

    @staticmethod
    def initial() -> Board:
        return Board.from_text(INITIAL_TEXT)


def _on_home_square(piece: Piece, pos: Position) -> bool:
    back_row = 7 if piece.color is Player.WHITE else 0
    if piece.type is PieceType.PAWN:
        return pos.row == pawn_start_row(piece.color)
    if piece.type is PieceType.KING:
        return pos == Position(back_row, 4)
    if piece.type is PieceType.ROOK:
        return pos in (Position(back_row, 0), Position(back_row, 7))
    return True
