"""Conversions between chesslogic values and python-chess / text notation.

python-chess is used here for parsing and validating FEN and UCI strings,
so drivers and tests can hand positions back and forth with other tools.
"""

from typing import Optional

import chess

from chesslogic.core.board import Board
from chesslogic.core.enums import PieceType, Player
from chesslogic.core.game_state import GameState
from chesslogic.core.moves import Move
from chesslogic.core.position import Position

_TO_CHESS_PIECE = {
    PieceType.PAWN: chess.PAWN,
    PieceType.KNIGHT: chess.KNIGHT,
    PieceType.BISHOP: chess.BISHOP,
    PieceType.ROOK: chess.ROOK,
    PieceType.QUEEN: chess.QUEEN,
    PieceType.KING: chess.KING,
}
_FROM_CHESS_PIECE = {value: key for key, value in _TO_CHESS_PIECE.items()}


def position_to_square(pos: Position) -> chess.Square:
    return chess.square(pos.column, 7 - pos.row)


def square_to_position(square: chess.Square) -> Position:
    return Position(7 - chess.square_rank(square), chess.square_file(square))


def to_chess_move(move: Move) -> chess.Move:
    promotion = _TO_CHESS_PIECE[move.promotion] if move.promotion else None
    return chess.Move(position_to_square(move.from_pos), position_to_square(move.to_pos), promotion=promotion)


def move_to_uci(move: Move) -> str:
    return to_chess_move(move).uci()


def parse_move(state: GameState, uci: str) -> Optional[Move]:
    """Find the legal move matching a UCI string.

    A promotion written without a piece letter promotes to a queen.
    Returns None if the move is not legal; raises ValueError if ``uci``
    is not a UCI move at all.
    """
    parsed = chess.Move.from_uci(uci)
    if parsed.drop is not None or not parsed:
        raise ValueError(f"Unsupported move: {uci!r}")
    from_pos = square_to_position(parsed.from_square)
    to_pos = square_to_position(parsed.to_square)
    promotion = _FROM_CHESS_PIECE[parsed.promotion] if parsed.promotion else None

    for move in state.legal_moves_for_piece(from_pos):
        if move.to_pos != to_pos:
            continue
        if move.promotion is None:
            if promotion is None:
                return move
        elif move.promotion is (promotion or PieceType.QUEEN):
            return move
    return None


def state_from_fen(fen: str) -> GameState:
    """Build a game state from FEN. Raises ValueError for an invalid FEN."""
    cb = chess.Board(fen)
    text = str(cb).replace(" ", "")
    board = Board.from_text(text, castling=cb.castling_xfen())
    if cb.ep_square is not None:
        board.en_passant_target = square_to_position(cb.ep_square)
    player = Player.WHITE if cb.turn == chess.WHITE else Player.BLACK
    state = GameState(player, board, halfmove_clock=cb.halfmove_clock, fullmove_number=cb.fullmove_number)
    state.check_for_game_over()
    return state


def state_to_fen(state: GameState) -> str:
    target = state.board.en_passant_target
    return " ".join((
        state.board.placement(),
        "w" if state.current_player is Player.WHITE else "b",
        state.board.castling_rights(),
        target.name if target else "-",
        str(state.halfmove_clock),
        str(state.fullmove_number),
    ))


def to_chess_board(state: GameState) -> chess.Board:
    return chess.Board(state_to_fen(state))
