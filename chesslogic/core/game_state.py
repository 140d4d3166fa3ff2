"""Game orchestration: turns, legal moves and end-of-game detection."""

from __future__ import annotations

from collections import Counter
from typing import Iterator, List, Optional, Tuple

from chesslogic.core.board import Board
from chesslogic.core.enums import EndReason, MoveType, PieceType, Player
from chesslogic.core.evaluator import Evaluator
from chesslogic.core.moves import Move
from chesslogic.core.pieces import pawn_direction
from chesslogic.core.position import Direction, Position
from chesslogic.core.result import Result
from chesslogic.core.search import SearchEngine

# Half-moves without a capture or pawn move before the game is drawn.
FIFTY_MOVE_LIMIT = 100


class GameState:
    def __init__(self, player: Player, board: Board, halfmove_clock: int = 0, fullmove_number: int = 1):
        self.board = board
        self.current_player = player
        self.result: Optional[Result] = None
        self.halfmove_clock = halfmove_clock
        self.fullmove_number = fullmove_number
        self._history: Counter = Counter()
        self._history[self.position_key()] += 1

    @classmethod
    def new(cls) -> GameState:
        """Standard initial position, White to move."""
        return cls(Player.WHITE, Board.initial())

    @classmethod
    def from_text(cls, text: str, player: Player = Player.WHITE, castling: Optional[str] = None) -> GameState:
        """Build a state from an 8-line text board and settle its status."""
        state = cls(player, Board.from_text(text, castling))
        state.check_for_game_over()
        return state

    # ── Legal moves ─────────────────────────────────────────────────────────

    def legal_moves_for_piece(self, pos: Position) -> List[Move]:
        if not pos.is_valid():
            return []
        piece = self.board[pos]
        if piece is None or piece.color is not self.current_player:
            return []
        return [move for move in piece.get_moves(pos, self.board) if move.is_legal(self.board)]

    def all_legal_moves(self, player: Player) -> Iterator[Move]:
        """Lazily yield every legal move of ``player``; nothing is cached."""
        for pos in list(self.board.piece_positions_for(player)):
            piece = self.board[pos]
            for move in piece.get_moves(pos, self.board):
                if move.is_legal(self.board):
                    yield move

    def get_all_legal_moves(self) -> Iterator[Move]:
        return self.all_legal_moves(self.current_player)

    # ── Playing ─────────────────────────────────────────────────────────────

    def make_move(self, move: Move) -> None:
        """Play ``move`` on the live board.

        The move must come from the legal-move set and the game must not
        be over; boundary validation lives in ``chesslogic.main``.
        """
        irreversible = move.execute(self.board)
        if irreversible:
            self.halfmove_clock = 0
            # Earlier positions can never occur again.
            self._history.clear()
        else:
            self.halfmove_clock += 1
        if self.current_player is Player.BLACK:
            self.fullmove_number += 1
        self.current_player = self.current_player.opponent()
        self._history[self.position_key()] += 1
        self.check_for_game_over()

    def check_for_game_over(self) -> None:
        if self.result is not None:
            return
        if next(self.get_all_legal_moves(), None) is None:
            if self.board.is_in_check(self.current_player):
                self.result = Result.win(self.current_player.opponent())
            else:
                self.result = Result.draw(EndReason.STALEMATE)
        elif self.is_insufficient_material():
            self.result = Result.draw(EndReason.INSUFFICIENT_MATERIAL)
        elif self.halfmove_clock >= FIFTY_MOVE_LIMIT:
            self.result = Result.draw(EndReason.FIFTY_MOVE_RULE)
        elif self.repetitions() >= 3:
            self.result = Result.draw(EndReason.THREEFOLD_REPETITION)

    def is_game_over(self) -> bool:
        return self.result is not None

    def is_in_check(self) -> bool:
        return self.board.is_in_check(self.current_player)

    # ── Draw rules ──────────────────────────────────────────────────────────

    def is_insufficient_material(self) -> bool:
        """K v K, K+minor v K, or K+B v K+B with bishops on one square colour."""
        others: List[Tuple[Position, PieceType]] = [
            (pos, piece.type) for pos, piece in self.board.occupied() if piece.type is not PieceType.KING
        ]
        if not others:
            return True
        if len(others) == 1:
            return others[0][1] in (PieceType.BISHOP, PieceType.KNIGHT)
        if len(others) == 2:
            (pos_a, type_a), (pos_b, type_b) = others
            if type_a is PieceType.BISHOP and type_b is PieceType.BISHOP:
                color_a, color_b = self.board[pos_a].color, self.board[pos_b].color
                return color_a is not color_b and pos_a.is_light() == pos_b.is_light()
        return False

    def position_key(self) -> str:
        """Identifies a position for repetition counting."""
        target = self._capturable_en_passant()
        return " ".join((
            self.board.placement(),
            "w" if self.current_player is Player.WHITE else "b",
            self.board.castling_rights(),
            target.name if target else "-",
        ))

    def repetitions(self) -> int:
        return self._history[self.position_key()]

    def _capturable_en_passant(self) -> Optional[Position]:
        """The en passant target if the side to move can legally capture there."""
        target = self.board.en_passant_target
        if target is None:
            return None
        behind = pawn_direction(self.current_player) * -1
        for side in (Direction.EAST, Direction.WEST):
            pos = target + behind + side
            if not pos.is_valid():
                continue
            pawn = self.board[pos]
            if pawn is None or pawn.type is not PieceType.PAWN or pawn.color is not self.current_player:
                continue
            if Move(pos, target, MoveType.EN_PASSANT).is_legal(self.board):
                return target
        return None

    # ── Copy, evaluation and search ─────────────────────────────────────────

    def copy(self) -> GameState:
        clone = GameState.__new__(GameState)
        clone.board = self.board.copy()
        clone.current_player = self.current_player
        clone.result = self.result
        clone.halfmove_clock = self.halfmove_clock
        clone.fullmove_number = self.fullmove_number
        clone._history = self._history.copy()
        return clone

    def evaluate_board(self, evaluator: Optional[Evaluator] = None) -> int:
        """Static score, positive favours White."""
        return (evaluator or Evaluator()).evaluate(self.board)

    def get_best_move(self, depth: Optional[int] = None, engine: Optional[SearchEngine] = None) -> Optional[Move]:
        move, _score = (engine or SearchEngine()).find_best_move(self, depth)
        return move

    def __repr__(self) -> str:
        return f"GameState({self.current_player.value} to move, result={self.result})"
