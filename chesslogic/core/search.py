"""Minimax search with alpha-beta pruning over copied game states.

Scores are absolute (positive favors White): White nodes maximize and
Black nodes minimize. Every explored ply works on ``state.copy()``, so the
caller's live game is never touched.
"""

import logging
import time
from typing import TYPE_CHECKING, Iterable, List, Optional, Tuple

from chesslogic.config import CONFIG, SearchConfig
from chesslogic.core.board import Board
from chesslogic.core.enums import MoveType, PieceType, Player
from chesslogic.core.evaluator import Evaluator
from chesslogic.core.moves import Move
from chesslogic.core.utils import format_info

if TYPE_CHECKING:
    from chesslogic.core.game_state import GameState

logger = logging.getLogger(__name__)

INF = 1000000
MATE_SCORE = 900000


class SearchEngine:
    def __init__(self, evaluator: Optional[Evaluator] = None, depth: Optional[int] = None,
                 cfg: Optional[SearchConfig] = None):
        self.cfg = cfg or CONFIG.search
        self.evaluator = evaluator or Evaluator()
        self.max_depth = depth if depth is not None else self.cfg.depth
        self.nodes = 0

    def find_best_move(self, state: "GameState", depth: Optional[int] = None) -> Tuple[Optional[Move], int]:
        """Pick a move for the side to move.

        Returns ``(move, score)``; ``move`` is None only when the side to
        move has no legal moves, in which case ``score`` is the static
        evaluation of ``state``.
        """
        depth = self.max_depth if depth is None else depth
        self.nodes = 0
        start_time = time.time()

        maximizing = state.current_player is Player.WHITE
        best_move = None
        best_score = -INF if maximizing else INF

        for move in self.order_moves(state.board, state.get_all_legal_moves()):
            child = state.copy()
            child.make_move(move)
            score = self.minimax(child, depth - 1, not maximizing, -INF, INF)
            # Strict comparison keeps the first of equally good moves.
            if (maximizing and score > best_score) or (not maximizing and score < best_score):
                best_score = score
                best_move = move

        if best_move is None:
            best_score = self.evaluator.evaluate(state.board)

        elapsed = time.time() - start_time
        logger.info(format_info(depth, best_score, self.nodes, elapsed, best_move, MATE_SCORE))
        return best_move, best_score

    def minimax(self, state: "GameState", depth: int, is_maximizing: bool, alpha: int, beta: int,
                extensions_left: Optional[int] = None) -> int:
        self.nodes += 1
        if depth <= 0 or state.is_game_over():
            return self._leaf_score(state, depth)

        if extensions_left is None:
            extensions_left = self.cfg.max_extensions if self.cfg.extend_captures else 0

        moves = self.order_moves(state.board, state.get_all_legal_moves())
        if not moves:
            return self._leaf_score(state, depth)

        best = -INF if is_maximizing else INF
        for move in moves:
            child_depth, child_extensions = depth - 1, extensions_left
            if extensions_left > 0 and move.is_capture(state.board):
                child_depth, child_extensions = depth, extensions_left - 1

            child = state.copy()
            child.make_move(move)
            score = self.minimax(child, child_depth, not is_maximizing, alpha, beta, child_extensions)

            if is_maximizing:
                best = max(best, score)
                alpha = max(alpha, best)
            else:
                best = min(best, score)
                beta = min(beta, best)
            if beta <= alpha:
                break

        return best

    def _leaf_score(self, state: "GameState", depth: int) -> int:
        if self.cfg.score_terminal and state.result is not None:
            if state.result.winner is None:
                return 0
            # Remaining depth rewards the quicker mate.
            mate = MATE_SCORE + max(depth, 0)
            return mate if state.result.winner is Player.WHITE else -mate
        return self.evaluator.evaluate(state.board)

    def order_moves(self, board: Board, moves: Iterable[Move]) -> List[Move]:
        """Captures of the most valuable victims first; ties keep generation order."""
        return sorted(moves, key=lambda move: self._victim_value(board, move), reverse=True)

    def _victim_value(self, board: Board, move: Move) -> int:
        if move.type is MoveType.EN_PASSANT:
            return self.evaluator.material[PieceType.PAWN]
        victim = board[move.to_pos]
        return self.evaluator.material[victim.type] if victim else 0
