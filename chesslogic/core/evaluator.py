"""Static evaluation: material plus phase-interpolated piece-square bonuses."""

from typing import Dict, Optional

from chesslogic.config import CONFIG, EvalConfig
from chesslogic.core import pst
from chesslogic.core.board import Board
from chesslogic.core.enums import PieceType, Player
from chesslogic.core.pieces import Piece
from chesslogic.core.position import Position


class Evaluator:
    def __init__(self, cfg: Optional[EvalConfig] = None):
        self.cfg = cfg or CONFIG.eval
        self.material: Dict[PieceType, int] = {
            PieceType[name]: value for name, value in self.cfg.piece_values.items()
        }

    def evaluate(self, board: Board) -> int:
        """Return static eval in centipawns, positive favors White."""
        phase = self.game_phase(board)
        score = 0
        for pos, piece in board.occupied():
            value = self.material[piece.type] + self.positional_value(piece, pos, phase)
            if piece.color is Player.WHITE:
                score += value
            else:
                score -= value
        return score

    def game_phase(self, board: Board) -> int:
        """Count of non-pawn pieces (kings included), capped at max_phase."""
        phase = sum(1 for _, piece in board.occupied() if piece.type is not PieceType.PAWN)
        return min(phase, self.cfg.max_phase)

    def positional_value(self, piece: Piece, pos: Position, phase: int) -> int:
        # Tables are laid out for White; Black reads the mirrored row.
        row = pos.row if piece.color is Player.WHITE else 7 - pos.row
        index = row * 8 + pos.column
        early = pst.EARLY[piece.type][index]
        late = pst.LATE[piece.type][index]
        max_phase = self.cfg.max_phase
        blended = early * (max_phase - phase) + late * phase
        # Truncate toward zero.
        return blended // max_phase if blended >= 0 else -(-blended // max_phase)
