"""Entry points for drivers: plain functions over ``GameState`` and an
``Engine`` wrapper that speaks UCI move strings."""

import logging
from typing import List, Optional, Tuple

from chesslogic.config import CONFIG
from chesslogic.core.game_state import GameState
from chesslogic.core.moves import Move
from chesslogic.core.notation import parse_move, state_from_fen, state_to_fen
from chesslogic.core.position import Position
from chesslogic.core.result import Result
from chesslogic.core.search import SearchEngine

logger = logging.getLogger(__name__)


def new_game() -> GameState:
    return GameState.new()


def legal_moves(state: GameState, position: Position) -> List[Move]:
    return state.legal_moves_for_piece(position)


def execute(state: GameState, move: Move) -> bool:
    """Play ``move`` if the game is running and the move is legal.

    Returns False without touching ``state`` otherwise.
    """
    if state.is_game_over():
        logger.warning("Rejected %s: game is already over (%s)", move, state.result)
        return False
    if move not in state.legal_moves_for_piece(move.from_pos):
        logger.warning("Rejected illegal move %s", move)
        return False
    state.make_move(move)
    return True


def is_game_over(state: GameState) -> bool:
    return state.is_game_over()


def result(state: GameState) -> Optional[Result]:
    return state.result


def best_move(state: GameState, depth: Optional[int] = None) -> Optional[Move]:
    return state.get_best_move(depth if depth is not None else CONFIG.search.depth)


class Engine:
    def __init__(self, depth: Optional[int] = None, fen: Optional[str] = None):
        self.state = state_from_fen(fen) if fen else new_game()
        self.search = SearchEngine(depth=depth)
        self.move_history: List[str] = []

    def get_best_move(self) -> Tuple[Optional[str], int]:
        move, value = self.search.find_best_move(self.state)
        return (move.uci() if move else None), value

    def make_move(self, move_uci: str) -> bool:
        """Play a UCI move (e.g. 'e2e4'). Returns True if it was accepted."""
        try:
            move = parse_move(self.state, move_uci)
        except ValueError:
            logger.warning("Unparseable move %r", move_uci)
            return False
        if move is None or not execute(self.state, move):
            return False
        self.move_history.append(move.uci())
        return True

    def legal_moves(self) -> List[str]:
        return [move.uci() for move in self.state.get_all_legal_moves()]

    def is_game_over(self) -> bool:
        return self.state.is_game_over()

    def result(self) -> Optional[Result]:
        return self.state.result

    def fen(self) -> str:
        return state_to_fen(self.state)

    def print_board(self):
        print(self.state.board)
