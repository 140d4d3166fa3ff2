"""Core engine components: board model, move generation, game state, evaluation and search."""

from .board import Board
from .enums import EndReason, MoveType, PieceType, Player
from .evaluator import Evaluator
from .game_state import GameState
from .moves import Move
from .pieces import Piece
from .position import Direction, Position
from .result import Result
from .search import SearchEngine
