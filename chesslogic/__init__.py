"""chesslogic: a chess rules engine with a minimax computer opponent."""

__version__ = "1.0.0"
