from typing import Optional

from chesslogic.core.moves import Move


def format_info(depth: int, score: int, nodes: int, elapsed: float, best_move: Optional[Move], mate_score: int) -> str:
    """One-line search summary; ``elapsed`` is in seconds."""
    move_str = best_move.uci() if best_move else "-"
    nps = int(nodes / elapsed) if elapsed > 0 else 0

    if abs(score) >= mate_score:
        score_str = f"mate {'white' if score > 0 else 'black'}"
    else:
        score_str = f"cp {score}"

    return f"info depth {depth} score {score_str} nodes {nodes} nps {nps} time {int(elapsed * 1000)} pv {move_str}"
