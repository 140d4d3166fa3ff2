import logging
import sys

from chesslogic.config import CONFIG
from chesslogic.core.enums import Player
from chesslogic.main import Engine


def play(engine: Engine, human: Player, read=input, write=print) -> None:
    """Run a game in the terminal until it ends or the human types 'quit'."""
    while not engine.is_game_over():
        write(engine.state.board)
        write("----------------------------")

        if engine.state.current_player is human:
            user_move = read("Enter your move (uci format, e2e4): ").strip()
            if user_move == "quit":
                return
            if not engine.make_move(user_move):
                write("Illegal move, try again.")
        else:
            move, score = engine.get_best_move()
            write(f"Engine plays: {move} | Eval: {score}")
            engine.make_move(move)

    write(engine.state.board)
    write("Game Over")
    write(f"Result: {engine.result()}")


def main(argv=None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    logging.basicConfig(level=CONFIG.log_level, format="%(message)s")
    depth = int(argv[0]) if argv else CONFIG.search.depth
    human = Player.BLACK if CONFIG.ui.human_color.lower() == "black" else Player.WHITE
    play(Engine(depth=depth), human)
    return 0


if __name__ == "__main__":
    sys.exit(main())
