from npuzzle.engine.gameloader.loader import format_board, load_board, parse_board

__all__ = ["format_board", "load_board", "parse_board"]
