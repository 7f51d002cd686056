from npuzzle_frontend.io.printer import format_board, format_solution
from npuzzle_frontend.io.reader import PuzzleFormatError, parse_board, read_board

__all__ = ["PuzzleFormatError", "format_board", "format_solution", "parse_board", "read_board"]
