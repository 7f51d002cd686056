from npuzzle.engine.puzzlegenerator.generator import PuzzleGenerator

__all__ = ["PuzzleGenerator"]
