from npuzzle.engine.frontier.frontier import Frontier

__all__ = ["Frontier"]
