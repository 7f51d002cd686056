from npuzzle.engine.searchnode.node import SearchNode

__all__ = ["SearchNode"]
