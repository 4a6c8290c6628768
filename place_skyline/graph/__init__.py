"""Graph container and loading."""

from .builder import GraphStats, KeywordGraph

__all__ = ["GraphStats", "KeywordGraph"]
