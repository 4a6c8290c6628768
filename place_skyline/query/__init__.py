"""Distance engine and skyline filter."""

from .config import DEFAULT_QUERY_CONFIG, QueryConfig, load_query_config
from .distance import DirectedGraph, compute_distances, compute_keyword_distances
from .pipeline import run_query, semantic_place_skyline
from .skyline import compare_distance_vectors, compute_skyline
from .types import UNREACHABLE, Dominance, QueryResult, SkylineEntry

__all__ = [
    "DEFAULT_QUERY_CONFIG",
    "DirectedGraph",
    "Dominance",
    "QueryConfig",
    "QueryResult",
    "SkylineEntry",
    "UNREACHABLE",
    "compare_distance_vectors",
    "compute_distances",
    "compute_keyword_distances",
    "compute_skyline",
    "load_query_config",
    "run_query",
    "semantic_place_skyline",
]
