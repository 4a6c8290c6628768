"""Semantic place skyline query: distances, then dominance filtering."""

import logging
import time
from typing import Sequence

from .config import DEFAULT_QUERY_CONFIG, QueryConfig
from .distance import DirectedGraph, KeywordIndex, compute_distances
from .skyline import compute_skyline
from .types import QueryResult, SkylineEntry

log = logging.getLogger(__name__)


def semantic_place_skyline(
    graph: DirectedGraph,
    keyword_index: KeywordIndex,
    keywords: Sequence,
    *,
    config: QueryConfig = DEFAULT_QUERY_CONFIG,
) -> tuple[SkylineEntry, ...]:
    """Return the skyline of (node, distance vector) pairs for ``keywords``.

    Each vector is index-aligned to ``keywords``. ``keyword_index`` sequences
    must be sorted and duplicate-free.
    """
    distances = compute_distances(graph, keyword_index, keywords, config=config)
    return compute_skyline(distances)


def run_query(
    graph: DirectedGraph,
    keyword_index: KeywordIndex,
    keywords: Sequence,
    *,
    config: QueryConfig = DEFAULT_QUERY_CONFIG,
) -> QueryResult:
    """Run one query and record how long each phase took."""
    start = time.perf_counter()
    distances = compute_distances(graph, keyword_index, keywords, config=config)
    distance_seconds = time.perf_counter() - start

    start = time.perf_counter()
    entries = compute_skyline(distances)
    skyline_seconds = time.perf_counter() - start

    log.info(
        f"Query {list(keywords)}: {len(entries)} skyline node(s) "
        f"out of {len(distances)}"
    )

    return QueryResult(
        keywords=tuple(keywords),
        entries=entries,
        node_count=len(distances),
        distance_seconds=distance_seconds,
        skyline_seconds=skyline_seconds,
    )
