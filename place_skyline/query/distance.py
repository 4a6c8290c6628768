"""Per-keyword multi-source BFS over incoming edges."""

import logging
from bisect import bisect_left
from collections import deque
from concurrent.futures import ThreadPoolExecutor
from typing import Hashable, Iterable, Mapping, Protocol, Sequence

from .config import DEFAULT_QUERY_CONFIG, QueryConfig
from .types import UNREACHABLE, Distance, DistanceVector

log = logging.getLogger(__name__)

KeywordIndex = Mapping[Hashable, Sequence]


class DirectedGraph(Protocol):
    def node_identifiers(self) -> Iterable[Hashable]: ...

    def neighbors_directed(
        self, node_id: Hashable, direction: str
    ) -> Iterable[Hashable]: ...


def has_keyword(sorted_keywords: Sequence, keyword) -> bool:
    """Binary-search membership test; ``sorted_keywords`` must be sorted."""
    index = bisect_left(sorted_keywords, keyword)
    return index < len(sorted_keywords) and sorted_keywords[index] == keyword


def step_distance(distance: Distance, max_distance: int | None = None) -> Distance:
    """Distance one hop further, clamped to UNREACHABLE."""
    if distance == UNREACHABLE:
        return UNREACHABLE
    next_distance = distance + 1
    if max_distance is not None and next_distance > max_distance:
        return UNREACHABLE
    return next_distance


def compute_keyword_distances(
    graph: DirectedGraph,
    keyword_index: KeywordIndex,
    keyword,
    *,
    nodes: Sequence[Hashable] | None = None,
    max_distance: int | None = None,
) -> dict[Hashable, Distance]:
    """Shortest forward distance from every node to a node tagged ``keyword``.

    Walks incoming edges outward from the tagged nodes, which is a plain
    multi-source BFS on the reversed graph without building the reversal.

    Args:
        graph: Graph exposing node identifiers and directed neighbors
        keyword_index: node -> sorted, duplicate-free keywords
        keyword: Keyword to measure distance to
        nodes: Pre-enumerated graph nodes (enumerated from ``graph`` if omitted)
        max_distance: Distances beyond this bound are reported as UNREACHABLE

    Returns:
        Mapping of every graph node to its distance
    """
    if nodes is None:
        nodes = list(graph.node_identifiers())

    distances: dict[Hashable, Distance] = {node: UNREACHABLE for node in nodes}
    queue: deque[Hashable] = deque()

    for node in nodes:
        if has_keyword(keyword_index.get(node, ()), keyword):
            distances[node] = 0
            queue.append(node)

    while queue:
        current = queue.popleft()
        candidate = step_distance(distances[current], max_distance)
        for predecessor in graph.neighbors_directed(current, "in"):
            if candidate < distances[predecessor]:
                distances[predecessor] = candidate
                queue.append(predecessor)

    return distances


def compute_distances(
    graph: DirectedGraph,
    keyword_index: KeywordIndex,
    keywords: Sequence,
    *,
    config: QueryConfig = DEFAULT_QUERY_CONFIG,
) -> dict[Hashable, DistanceVector]:
    """Distance vector for every graph node, index-aligned to ``keywords``."""
    if not keywords:
        raise ValueError("At least one query keyword is required")

    nodes = list(graph.node_identifiers())

    def column(keyword) -> dict[Hashable, Distance]:
        return compute_keyword_distances(
            graph,
            keyword_index,
            keyword,
            nodes=nodes,
            max_distance=config.max_distance,
        )

    workers = config.workers_for(len(keywords))
    log.debug(
        f"Computing distances for {len(nodes)} nodes, "
        f"{len(keywords)} keywords, {workers} worker(s)"
    )

    if workers > 1:
        with ThreadPoolExecutor(max_workers=workers) as pool:
            columns = list(pool.map(column, keywords))
    else:
        columns = [column(keyword) for keyword in keywords]

    return {node: tuple(col[node] for col in columns) for node in nodes}
