"""NetworkX-backed keyword graph."""

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Hashable, Iterable, Iterator

import networkx as nx

from ..parser.graph_files import iter_records

log = logging.getLogger(__name__)


@dataclass
class GraphStats:
    """Statistics about the graph."""

    nodes: int
    edges: int
    self_loops: int
    tagged_nodes: int
    distinct_keywords: int

    def __str__(self) -> str:
        return (
            f"Graph Stats:\n"
            f"  Nodes: {self.nodes} ({self.tagged_nodes} tagged)\n"
            f"  Edges: {self.edges} ({self.self_loops} self-loops)\n"
            f"  Keywords: {self.distinct_keywords} distinct"
        )


class KeywordGraph:
    """Directed graph whose nodes carry sorted keyword sets.

    Implements the ``node_identifiers`` / ``neighbors_directed`` pair the
    distance engine traverses, and doubles as the keyword index through
    ``keywords``.
    """

    def __init__(self):
        self.graph = nx.DiGraph()
        self.keywords: dict[Hashable, tuple] = {}

    def add_node(self, node_id: Hashable) -> None:
        self.graph.add_node(node_id)

    def add_edge(self, source: Hashable, target: Hashable) -> None:
        """Add a directed edge; adding the same edge twice is an error."""
        if self.graph.has_edge(source, target):
            raise ValueError(
                f"duplicate edge found: source: {source}, target: {target}."
            )
        self.graph.add_edge(source, target)

    def set_keywords(self, node_id: Hashable, keywords: Iterable) -> None:
        """Attach keywords to a node; each node may be tagged only once."""
        if node_id in self.keywords:
            raise ValueError(f"duplicate node found: {node_id}.")
        self.keywords[node_id] = tuple(sorted(set(keywords)))

    def node_identifiers(self) -> Iterator[Hashable]:
        return iter(self.graph.nodes)

    def neighbors_directed(
        self, node_id: Hashable, direction: str
    ) -> Iterator[Hashable]:
        if direction == "in":
            return self.graph.predecessors(node_id)
        if direction == "out":
            return self.graph.successors(node_id)
        raise ValueError(f"Unknown direction {direction!r}, expected 'in' or 'out'")

    def get_stats(self) -> GraphStats:
        """Get statistics about the graph."""
        tagged = [node for node in self.graph.nodes if self.keywords.get(node)]
        distinct = {kw for node in tagged for kw in self.keywords[node]}
        return GraphStats(
            nodes=self.graph.number_of_nodes(),
            edges=self.graph.number_of_edges(),
            self_loops=nx.number_of_selfloops(self.graph),
            tagged_nodes=len(tagged),
            distinct_keywords=len(distinct),
        )

    @classmethod
    def from_files(
        cls, edge_file: str | Path, keyword_file: str | Path
    ) -> "KeywordGraph":
        """Build from an edge file and a node-keyword file.

        Keyword entries for nodes missing from the edge file stay in the
        index but do not become graph nodes.
        """
        keyword_graph = cls()

        for record in iter_records(edge_file):
            keyword_graph.add_node(record.node)
            for target in record.values:
                try:
                    keyword_graph.add_edge(record.node, target)
                except ValueError as exc:
                    raise ValueError(
                        f"{exc} (line {record.line_number} in {edge_file})"
                    ) from exc

        for record in iter_records(keyword_file):
            try:
                keyword_graph.set_keywords(record.node, record.values)
            except ValueError as exc:
                raise ValueError(
                    f"{exc} (line {record.line_number} in {keyword_file})"
                ) from exc

        log.info(
            f"Loaded graph: {keyword_graph.graph.number_of_nodes()} nodes, "
            f"{keyword_graph.graph.number_of_edges()} edges, "
            f"{len(keyword_graph.keywords)} keyword entries"
        )
        return keyword_graph

    def save(self, path: Path) -> None:
        """Save graph and keyword index to a JSON file."""
        data = {
            "graph": nx.node_link_data(self.graph, edges="edges"),
            "keywords": [
                [node_id, list(keywords)]
                for node_id, keywords in sorted(self.keywords.items())
            ],
        }
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2, ensure_ascii=False)

    @classmethod
    def load(cls, path: Path) -> "KeywordGraph":
        """Load graph and keyword index from a JSON file."""
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)

        if not isinstance(data, dict) or "graph" not in data:
            raise ValueError(f"{path} is not a graph snapshot")

        keyword_graph = cls()
        try:
            keyword_graph.graph = nx.node_link_graph(
                data["graph"], directed=True, multigraph=False, edges="edges"
            )
        except (AttributeError, KeyError, TypeError) as exc:
            raise ValueError(f"{path} has a malformed graph: {exc}") from exc
        try:
            for node_id, keywords in data.get("keywords", []):
                keyword_graph.set_keywords(node_id, keywords)
        except TypeError as exc:
            raise ValueError(f"{path} has malformed keywords: {exc}") from exc
        return keyword_graph
