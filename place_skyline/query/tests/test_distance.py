import random

import networkx as nx
import pytest

from place_skyline.query.config import QueryConfig
from place_skyline.query.distance import (
    compute_distances,
    compute_keyword_distances,
    has_keyword,
    step_distance,
)
from place_skyline.query.types import UNREACHABLE


class _Graph:
    """Minimal adjacency-list graph satisfying the traversal protocol."""

    def __init__(self, edges: list[tuple[str, str]], nodes: list[str] | None = None):
        self._nodes = list(nodes or [])
        self._incoming: dict[str, list[str]] = {}
        self._outgoing: dict[str, list[str]] = {}
        for source, target in edges:
            for node in (source, target):
                if node not in self._nodes:
                    self._nodes.append(node)
            self._outgoing.setdefault(source, []).append(target)
            self._incoming.setdefault(target, []).append(source)

    def node_identifiers(self):
        return iter(self._nodes)

    def neighbors_directed(self, node_id, direction):
        table = self._incoming if direction == "in" else self._outgoing
        return iter(table.get(node_id, []))


@pytest.fixture
def chain():
    """A -> B -> C with 'x' on C and 'y' on B."""
    graph = _Graph([("A", "B"), ("B", "C")])
    index = {"B": ("y",), "C": ("x",)}
    return graph, index


def test_has_keyword_uses_sorted_lookup():
    assert has_keyword((1, 3, 5), 3)
    assert not has_keyword((1, 3, 5), 4)
    assert not has_keyword((1, 3, 5), 6)
    assert not has_keyword((), 1)


def test_step_distance_clamps_to_unreachable():
    assert step_distance(0) == 1
    assert step_distance(UNREACHABLE) == UNREACHABLE
    assert step_distance(2, max_distance=3) == 3
    assert step_distance(3, max_distance=3) == UNREACHABLE


def test_chain_distances(chain):
    graph, index = chain

    distances = compute_distances(graph, index, ["x", "y"])

    assert distances == {
        "A": (2, 1),
        "B": (1, 0),
        "C": (0, UNREACHABLE),
    }


def test_edges_are_followed_forward_only():
    # B -> A: A cannot reach B, so A never gets a finite distance to 'k'.
    graph = _Graph([("B", "A")])
    index = {"B": ("k",)}

    distances = compute_keyword_distances(graph, index, "k")

    assert distances == {"B": 0, "A": UNREACHABLE}


def test_keyword_matched_by_no_node_is_unreachable_everywhere(chain):
    graph, index = chain

    distances = compute_distances(graph, index, ["missing", "x"])

    assert all(vector[0] == UNREACHABLE for vector in distances.values())
    assert distances["A"][1] == 2


def test_nodes_missing_from_index_still_receive_distances():
    graph = _Graph([("A", "B")], nodes=["Z"])
    index = {"B": (1,)}

    distances = compute_keyword_distances(graph, index, 1)

    assert distances == {"Z": UNREACHABLE, "A": 1, "B": 0}


def test_self_loop_is_an_ordinary_edge():
    graph = _Graph([("A", "A"), ("A", "B")])
    index = {"B": ("k",)}

    distances = compute_keyword_distances(graph, index, "k")

    assert distances == {"A": 1, "B": 0}


def test_shortest_path_wins_over_longer_one():
    # A -> B -> C -> D and A -> D
    graph = _Graph([("A", "B"), ("B", "C"), ("C", "D"), ("A", "D")])
    index = {"D": ("k",)}

    distances = compute_keyword_distances(graph, index, "k")

    assert distances == {"A": 1, "B": 2, "C": 1, "D": 0}


def test_max_distance_bounds_search_radius(chain):
    graph, index = chain

    distances = compute_distances(
        graph, index, ["x"], config=QueryConfig(max_distance=1)
    )

    assert distances == {"A": (UNREACHABLE,), "B": (1,), "C": (0,)}


def test_empty_keywords_rejected(chain):
    graph, index = chain

    with pytest.raises(ValueError, match="At least one"):
        compute_distances(graph, index, [])


def _random_graph(seed: int, nodes: int = 30, edges: int = 60, keywords: int = 4):
    rng = random.Random(seed)
    digraph = nx.gnm_random_graph(nodes, edges, seed=seed, directed=True)
    index = {}
    for node in digraph.nodes:
        tags = {rng.randrange(keywords) for _ in range(rng.randrange(3))}
        if tags:
            index[node] = tuple(sorted(tags))
    return digraph, index


class _NxGraph:
    def __init__(self, digraph: nx.DiGraph):
        self.digraph = digraph

    def node_identifiers(self):
        return iter(self.digraph.nodes)

    def neighbors_directed(self, node_id, direction):
        if direction == "in":
            return self.digraph.predecessors(node_id)
        return self.digraph.successors(node_id)


@pytest.mark.parametrize("seed", [1, 7, 42])
def test_distances_match_brute_force_bfs(seed):
    digraph, index = _random_graph(seed)
    keywords = [0, 1, 2, 3, 99]

    distances = compute_distances(_NxGraph(digraph), index, keywords)

    for node in digraph.nodes:
        lengths = nx.single_source_shortest_path_length(digraph, node)
        for slot, keyword in enumerate(keywords):
            reachable = [
                hops
                for target, hops in lengths.items()
                if keyword in index.get(target, ())
            ]
            expected = min(reachable) if reachable else UNREACHABLE
            assert distances[node][slot] == expected


def test_thread_pool_matches_sequential():
    digraph, index = _random_graph(3)
    graph = _NxGraph(digraph)
    keywords = [0, 1, 2, 3]

    sequential = compute_distances(graph, index, keywords)
    threaded = compute_distances(graph, index, keywords, config=QueryConfig(workers=4))

    assert threaded == sequential
