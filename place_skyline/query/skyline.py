"""Pareto-dominance filtering of distance vectors."""

from typing import Hashable, Mapping, Sequence

from .types import Distance, Dominance, DistanceVector, SkylineEntry


def compare_distance_vectors(
    first: Sequence[Distance], second: Sequence[Distance]
) -> Dominance:
    """Compare two index-aligned vectors component-wise.

    The first differing component fixes the direction; any later component
    pointing the other way makes the pair incomparable.
    """
    if len(first) != len(second):
        raise ValueError(
            f"Cannot compare vectors of length {len(first)} and {len(second)}"
        )

    direction = Dominance.EQUAL
    for a, b in zip(first, second):
        if a == b:
            continue
        if a < b:
            if direction is Dominance.GREATER:
                return Dominance.INCOMPARABLE
            direction = Dominance.LESS
        else:
            if direction is Dominance.LESS:
                return Dominance.INCOMPARABLE
            direction = Dominance.GREATER
    return direction


def dominates(first: Sequence[Distance], second: Sequence[Distance]) -> bool:
    return compare_distance_vectors(first, second) is Dominance.LESS


def compute_skyline(
    distances: Mapping[Hashable, Sequence[Distance]],
) -> tuple[SkylineEntry, ...]:
    """Nodes whose vector is not dominated by any other node's vector.

    Naive all-pairs check. Nodes sharing a vector are checked once since
    they always share the verdict. Entries come back sorted by node id.
    """
    by_vector: dict[DistanceVector, list[Hashable]] = {}
    for node_id, vector in distances.items():
        by_vector.setdefault(tuple(vector), []).append(node_id)

    vectors = list(by_vector)
    entries: list[SkylineEntry] = []
    for vector in vectors:
        if any(dominates(other, vector) for other in vectors):
            continue
        entries.extend(
            SkylineEntry(node_id=node_id, distances=vector)
            for node_id in by_vector[vector]
        )

    entries.sort(key=lambda entry: entry.node_id)
    return tuple(entries)
