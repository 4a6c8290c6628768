"""Typed contracts for skyline queries."""

import math
from dataclasses import dataclass
from enum import Enum
from typing import Hashable

# Compares greater than every finite distance and absorbs increments.
UNREACHABLE = math.inf

Distance = int | float
DistanceVector = tuple[Distance, ...]


class Dominance(Enum):
    """Outcome of comparing two distance vectors."""

    LESS = "less"
    GREATER = "greater"
    EQUAL = "equal"
    INCOMPARABLE = "incomparable"


def is_reachable(distance: Distance) -> bool:
    return distance != UNREACHABLE


@dataclass(frozen=True)
class SkylineEntry:
    node_id: Hashable
    distances: DistanceVector


@dataclass(frozen=True)
class QueryResult:
    keywords: tuple[Hashable, ...]
    entries: tuple[SkylineEntry, ...]
    node_count: int
    distance_seconds: float
    skyline_seconds: float

    @property
    def execution_seconds(self) -> float:
        return self.distance_seconds + self.skyline_seconds

    def node_ids(self) -> set[Hashable]:
        return {entry.node_id for entry in self.entries}
