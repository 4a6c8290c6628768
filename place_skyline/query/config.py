"""Configuration for skyline queries."""

from dataclasses import dataclass, fields
from pathlib import Path

import yaml

OUTPUT_FORMATS = ("text", "json")


def _is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass(frozen=True)
class QueryConfig:
    """Knobs controlling distance computation and output."""

    workers: int = 1
    max_distance: int | None = None
    output_format: str = "text"

    def __post_init__(self):
        if not _is_int(self.workers):
            raise ValueError(f"workers must be an integer, got {self.workers!r}")
        if self.max_distance is not None and not _is_int(self.max_distance):
            raise ValueError(
                f"max_distance must be an integer, got {self.max_distance!r}"
            )
        if not isinstance(self.output_format, str):
            raise ValueError(
                f"output_format must be a string, got {self.output_format!r}"
            )
        if self.workers < 1:
            raise ValueError(f"workers must be at least 1, got {self.workers}")
        if self.max_distance is not None and self.max_distance < 0:
            raise ValueError(
                f"max_distance must be non-negative, got {self.max_distance}"
            )
        if self.output_format not in OUTPUT_FORMATS:
            raise ValueError(
                f"Unknown output format {self.output_format!r}, "
                f"expected one of {', '.join(OUTPUT_FORMATS)}"
            )

    def workers_for(self, keyword_count: int) -> int:
        """Never spin up more threads than there are keywords."""
        return max(1, min(self.workers, keyword_count))


DEFAULT_QUERY_CONFIG = QueryConfig()


def load_query_config(path: str | Path) -> QueryConfig:
    """Load a QueryConfig from a YAML mapping.

    Missing keys keep their defaults. Unknown keys are rejected so typos
    do not silently fall back to defaults.
    """
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    if not isinstance(data, dict):
        raise ValueError(f"Config file {path} must contain a mapping")

    known = {field.name for field in fields(QueryConfig)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ValueError(f"Unknown config keys in {path}: {', '.join(unknown)}")

    return QueryConfig(**data)
