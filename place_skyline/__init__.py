"""Semantic place skyline queries over keyword-tagged directed graphs."""

from typing import Any

__all__ = ["run_query", "semantic_place_skyline"]


def semantic_place_skyline(*args: Any, **kwargs: Any) -> tuple:
    from .query.pipeline import semantic_place_skyline as _semantic_place_skyline

    return _semantic_place_skyline(*args, **kwargs)


def run_query(*args: Any, **kwargs: Any) -> Any:
    from .query.pipeline import run_query as _run_query

    return _run_query(*args, **kwargs)
