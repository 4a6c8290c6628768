"""Text and JSON rendering of skyline results."""

import json
from typing import Any

from .types import Distance, QueryResult, is_reachable


def format_distance(distance: Distance) -> str:
    return str(distance) if is_reachable(distance) else "unreachable"


def render_text(result: QueryResult) -> str:
    """Render a result the way the command line prints it."""
    lines = [
        f"Keywords: {list(result.keywords)}",
        f"Execution time: {result.execution_seconds}",
    ]
    for entry in result.entries:
        for keyword, distance in zip(result.keywords, entry.distances):
            lines.append(
                f"{entry.node_id}: {keyword} distance {format_distance(distance)}"
            )
    return "\n".join(lines) + "\n"


def result_to_dict(result: QueryResult) -> dict[str, Any]:
    """JSON-safe structure; unreachable distances become null."""
    return {
        "keywords": list(result.keywords),
        "execution_time": result.execution_seconds,
        "skyline": [
            {
                "node": entry.node_id,
                "distances": [
                    distance if is_reachable(distance) else None
                    for distance in entry.distances
                ],
            }
            for entry in result.entries
        ],
    }


def render_json(result: QueryResult) -> str:
    return json.dumps(result_to_dict(result), indent=2, ensure_ascii=False)


def render(result: QueryResult, output_format: str = "text") -> str:
    if output_format == "json":
        return render_json(result) + "\n"
    return render_text(result)
