"""CLI for place-skyline."""

import dataclasses
import logging
import time
from pathlib import Path

import click
import yaml

from .graph.builder import KeywordGraph
from .parser.graph_files import parse_keyword_list
from .query.config import (
    DEFAULT_QUERY_CONFIG,
    OUTPUT_FORMATS,
    QueryConfig,
    load_query_config,
)
from .query.pipeline import run_query
from .query.renderer import render


def _parse_queries(ctx, param, values: tuple[str, ...]) -> list[list[int]]:
    queries = []
    for value in values:
        try:
            queries.append(parse_keyword_list(value))
        except ValueError as exc:
            raise click.BadParameter(f"{value!r}: {exc}") from exc
    return queries


def _load_graph(
    edge_file: Path | None, keyword_file: Path | None, graph_file: Path | None
) -> KeywordGraph:
    if graph_file is not None:
        if edge_file is not None or keyword_file is not None:
            raise click.UsageError("Use either --graph or -e/-n, not both")
        try:
            return KeywordGraph.load(graph_file)
        except ValueError as exc:
            raise SystemExit(f"Error: {exc}") from exc
    if edge_file is None or keyword_file is None:
        raise click.UsageError("Both -e EDGE_FILE and -n KEYWORD_FILE are required")
    try:
        return KeywordGraph.from_files(edge_file, keyword_file)
    except ValueError as exc:
        raise SystemExit(f"Error: {exc}") from exc


def graph_source_options(command):
    """Options shared by every command that needs a loaded graph."""
    command = click.option(
        "--graph",
        "graph_file",
        type=click.Path(exists=True, dir_okay=False, path_type=Path),
        help="JSON graph snapshot written by 'export'",
    )(command)
    command = click.option(
        "-n",
        "keyword_file",
        type=click.Path(exists=True, dir_okay=False, path_type=Path),
        help="Path to the node keyword file",
    )(command)
    command = click.option(
        "-e",
        "edge_file",
        type=click.Path(exists=True, dir_okay=False, path_type=Path),
        help="Path to the edge file",
    )(command)
    return command


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def cli(verbose: bool):
    """Place Skyline - Pareto-optimal places over keyword-tagged graphs."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@cli.command()
@click.argument("queries", nargs=-1, required=True, callback=_parse_queries)
@graph_source_options
@click.option(
    "--config",
    "config_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="YAML file with query settings",
)
@click.option(
    "--format",
    "-f",
    "output_format",
    type=click.Choice(OUTPUT_FORMATS),
    default=None,
    help="Output format (default: text)",
)
@click.option("--workers", type=int, default=None, help="Threads for keyword searches")
@click.option(
    "--max-distance",
    type=int,
    default=None,
    help="Treat distances beyond this many hops as unreachable",
)
def query(
    queries: list[list[int]],
    edge_file: Path | None,
    keyword_file: Path | None,
    graph_file: Path | None,
    config_file: Path | None,
    output_format: str | None,
    workers: int | None,
    max_distance: int | None,
):
    """Compute the skyline for each keyword list.

    QUERIES are keyword lists delimited by space. Example: "1,2,3" "4,5,6"
    """
    config = _resolve_config(config_file, output_format, workers, max_distance)

    start = time.perf_counter()
    keyword_graph = _load_graph(edge_file, keyword_file, graph_file)
    click.echo(f"Building graph: {time.perf_counter() - start}")

    for keywords in queries:
        result = run_query(
            keyword_graph, keyword_graph.keywords, keywords, config=config
        )
        click.echo(render(result, config.output_format))


def _resolve_config(
    config_file: Path | None,
    output_format: str | None,
    workers: int | None,
    max_distance: int | None,
) -> QueryConfig:
    overrides = {
        key: value
        for key, value in {
            "output_format": output_format,
            "workers": workers,
            "max_distance": max_distance,
        }.items()
        if value is not None
    }
    try:
        base = load_query_config(config_file) if config_file else DEFAULT_QUERY_CONFIG
        return dataclasses.replace(base, **overrides)
    except (ValueError, yaml.YAMLError) as exc:
        raise click.BadParameter(str(exc)) from exc


@cli.command()
@graph_source_options
def stats(edge_file: Path | None, keyword_file: Path | None, graph_file: Path | None):
    """Show graph statistics."""
    keyword_graph = _load_graph(edge_file, keyword_file, graph_file)
    click.echo(str(keyword_graph.get_stats()))


@cli.command()
@graph_source_options
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, path_type=Path),
    default="output/graph.json",
    help="Where to write the JSON snapshot",
)
def export(
    edge_file: Path | None,
    keyword_file: Path | None,
    graph_file: Path | None,
    output: Path,
):
    """Save the loaded graph and keyword index as JSON."""
    keyword_graph = _load_graph(edge_file, keyword_file, graph_file)
    keyword_graph.save(output)
    click.echo(f"Saved graph to {output}")


if __name__ == "__main__":
    cli()
