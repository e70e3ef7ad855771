"""CLI for streamstats.

Runs the statistics engine over a JSON dataset and prints the results as
tables.

Usage:
    streamstats correlate data/tracks_sample.json -f energy -f valence -f tempo
    streamstats averages data/tracks_sample.json --group-by track_genre -f energy
    streamstats counts data/weekly_chart.json --group-by artist_name --distinct song_title
    streamstats histogram data/tracks_sample.json --field tempo --bins 30
    streamstats correlate --dataset tracks --catalog datasets.yaml
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated, Any

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table as RichTable

from streamstats.analysis import (
    compute_correlation_matrix,
    compute_field_histogram,
    compute_group_averages,
    compute_group_counts,
    filter_complete,
    filter_positive,
    summarize_correlations,
)
from streamstats.core.config import get_settings
from streamstats.core.logging import configure_logging, log_context
from streamstats.core.models.base import InvalidArgumentError
from streamstats.sources import DatasetEntry, DatasetLoadError, load_catalog, try_load_dataset
from streamstats.sources.catalog import resolve_dataset

app = typer.Typer(
    name="streamstats",
    help="Correlations, group averages and distributions for streaming datasets.",
    no_args_is_help=True,
)
console = Console()

SourceArg = Annotated[
    Path | None,
    typer.Argument(
        help="Path to a JSON file holding an array of row objects",
        dir_okay=False,
        resolve_path=True,
    ),
]
DatasetOpt = Annotated[
    str | None,
    typer.Option("--dataset", "-d", help="Dataset identifier from the catalog"),
]
CatalogOpt = Annotated[
    Path | None,
    typer.Option("--catalog", "-c", help="YAML dataset catalog", dir_okay=False),
]
FeaturesOpt = Annotated[
    list[str] | None,
    typer.Option("--feature", "-f", help="Numeric feature (repeatable)"),
]


@app.callback()
def main(
    log_level: Annotated[
        str | None,
        typer.Option("--log-level", help="Logging level (default: STREAMSTATS_LOG_LEVEL)"),
    ] = None,
) -> None:
    """Configure logging for every command."""
    configure_logging(log_level=log_level)


def _load(
    source: Path | None, dataset: str | None, catalog: Path | None
) -> tuple[list[dict[str, Any]], DatasetEntry | None]:
    """Load rows from a file path or a catalog entry."""
    if source is not None:
        result = try_load_dataset(source)
        if not result.success:
            raise _fail(result.error)
        for warning in result.warnings:
            console.print(f"[yellow]Warning:[/yellow] {escape(warning)}", soft_wrap=True)
        return result.unwrap(), None
    if dataset is None or catalog is None:
        raise InvalidArgumentError("Pass a dataset file, or both --dataset and --catalog")
    entry, rows = resolve_dataset(load_catalog(catalog), dataset)
    return rows, entry


def _required(entry: DatasetEntry | None) -> list[str]:
    return entry.required_fields if entry else []


def _fail(error: Exception | str | None) -> typer.Exit:
    console.print(f"[red]Error:[/red] {escape(str(error))}", soft_wrap=True)
    return typer.Exit(1)


def _fmt(value: float | None, digits: int = 3) -> str:
    return "—" if value is None else f"{value:.{digits}f}"


@app.command()
def correlate(
    source: SourceArg = None,
    dataset: DatasetOpt = None,
    catalog: CatalogOpt = None,
    features: FeaturesOpt = None,
    method: Annotated[
        str | None,
        typer.Option("--method", "-m", help="single_pass or two_pass"),
    ] = None,
    pairs: Annotated[
        bool,
        typer.Option("--pairs", help="Also list pairs by strength with p-values"),
    ] = False,
) -> None:
    """Print the Pearson correlation matrix of numeric features.

    Rows missing any selected feature, or any field the catalog entry marks
    as required, are dropped first.
    """
    try:
        rows, entry = _load(source, dataset, catalog)
        names = features or (entry.features if entry else [])
        with log_context(command="correlate"):
            complete = filter_complete(rows, _required(entry), numeric_fields=names)
            matrix = compute_correlation_matrix(complete, names, method=method)
    except (InvalidArgumentError, DatasetLoadError) as e:
        raise _fail(e) from e

    table = RichTable(title="Pearson correlation")
    table.add_column("")
    for name in matrix.features:
        table.add_column(name, justify="right")
    for name, row in zip(matrix.features, matrix.values, strict=True):
        table.add_row(name, *(_fmt(v, 2) for v in row))
    console.print(table)
    console.print(f"{matrix.sample_size} complete rows", soft_wrap=True)

    if pairs:
        pair_table = RichTable(title="Pairs")
        pair_table.add_column("Feature 1")
        pair_table.add_column("Feature 2")
        pair_table.add_column("r", justify="right")
        pair_table.add_column("Strength")
        pair_table.add_column("p-value", justify="right")
        for pair in summarize_correlations(matrix):
            pair_table.add_row(
                pair.feature1,
                pair.feature2,
                _fmt(pair.r),
                pair.strength.value,
                "—" if pair.p_value is None else f"{pair.p_value:.2e}",
            )
        console.print(pair_table)


@app.command()
def averages(
    source: SourceArg = None,
    dataset: DatasetOpt = None,
    catalog: CatalogOpt = None,
    group_by: Annotated[
        str | None,
        typer.Option("--group-by", "-g", help="Field whose values define the groups"),
    ] = None,
    features: FeaturesOpt = None,
) -> None:
    """Print the mean of each feature within each group.

    With a catalog entry, rows missing one of its required fields are dropped.
    """
    try:
        rows, entry = _load(source, dataset, catalog)
        field = group_by or (entry.group_by if entry else None)
        if field is None:
            raise InvalidArgumentError("--group-by is required")
        names = features or (entry.features if entry else [])
        with log_context(command="averages"):
            rows = filter_complete(rows, _required(entry))
            result = compute_group_averages(rows, field, names)
    except (InvalidArgumentError, DatasetLoadError) as e:
        raise _fail(e) from e

    table = RichTable(title=f"Averages by {field}")
    table.add_column(field)
    table.add_column("Rows", justify="right")
    for name in names:
        table.add_column(name, justify="right")
    for key, average in result.items():
        table.add_row(str(key), str(average.row_count), *(_fmt(average.get(n)) for n in names))
    console.print(table)


@app.command()
def counts(
    source: SourceArg = None,
    dataset: DatasetOpt = None,
    catalog: CatalogOpt = None,
    group_by: Annotated[
        str | None,
        typer.Option("--group-by", "-g", help="Field whose values define the groups"),
    ] = None,
    distinct: Annotated[
        str | None,
        typer.Option("--distinct", help="Count distinct values of this field instead of rows"),
    ] = None,
    top: Annotated[
        int | None,
        typer.Option(
            "--top", "-n", help="Show the N largest groups (default: STREAMSTATS_TOP_N)"
        ),
    ] = None,
) -> None:
    """Print the largest groups by row count or distinct-value count."""
    try:
        rows, entry = _load(source, dataset, catalog)
        field = group_by or (entry.group_by if entry else None)
        if field is None:
            raise InvalidArgumentError("--group-by is required")
        with log_context(command="counts"):
            ranked = compute_group_counts(
                rows, field, distinct_field=distinct, top_n=top or get_settings().top_n
            )
    except (InvalidArgumentError, DatasetLoadError) as e:
        raise _fail(e) from e

    table = RichTable(title=f"Top {len(ranked)} by {field}")
    table.add_column("#", justify="right")
    table.add_column(field)
    table.add_column(f"Distinct {distinct}" if distinct else "Rows", justify="right")
    for rank, group in enumerate(ranked, start=1):
        table.add_row(str(rank), str(group.key), str(group.count))
    console.print(table)


@app.command()
def histogram(
    source: SourceArg = None,
    dataset: DatasetOpt = None,
    catalog: CatalogOpt = None,
    field: Annotated[str, typer.Option("--field", help="Numeric field to bin")] = "tempo",
    bins: Annotated[
        int | None,
        typer.Option(
            "--bins", "-b", help="Number of buckets (default: STREAMSTATS_HISTOGRAM_BINS)"
        ),
    ] = None,
    scale: Annotated[
        float,
        typer.Option("--scale", help="Multiply values first, e.g. 0.0000166667 for ms to minutes"),
    ] = 1.0,
) -> None:
    """Print an equal-width histogram of one field (non-positive values dropped)."""
    try:
        rows, _ = _load(source, dataset, catalog)
        with log_context(command="histogram"):
            buckets = compute_field_histogram(filter_positive(rows, field), field, bins, scale)
    except (InvalidArgumentError, DatasetLoadError) as e:
        raise _fail(e) from e

    table = RichTable(title=f"Distribution of {field}")
    table.add_column("Range")
    table.add_column("Count", justify="right")
    for bucket in buckets:
        table.add_row(bucket.label, str(bucket.count))
    console.print(table)


if __name__ == "__main__":
    app()
