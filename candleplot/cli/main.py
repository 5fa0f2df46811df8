"""Main CLI entry point for candleplot."""

from typing import NoReturn, Optional

import click
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

from candleplot.config import load_settings
from candleplot.data import convert, ingest
from candleplot.errors import (
    CandleplotError,
    OutputLocationError,
    RecordDeserializationError,
    RenderError,
    SourceReadError,
    TimestampParseError,
)
from candleplot.logging_setup import setup_logging
from candleplot.render import ChartRenderer, build_candle_table
from candleplot.utils import ensure_directory_exists, normalize

# Console for rich output
console = Console()

CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

STAGE_TITLES = {
    "output": "Output Directory",
    "ingest": "Ingestion",
    "convert": "Conversion",
    "render": "Rendering",
}


def _fail(error: CandleplotError, summary: str) -> NoReturn:
    """Print an error panel naming the failed stage and exit."""
    title = STAGE_TITLES.get(error.stage, "Pipeline")
    console.print(Panel(
        f"[red]{summary}[/red]\n\n{escape(str(error))}",
        title=f"[bold red]{title} Failed[/bold red]",
        border_style="red",
    ))
    raise SystemExit(1)


@click.command(context_settings=CONTEXT_SETTINGS)
@click.argument("input_string")
@click.option(
    "-c", "--csv-file",
    default=None,
    help="Path to the OHLCV CSV file (default: HistoricalData_1756580762948.csv)",
)
@click.option(
    "-o", "--output-dir",
    default=None,
    help="Output directory for generated files (default: output)",
)
@click.option(
    "-l", "--log-level",
    default=None,
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    help="Logging level (default: INFO)",
)
@click.option(
    "--show/--no-show",
    default=False,
    help="Print the candlestick table to the terminal.",
)
@click.version_option(package_name="candleplot")
def cli(
    input_string: str,
    csv_file: Optional[str],
    output_dir: Optional[str],
    log_level: Optional[str],
    show: bool,
) -> None:
    """Candleplot - visualize OHLCV data as candlestick charts.
    
    INPUT_STRING is echoed back in upper case.
    
    When the CSV file does not exist, a built-in three-day sample
    dataset is plotted instead.
    
    \b
    Examples:
      candleplot "hello world"
      candleplot "aapl" --csv-file prices.csv --output-dir charts
      candleplot "aapl" --show
    """
    settings = load_settings()
    if csv_file is None:
        csv_file = settings.csv_file
    if output_dir is None:
        output_dir = settings.output_dir
    setup_logging(log_level or settings.log_level)
    
    click.echo(normalize(input_string))
    
    try:
        ensure_directory_exists(output_dir)
    except OutputLocationError as e:
        _fail(e, "Failed to create output directory.")
    
    try:
        records = ingest(csv_file)
    except (SourceReadError, RecordDeserializationError) as e:
        _fail(e, "Failed to load CSV data.")
    
    try:
        candles = convert(records)
    except TimestampParseError as e:
        _fail(e, "Failed to convert records to candlesticks.")
    
    if show:
        console.print(build_candle_table(candles))
    
    try:
        artifact = ChartRenderer().render(candles, output_dir)
    except RenderError as e:
        _fail(e, "Failed to create candlestick plot.")
    
    if artifact is not None:
        console.print(f"[dim]Chart written to {escape(str(artifact))}[/dim]")


def main() -> None:
    """Main entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()
