"""Candlestick chart rendering.

Draws the candle sequence as a Rich table and exports it as an HTML
artifact in the output directory.
"""

import io
import logging
from pathlib import Path
from typing import Optional, Sequence, Union

from rich.console import Console
from rich.table import Table

from candleplot.errors import RenderError
from candleplot.models import Candlestick

logger = logging.getLogger(__name__)

ARTIFACT_NAME = "candlesticks.html"


def build_candle_table(
    candles: Sequence[Candlestick], title: Optional[str] = None
) -> Table:
    """Build a table with one row per candle.
    
    Args:
        candles: Ordered candlesticks.
        title: Optional table title.
        
    Returns:
        Rich table with OHLCV columns and change from the previous close.
    """
    table = Table(
        title=title or f"Candlesticks ({len(candles)} candles)",
        show_header=True,
        header_style="bold cyan",
    )
    
    table.add_column("Date/Time (UTC)", style="dim")
    table.add_column("", justify="center")
    table.add_column("Open", justify="right")
    table.add_column("High", justify="right", style="green")
    table.add_column("Low", justify="right", style="red")
    table.add_column("Close", justify="right")
    table.add_column("Volume", justify="right", style="dim")
    table.add_column("Change", justify="right")
    
    prev_close = None
    for candle in candles:
        if prev_close is not None:
            change = candle.close - prev_close
            change_pct = (change / prev_close * 100) if prev_close else 0
            change_str = f"{change:+.2f} ({change_pct:+.2f}%)"
            change_style = "green" if change >= 0 else "red"
        else:
            change_str = "-"
            change_style = "dim"
        
        body_color = "green" if candle.is_bullish else "red"
        
        table.add_row(
            candle.timestamp.strftime("%Y-%m-%d %H:%M:%S"),
            f"[{body_color}]█[/{body_color}]",
            f"{candle.open:.2f}",
            f"{candle.high:.2f}",
            f"{candle.low:.2f}",
            f"{candle.close:.2f}",
            f"{candle.volume:,.0f}",
            f"[{change_style}]{change_str}[/{change_style}]",
        )
        prev_close = candle.close
    
    return table


class ChartRenderer:
    """Renders candlestick sequences to an output directory."""

    def __init__(self, artifact_name: str = ARTIFACT_NAME, width: int = 120):
        """Initialize the renderer.

        Args:
            artifact_name: File name of the HTML artifact.
            width: Console width used for the exported chart.
        """
        self.artifact_name = artifact_name
        self.width = width

    def render(
        self, candles: Sequence[Candlestick], output_dir: Union[str, Path]
    ) -> Optional[Path]:
        """Render candles into ``output_dir``.

        The output directory must already exist.

        Args:
            candles: Ordered, fully parsed candlesticks.
            output_dir: Directory that receives the artifact.

        Returns:
            Path of the written artifact, or None if there was nothing to plot.

        Raises:
            RenderError: If the artifact cannot be written.
        """
        output_dir = Path(output_dir)
        logger.info("Creating candlestick plot for %d data points", len(candles))
        logger.info("Output directory: %s", output_dir)

        if not candles:
            logger.warning("No data available for plotting")
            return None

        console = Console(record=True, file=io.StringIO(), width=self.width)
        console.print(build_candle_table(candles))

        artifact = output_dir / self.artifact_name
        try:
            console.save_html(str(artifact))
        except OSError as e:
            raise RenderError(
                f"Failed to write {artifact}: {e.strerror or e}",
                context={"path": str(artifact)},
            ) from e

        logger.info("Wrote chart to %s", artifact)
        return artifact
