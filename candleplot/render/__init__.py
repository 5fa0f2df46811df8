"""Chart rendering for candleplot."""

from candleplot.render.chart import ARTIFACT_NAME, ChartRenderer, build_candle_table

__all__ = ["ARTIFACT_NAME", "ChartRenderer", "build_candle_table"]
