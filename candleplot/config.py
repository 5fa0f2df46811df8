"""Configuration loading for candleplot.

Settings come from an optional TOML file at
``~/.config/candleplot/config.toml`` (or the path in ``CANDLEPLOT_CONFIG``)::

    [candleplot]
    csv_file = "HistoricalData_1756580762948.csv"
    output_dir = "output"
    log_level = "INFO"

Command-line options take precedence over these values.
"""

import os
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field

DEFAULT_CSV_FILE = "HistoricalData_1756580762948.csv"
DEFAULT_OUTPUT_DIR = "output"
DEFAULT_LOG_LEVEL = "INFO"

CONFIG_ENV_VAR = "CANDLEPLOT_CONFIG"


class Settings(BaseModel):
    """Resolved default settings for a run."""

    csv_file: str = Field(default=DEFAULT_CSV_FILE, description="Input CSV path")
    output_dir: str = Field(default=DEFAULT_OUTPUT_DIR, description="Output directory")
    log_level: str = Field(default=DEFAULT_LOG_LEVEL, description="Logging level")

    model_config = {"frozen": True}


def get_config_path() -> Path:
    """Return the configuration file location."""
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        return Path(override)
    return Path.home() / ".config" / "candleplot" / "config.toml"


def _get_config(config_path: Optional[Path] = None) -> Optional[dict]:
    """Load the raw configuration.
    
    Returns:
        Config dict or None if not configured.
    """
    import toml
    
    config_path = config_path or get_config_path()
    
    if not config_path.exists():
        return None
    
    try:
        return toml.load(config_path)
    except Exception:
        return None


def load_settings(config_path: Optional[Path] = None) -> Settings:
    """Load settings, falling back to built-in defaults."""
    config = _get_config(config_path) or {}
    section = config.get("candleplot", {})
    
    return Settings(
        csv_file=str(section.get("csv_file", DEFAULT_CSV_FILE)),
        output_dir=str(section.get("output_dir", DEFAULT_OUTPUT_DIR)),
        log_level=str(section.get("log_level", DEFAULT_LOG_LEVEL)),
    )
