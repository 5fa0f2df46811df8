"""Utility helpers for candleplot."""

from candleplot.utils.files import ensure_directory_exists, file_exists
from candleplot.utils.text import normalize, trim

__all__ = [
    "ensure_directory_exists",
    "file_exists",
    "normalize",
    "trim",
]
