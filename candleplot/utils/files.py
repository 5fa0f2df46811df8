"""File system helpers for output locations."""

import logging
from pathlib import Path
from typing import Union

from candleplot.errors import OutputLocationError

logger = logging.getLogger(__name__)


def ensure_directory_exists(dir_path: Union[str, Path]) -> Path:
    """Ensure that a directory exists, creating it if necessary.

    Args:
        dir_path: Path to the directory.

    Returns:
        The directory path.

    Raises:
        OutputLocationError: If the path is not a directory or cannot be created.
    """
    path = Path(dir_path)

    if path.is_dir():
        logger.info("Directory already exists: %s", path)
        return path

    if path.exists():
        raise OutputLocationError(f"Not a directory: {path}", path=path)

    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise OutputLocationError(
            f"Failed to create directory {path}: {e.strerror or e}", path=path
        ) from e

    logger.info("Created directory: %s", path)
    return path


def file_exists(file_path: Union[str, Path]) -> bool:
    """Check whether anything exists at ``file_path``."""
    return Path(file_path).exists()
