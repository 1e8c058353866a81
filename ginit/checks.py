# ginit/checks.py
"""Pre-flight check run before anything else."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from .config import VCS_DIR
from .errors import AlreadyInitializedError


def check(directory: Optional[Path] = None) -> None:
    """Raise :class:`AlreadyInitializedError` if *directory* is a git repo."""
    directory = Path(directory) if directory is not None else Path.cwd()
    if (directory / VCS_DIR).exists():
        raise AlreadyInitializedError(directory)
