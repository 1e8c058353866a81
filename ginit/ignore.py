# ginit/ignore.py
"""
Write the ``.gitignore`` for the new repository.

The user picks entries of the working directory to ignore.  Common
dependency folders are pre-selected when they exist.  With nothing to pick
from, or nothing picked, an empty ``.gitignore`` is created (an existing
one is left as it is).
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import List, Optional

from .config import DEFAULT_IGNORES, IGNORE_FILE, VCS_DIR
from .prompts import Prompter

log = logging.getLogger(__name__)


class IgnoreFileGenerator:
    def __init__(self, prompter: Prompter, directory: Optional[Path] = None):
        self.prompter = prompter
        self.directory = Path(directory) if directory is not None else Path.cwd()

    @property
    def path(self) -> Path:
        return self.directory / IGNORE_FILE

    def candidates(self) -> List[str]:
        """Directory entries that may be ignored."""
        return sorted(n for n in os.listdir(self.directory) if n not in (VCS_DIR, IGNORE_FILE))

    def generate(self) -> Path:
        entries = self.candidates()
        selected: List[str] = []
        if entries:
            selected = self.prompter.checkbox(
                "Select the files and/or folders you wish to ignore",
                entries,
                default=[d for d in DEFAULT_IGNORES if d in entries],
            )

        if selected:
            self.path.write_text("\n".join(selected), encoding="utf-8")
            log.info("Wrote %s (%d entries)", self.path, len(selected))
        else:
            self.path.touch(exist_ok=True)
            log.info("Touched %s", self.path)
        return self.path


__all__ = ["IgnoreFileGenerator"]
