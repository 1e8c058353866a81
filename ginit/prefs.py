# ginit/prefs.py
"""Persist the GitHub access token between runs.

Preferences live in a small JSON document, one file per application
namespace (``~/.config/ginit/ginit.json`` by default)::

    {"github": {"token": "..."}}

The store is opened once at startup and closed when the process exits;
:meth:`CredentialStore.set_token` also flushes immediately so a token
survives a crash later in the run.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

from .config import APP_NAME, config_dir
from .models import AccessToken

log = logging.getLogger(__name__)


class CredentialStore:
    """Namespaced token storage backed by a JSON file.

    Parameters
    ----------
    path:
        Location of the JSON preferences file.  It is created on first
        write; a missing file reads as empty.
    """

    def __init__(self, path: Path | str):
        self.path = Path(path)
        self._data: Dict[str, Any] = {}
        self._dirty = False

    @classmethod
    def open(cls, name: str = APP_NAME, directory: Optional[Path] = None) -> "CredentialStore":
        """Open (and load) the preferences file for application *name*."""
        store = cls((directory or config_dir()) / f"{name}.json")
        store.load()
        return store

    # ------------------------------------------------------------------ #
    #  Lifecycle
    # ------------------------------------------------------------------ #
    def load(self) -> None:
        if not self.path.exists():
            self._data = {}
            return
        text = self.path.read_text(encoding="utf-8")
        self._data = json.loads(text) if text.strip() else {}
        log.debug("Loaded preferences from %s", self.path)

    def flush(self) -> None:
        """Write pending changes to disk, readable by the owner only."""
        if not self._dirty:
            return
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp = self.path.with_suffix(".tmp")
        fd = os.open(tmp, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
        os.fchmod(fd, 0o600)
        with os.fdopen(fd, "w", encoding="utf-8") as fh:
            fh.write(json.dumps(self._data, indent=2))
        os.replace(tmp, self.path)
        self._dirty = False
        log.debug("Saved preferences to %s", self.path)

    def close(self) -> None:
        self.flush()

    def __enter__(self) -> "CredentialStore":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    # ------------------------------------------------------------------ #
    #  Token access
    # ------------------------------------------------------------------ #
    def get_token(self, namespace: str) -> Optional[AccessToken]:
        """Return the token stored under *namespace*, or ``None``."""
        section = self._data.get(namespace)
        if not isinstance(section, dict) or not section.get("token"):
            return None
        return AccessToken(section["token"])

    def set_token(self, namespace: str, token: AccessToken) -> None:
        """Store *token* under *namespace*, replacing any previous one."""
        self._data[namespace] = {"token": token.value}
        self._dirty = True
        self.flush()


__all__ = ["CredentialStore"]
