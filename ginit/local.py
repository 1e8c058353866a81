# ginit/local.py
"""
Turn the working directory into a git repository and push it (via gitpython).
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Optional

import click
from git import Repo
from git.exc import CommandError

from .config import COMMIT_MESSAGE, IGNORE_FILE, REMOTE_NAME
from .errors import VcsError

log = logging.getLogger(__name__)


class LocalRepoInitializer:
    """Runs init, add, commit, remote add and push, in that order.

    The first failing step raises :class:`VcsError`; whatever already ran
    (an initialised ``.git``, a commit) is left in place.
    """

    def __init__(
        self,
        directory: Optional[Path] = None,
        init_repo: Callable[[Path], Repo] = Repo.init,
        message: str = COMMIT_MESSAGE,
        remote: str = REMOTE_NAME,
    ):
        self.directory = Path(directory) if directory is not None else Path.cwd()
        self.init_repo = init_repo
        self.message = message
        self.remote = remote

    def initialize_and_push(self, endpoint: str) -> Repo:
        click.echo("Setting up the repository...")
        step = "init"
        try:
            log.info("Initializing a fresh git repo at %s", self.directory)
            repo = self.init_repo(self.directory)

            step = "add"
            repo.git.add(IGNORE_FILE)
            repo.git.add(A=True)

            step = "commit"
            repo.index.commit(self.message)
            log.info("Committed: %s", self.message)

            step = "remote add"
            log.info("Adding %s remote: %s", self.remote, endpoint)
            repo.create_remote(self.remote, endpoint)

            step = "push"
            branch = repo.active_branch.name
            log.info("Pushing %s to %s…", branch, self.remote)
            repo.git.push("-u", self.remote, branch)
        except (CommandError, OSError, ValueError) as exc:
            raise VcsError(step, str(exc)) from exc
        return repo


__all__ = ["LocalRepoInitializer"]
