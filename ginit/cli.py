# ginit/cli.py
"""
Entry point that wires the stages together::

    check -> authenticate -> create repo -> .gitignore -> init, commit, push

Usage
-----
    ginit                         # name defaults to the current folder
    ginit my-repo "A description"
    ginit -v                      # log progress
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

import click

from . import checks
from .auth import AuthenticationWorkflow
from .errors import AlreadyInitializedError, AuthApiError, GinitError, RepoCreationError, VcsError
from .ignore import IgnoreFileGenerator
from .local import LocalRepoInitializer
from .models import RepositoryDefaults
from .prefs import CredentialStore
from .prompts import Prompter
from .repos import RepositoryProvisioner

log = logging.getLogger(__name__)


def _parse_args(argv: Optional[List[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="ginit",
        description="Create a GitHub repository for the current folder and push it.",
    )
    parser.add_argument("name", nargs="?", help="repository name (default: folder name)")
    parser.add_argument("description", nargs="?", help="repository description")
    parser.add_argument(
        "-v", "--verbose", action="count", default=0,
        help="log progress (-vv for debug output)",
    )
    return parser.parse_args(argv)


def _setup_logging(verbosity: int) -> None:
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity > 1:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="[%(asctime)s] %(levelname)s: %(message)s")


def run(
    args: argparse.Namespace,
    prompter: Prompter,
    store: CredentialStore,
    directory: Path,
) -> None:
    """Authenticate, create the repository, write .gitignore and push."""
    token = AuthenticationWorkflow(store, prompter).run()
    click.secho("Successfully authenticated!", fg="green")

    defaults = RepositoryDefaults(name=args.name, description=args.description)
    provisioned = RepositoryProvisioner(token, prompter, directory=directory).provision(defaults)

    IgnoreFileGenerator(prompter, directory).generate()
    LocalRepoInitializer(directory).initialize_and_push(provisioned.push_endpoint)


def main(argv: Optional[List[str]] = None) -> int:
    args = _parse_args(argv)
    _setup_logging(args.verbose)
    directory = Path.cwd()
    log.debug("Working directory: %s", directory)

    try:
        checks.check(directory)
    except AlreadyInitializedError:
        click.secho("Already a git repository!", fg="red")
        return 1

    try:
        with CredentialStore.open() as store:
            run(args, Prompter(), store, directory)
    except AuthApiError as exc:
        click.secho(exc.message, fg="red")
        click.secho(exc.describe(), fg="red")
        return 1
    except RepoCreationError as exc:
        click.secho(f"An error has occurred: {exc.message}", fg="red")
        return 1
    except VcsError as exc:
        click.secho(f"An error has occurred: {exc}", fg="red")
        return 1
    except (GinitError, OSError, ValueError) as exc:
        log.debug("Aborted", exc_info=True)
        click.secho(f"An error has occurred: {exc}", fg="red")
        return 1
    except click.Abort:
        click.echo()
        return 1

    click.secho("All done!", fg="green")
    return 0


if __name__ == "__main__":
    sys.exit(main())
