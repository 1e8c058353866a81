# ginit/repos.py
"""Create the repository on GitHub."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Optional

import click
import requests
from github import Github, GithubException

from .errors import RepoCreationError
from .github_api import github_client
from .models import AccessToken, ProvisionedRepository, RepositoryDefaults, RepositoryRequest
from .prompts import Prompter, ask_required

log = logging.getLogger(__name__)

VISIBILITIES = ["public", "private"]


class RepositoryProvisioner:
    """Ask for the repository details and create it for the token's owner."""

    def __init__(
        self,
        token: AccessToken,
        prompter: Prompter,
        client_factory: Callable[[AccessToken], Github] = github_client,
        directory: Optional[Path] = None,
    ):
        if token is None:
            raise ValueError("an access token is required")
        self.token = token
        self.prompter = prompter
        self.client_factory = client_factory
        self.directory = Path(directory) if directory is not None else Path.cwd()

    def ask(self, defaults: RepositoryDefaults) -> RepositoryRequest:
        """Prompt for name, description and visibility."""
        default_name = defaults.name or self.directory.resolve().name
        name = ask_required(
            lambda: self.prompter.text("Enter a name for the repository", default=default_name),
            "Please enter a name for the repository",
        )
        description = self.prompter.text(
            "Optionally enter a description of the repository",
            default=defaults.description,
        ).strip()
        visibility = self.prompter.choice("Public or private", VISIBILITIES, default="public")
        if visibility not in VISIBILITIES:
            raise ValueError(f"unknown visibility: {visibility!r}")
        return RepositoryRequest(
            name=name,
            description=description or None,
            private=(visibility == "private"),
        )

    def create(self, request: RepositoryRequest) -> ProvisionedRepository:
        """Create *request* on GitHub and return where to push."""
        kwargs = {"private": request.private}
        if request.description:
            kwargs["description"] = request.description

        click.echo("Creating repository...")
        log.info("Creating new repo '%s' on GitHub", request.name)
        try:
            user = self.client_factory(self.token).get_user()
            repo = user.create_repo(request.name, **kwargs)
        except GithubException as exc:
            data = exc.data if isinstance(exc.data, dict) else {}
            raise RepoCreationError(exc.status, data.get("message") or str(exc)) from exc
        except requests.RequestException as exc:
            raise RepoCreationError(None, str(exc)) from exc

        log.info("Created %s", repo.ssh_url)
        return ProvisionedRepository(push_endpoint=repo.ssh_url)

    def provision(self, defaults: Optional[RepositoryDefaults] = None) -> ProvisionedRepository:
        return self.create(self.ask(defaults or RepositoryDefaults()))


__all__ = ["RepositoryProvisioner", "VISIBILITIES"]
