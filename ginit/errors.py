# ginit/errors.py
"""Exception hierarchy.

Every error the workflow raises derives from :class:`GinitError` so the
command line entry point can report it and halt.  Errors coming back from
GitHub keep the HTTP status and the message as separate attributes.
"""

from __future__ import annotations

from typing import Optional


class GinitError(Exception):
    """Base class for all ginit failures."""


class AlreadyInitializedError(GinitError):
    """The working directory is already under version control."""

    def __init__(self, path):
        super().__init__(f"{path} is already a git repository")
        self.path = path


class CredentialValidationError(GinitError):
    """A required credential field was left empty."""


class ApiError(GinitError):
    """An error reported by (or while talking to) the GitHub API.

    Attributes
    ----------
    status:
        HTTP status code, or ``None`` when no response was received or the
        cause is unknown.
    message:
        Human readable message, usually GitHub's own ``message`` field.
    """

    def __init__(self, status: Optional[int], message: str):
        super().__init__(f"{status}: {message}" if status else message)
        self.status = status
        self.message = message


class AuthApiError(ApiError):
    """Exchanging credentials for an access token failed."""

    def describe(self) -> str:
        if self.status == 401:
            return "Couldn't log you in. Please try again."
        if self.status == 422:
            return "You already have an access token."
        return "Authentication failed."


class RepoCreationError(ApiError):
    """GitHub refused to create the repository."""


class VcsError(GinitError):
    """A step of the local init/commit/push sequence failed."""

    def __init__(self, step: str, message: str):
        super().__init__(f"git {step} failed: {message}")
        self.step = step
        self.message = message
