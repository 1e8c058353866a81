# ginit/models.py
"""Value objects handed from one stage of the workflow to the next."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True)
class Credentials:
    """Username/password pair collected for a single token exchange.

    Never persisted; the password is kept out of ``repr``.
    """

    username: str
    password: str = field(repr=False)
    two_factor_code: Optional[str] = None


@dataclass(frozen=True)
class AccessToken:
    value: str = field(repr=False)

    def __post_init__(self):
        if not self.value:
            raise ValueError("access token must not be empty")

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class RepositoryDefaults:
    """Prompt defaults taken from the positional command line arguments."""

    name: Optional[str] = None
    description: Optional[str] = None


@dataclass(frozen=True)
class RepositoryRequest:
    name: str
    description: Optional[str] = None
    private: bool = False


@dataclass(frozen=True)
class ProvisionedRepository:
    push_endpoint: str
