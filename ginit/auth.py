# ginit/auth.py
"""Obtain a GitHub access token.

:class:`AuthenticationWorkflow` walks a small state machine::

    CHECK_CACHE ── hit ──────────────────────────────────────────► AUTHENTICATED
         │
        miss
         ▼
    PROMPT_CREDENTIALS ─► BASIC_AUTHENTICATED ─► TOKEN_ISSUED ─► STORE_TOKEN ─► AUTHENTICATED
                                                      │
                                                    error ─► FAILED

A cached token is trusted without a network round-trip; a revoked token
only shows up when a later API call is rejected.  A failed exchange is
final: the error propagates and the user is not asked again.
"""

from __future__ import annotations

import enum
import logging
from typing import Callable, List, Optional

import click

from .config import TOKEN_NAMESPACE, TOKEN_NOTE, TOKEN_SCOPES
from .errors import AuthApiError
from .github_api import BasicAuthSession, basic_auth
from .models import AccessToken, Credentials
from .prefs import CredentialStore
from .prompts import Prompter, ask_required

log = logging.getLogger(__name__)


class AuthState(enum.Enum):
    CHECK_CACHE = "check_cache"
    PROMPT_CREDENTIALS = "prompt_credentials"
    BASIC_AUTHENTICATED = "basic_authenticated"
    TOKEN_ISSUED = "token_issued"
    STORE_TOKEN = "store_token"
    AUTHENTICATED = "authenticated"
    FAILED = "failed"


def ask_credentials(prompter: Prompter) -> Credentials:
    """Collect credentials; username and password are re-asked until given."""
    username = ask_required(
        lambda: prompter.text("Enter your GitHub username or e-mail address"),
        "Please enter your username or e-mail address",
    )
    password = ask_required(
        lambda: prompter.password("Enter your password"),
        "Please enter your password",
        strip=False,
    )
    code = prompter.text("Enter your 2FA authentication code").strip()
    return Credentials(username, password, code or None)


class AuthenticationWorkflow:
    """Reuse the stored token or exchange credentials for a new one.

    Parameters
    ----------
    store:
        Where tokens are cached between runs.
    prompter:
        Source of the user's answers.
    authenticate:
        Builds a basic-auth session from :class:`Credentials`.
    scopes, note:
        Sent with the token request.
    """

    def __init__(
        self,
        store: CredentialStore,
        prompter: Prompter,
        authenticate: Callable[[Credentials], BasicAuthSession] = basic_auth,
        scopes: Optional[List[str]] = None,
        note: str = TOKEN_NOTE,
        namespace: str = TOKEN_NAMESPACE,
    ):
        self.store = store
        self.prompter = prompter
        self.authenticate = authenticate
        self.scopes = list(scopes or TOKEN_SCOPES)
        self.note = note
        self.namespace = namespace
        self.state = AuthState.CHECK_CACHE
        self.history: List[AuthState] = []

    def _enter(self, state: AuthState) -> None:
        log.debug("auth: %s -> %s", self.state.value, state.value)
        self.history.append(state)
        self.state = state

    def run(self) -> AccessToken:
        """Return a usable token or raise :class:`AuthApiError`."""
        self.history = [AuthState.CHECK_CACHE]
        self.state = AuthState.CHECK_CACHE

        cached = self.store.get_token(self.namespace)
        if cached is not None:
            log.info("Using stored access token")
            self._enter(AuthState.AUTHENTICATED)
            return cached

        self._enter(AuthState.PROMPT_CREDENTIALS)
        credentials = ask_credentials(self.prompter)

        click.echo("Authenticating you, please wait...")
        try:
            token = self._exchange(credentials)
        except AuthApiError:
            self._enter(AuthState.FAILED)
            raise

        self._enter(AuthState.STORE_TOKEN)
        self.store.set_token(self.namespace, token)
        self._enter(AuthState.AUTHENTICATED)
        return token

    def _exchange(self, credentials: Credentials) -> AccessToken:
        session = self.authenticate(credentials)
        self._enter(AuthState.BASIC_AUTHENTICATED)

        token = session.create_authorization(
            self.scopes,
            self.note,
            otp=credentials.two_factor_code,
        )
        if token is None:
            raise AuthApiError(None, "GitHub did not return an access token")
        self._enter(AuthState.TOKEN_ISSUED)
        return token


__all__ = ["AuthState", "AuthenticationWorkflow", "ask_credentials"]
