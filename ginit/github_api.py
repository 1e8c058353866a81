# ginit/github_api.py
"""
Thin adapters around the two ways ginit talks to GitHub:

  * ``POST /authorizations`` with basic auth (via :mod:`requests`) to
    exchange a username/password for an access token
  * everything else through an authenticated PyGithub client
"""

from __future__ import annotations

import logging
from typing import List, Optional

import requests
from github import Github
from github.Auth import Token

from .config import API_TIMEOUT, API_URL, OTP_HEADER
from .errors import AuthApiError
from .models import AccessToken, Credentials

log = logging.getLogger(__name__)


def _error_message(resp: requests.Response) -> str:
    """Pull GitHub's ``message`` field out of an error response."""
    try:
        body = resp.json()
    except ValueError:
        body = None
    if isinstance(body, dict) and body.get("message"):
        return str(body["message"])
    return resp.reason or f"HTTP {resp.status_code}"


class BasicAuthSession:
    """A session carrying basic-auth credentials.

    Building one does not touch the network; the credentials are only
    checked when :meth:`create_authorization` is called.
    """

    def __init__(
        self,
        credentials: Credentials,
        api_url: str = API_URL,
        timeout: float = API_TIMEOUT,
        session: Optional[requests.Session] = None,
    ):
        self.api_url = api_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.auth = (credentials.username, credentials.password)
        self.session.headers.update({"Accept": "application/vnd.github+json"})

    def create_authorization(
        self,
        scopes: List[str],
        note: str,
        otp: Optional[str] = None,
    ) -> Optional[AccessToken]:
        """Ask GitHub for a new access token.

        Returns ``None`` if GitHub answered successfully without a token.
        Raises :class:`AuthApiError` on any HTTP or transport error.
        """
        headers = {OTP_HEADER: otp} if otp else {}
        log.info("Requesting access token from %s", self.api_url)
        try:
            resp = self.session.post(
                f"{self.api_url}/authorizations",
                json={"scopes": scopes, "note": note},
                headers=headers,
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            raise AuthApiError(None, str(exc)) from exc

        if resp.status_code >= 400:
            raise AuthApiError(resp.status_code, _error_message(resp))

        try:
            data = resp.json()
        except ValueError:
            data = {}
        token = data.get("token") if isinstance(data, dict) else None
        return AccessToken(token) if token else None


def basic_auth(credentials: Credentials) -> BasicAuthSession:
    return BasicAuthSession(credentials)


def github_client(token: AccessToken) -> Github:
    """PyGithub client authenticated with *token*."""
    return Github(auth=Token(token.value), base_url=API_URL, timeout=API_TIMEOUT)


__all__ = ["BasicAuthSession", "basic_auth", "github_client"]
