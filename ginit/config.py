# ginit/config.py
"""
Application‑wide constants.
"""
from __future__ import annotations

import os
from pathlib import Path

# --------------------------------------------------------------------------- #
#  General settings
# --------------------------------------------------------------------------- #
APP_NAME = "ginit"

# Base URL of the GitHub REST API.  Point it at a GitHub Enterprise host with
# GINIT_API_URL, e.g. ``https://github.example.com/api/v3``.
API_URL = os.getenv("GINIT_API_URL", "https://api.github.com").rstrip("/")
API_TIMEOUT = 5  # seconds, applied to every API request

# --------------------------------------------------------------------------- #
#  Access token
# --------------------------------------------------------------------------- #
TOKEN_NAMESPACE = "github"
TOKEN_SCOPES = ["user", "public_repo", "repo", "repo:status"]
TOKEN_NOTE = "ginit, the command-line tool for initializing Git repos"
OTP_HEADER = "X-GitHub-OTP"

# --------------------------------------------------------------------------- #
#  Local repository
# --------------------------------------------------------------------------- #
VCS_DIR = ".git"
IGNORE_FILE = ".gitignore"
COMMIT_MESSAGE = "Initial commit"
REMOTE_NAME = "origin"

# Suggested when present in the working directory
DEFAULT_IGNORES = [
    "node_modules",
    "bower_components",
    "__pycache__",
    ".venv",
    "venv",
]


def config_dir() -> Path:
    """Directory holding the preferences file."""
    override = os.getenv("GINIT_CONFIG_DIR")
    if override:
        return Path(override).expanduser()
    base = os.getenv("XDG_CONFIG_HOME") or Path.home() / ".config"
    return Path(base) / APP_NAME
