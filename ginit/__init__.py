"""ginit: create a GitHub repository for the current folder and push it.

Only the workflow classes are meant to be imported by other packages.
"""

from .auth import AuthenticationWorkflow
from .checks import check
from .ignore import IgnoreFileGenerator
from .local import LocalRepoInitializer
from .prefs import CredentialStore
from .repos import RepositoryProvisioner

__version__ = "0.1.0"

__all__ = [
    "AuthenticationWorkflow",
    "CredentialStore",
    "IgnoreFileGenerator",
    "LocalRepoInitializer",
    "RepositoryProvisioner",
    "check",
]
