"""Current-user identity lookup."""

from __future__ import annotations

import getpass
from typing import Callable

IdentityProvider = Callable[[], str]


class IdentityError(Exception):
    """Raised when the current OS user cannot be determined."""


def system_user() -> str:
    """Return the login name of the current OS user."""
    try:
        name = getpass.getuser()
    except (OSError, KeyError, ImportError) as exc:
        raise IdentityError(f"Failed to get user name: {exc}") from exc
    return name


def current_user(provider: IdentityProvider = system_user) -> str:
    """Ask *provider* for the current user, normalising failures to IdentityError."""
    try:
        name = provider()
    except IdentityError:
        raise
    except Exception as exc:
        raise IdentityError(f"Failed to get user name: {exc}") from exc
    if not name:
        raise IdentityError("Failed to get user name: empty name")
    return name
