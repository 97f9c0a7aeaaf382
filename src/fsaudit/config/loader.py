"""Build PlatformPaths from the current user and operating system."""

from __future__ import annotations

import logging
import os
import sys
from functools import lru_cache
from typing import Optional

from fsaudit.config.identity import IdentityProvider, current_user, system_user
from fsaudit.config.schema import OsName, PlatformPaths

logger = logging.getLogger(__name__)


def detect_os() -> OsName:
    if os.name == "nt":
        return "nt"
    if sys.platform == "darwin":
        return "darwin"
    return "posix"


def build_platform(user: str, os_name: OsName) -> PlatformPaths:
    """Return the well-known paths for *user* on *os_name*."""
    if os_name == "nt":
        home = f"C:\\users\\{user}"
        app_data = f"{home}\\appdata"
        return PlatformPaths(
            separator="\\",
            system_root="C:\\Windows",
            user_home=home,
            app_data=app_data,
            temp_dir=f"{app_data}\\local\\temp",
            os_name=os_name,
        )
    if os_name == "darwin":
        home = f"/Users/{user}"
        app_data = f"{home}/Library/Application Support"
    else:
        home = f"/home/{user}"
        app_data = f"{home}/.local/share"
    return PlatformPaths(
        separator="/",
        system_root="/usr",
        user_home=home,
        app_data=app_data,
        temp_dir="/tmp",
        os_name=os_name,
    )


def load_platform(
    provider: IdentityProvider = system_user,
    os_name: Optional[OsName] = None,
) -> PlatformPaths:
    """Resolve the user via *provider* and build PlatformPaths. Raises IdentityError."""
    user = current_user(provider)
    platform = build_platform(user, os_name or detect_os())
    logger.debug("Resolved platform paths for %s: %s", user, platform)
    return platform


@lru_cache(maxsize=None)
def resolve_platform() -> PlatformPaths:
    """Process-wide PlatformPaths, resolved on first call and reused afterwards."""
    return load_platform()
