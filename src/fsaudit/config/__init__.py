"""Platform configuration — identity lookup, well-known paths."""

from fsaudit.config.identity import IdentityError, current_user, system_user
from fsaudit.config.loader import build_platform, load_platform, resolve_platform
from fsaudit.config.schema import PlatformPaths

__all__ = [
    "IdentityError",
    "PlatformPaths",
    "build_platform",
    "current_user",
    "load_platform",
    "resolve_platform",
    "system_user",
]
