"""Visit predicates that prune blacklisted subtrees (system and temp directories).

``final_component_blacklist`` compares only an entry's final path component
with the blacklist roots. The roots are full paths such as ``C:\\Windows``,
so on a real filesystem this never rejects anything. The scanner uses it
by default. ``ancestor_blacklist`` prunes everything at or below a
blacklist root.
"""

from __future__ import annotations

import ntpath
import posixpath
from typing import Tuple

from fsaudit.config.schema import PlatformPaths
from fsaudit.scanner.models import Entry
from fsaudit.scanner.walker import VisitPredicate


def blacklist_roots(platform: PlatformPaths) -> Tuple[str, ...]:
    return (platform.system_root, platform.temp_dir)


def final_component_blacklist(platform: PlatformPaths) -> VisitPredicate:
    """Reject entries whose final component equals a blacklist root string."""
    roots = blacklist_roots(platform)

    def is_allowed(entry: Entry) -> bool:
        return entry.name not in roots

    return is_allowed


def _normalise(path: str, windows: bool) -> str:
    if windows:
        return ntpath.normcase(ntpath.normpath(path))
    return posixpath.normpath(path)


def ancestor_blacklist(platform: PlatformPaths) -> VisitPredicate:
    """Reject entries located at or below a blacklist root.

    Comparison is component-wise, so ``/tmpfiles`` is not under ``/tmp``.
    Windows paths compare case-insensitively.
    """
    windows = platform.is_windows
    flavour = ntpath if windows else posixpath
    roots = [_normalise(r, windows) for r in blacklist_roots(platform)]

    def is_allowed(entry: Entry) -> bool:
        path = _normalise(str(entry.path), windows)
        for root in roots:
            if path == root:
                return False
            prefix = root if root.endswith(flavour.sep) else root + flavour.sep
            if path.startswith(prefix):
                return False
        return True

    return is_allowed

