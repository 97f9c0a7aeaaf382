"""Error policies for per-entry traversal failures."""

from __future__ import annotations

import logging
from typing import Callable, List

from fsaudit.scanner.models import WalkError

logger = logging.getLogger(__name__)

ErrorHandler = Callable[[WalkError], None]


class IgnoreErrors:
    """Discard skipped entries after logging them at DEBUG."""

    def __init__(self) -> None:
        self.count = 0

    def __call__(self, error: WalkError) -> None:
        self.count += 1
        logger.debug("Skipped %s (%s)", error.path, error.reason)


class CollectErrors:
    """Keep skipped entries for later inspection."""

    def __init__(self) -> None:
        self.errors: List[WalkError] = []

    def __call__(self, error: WalkError) -> None:
        logger.debug("Skipped %s (%s)", error.path, error.reason)
        self.errors.append(error)

    @property
    def count(self) -> int:
        return len(self.errors)

    @property
    def paths(self) -> List[str]:
        return [str(e.path) for e in self.errors]
