"""Scanner data models — traversal entries, skipped entries, run summary."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional


@dataclass(frozen=True, slots=True)
class Entry:
    """A filesystem node observed during a walk."""

    path: Path
    is_dir: bool
    depth: int = 0

    @property
    def name(self) -> str:
        """Final path component ("" for a drive or filesystem root)."""
        return self.path.name

    @property
    def extension(self) -> Optional[str]:
        """Final suffix without its dot, or None when there is none."""
        return self.path.suffix[1:] or None


@dataclass(frozen=True)
class WalkError:
    """Record of an entry that was skipped during a walk."""

    path: Path
    reason: str  # e.g. 'permission denied', 'filesystem loop'
    depth: int = 0

    @classmethod
    def from_os_error(cls, path: Path, exc: OSError, depth: int = 0) -> "WalkError":
        reason = exc.strerror or exc.__class__.__name__
        return cls(path=path, reason=reason, depth=depth)


@dataclass
class ScanSummary:
    """Totals for one or more scanned roots."""

    roots: List[str] = field(default_factory=list)
    visited: int = 0
    reported: int = 0
    skipped: int = 0
    duration_ms: float = 0.0

    def merge(self, other: "ScanSummary") -> None:
        self.roots.extend(other.roots)
        self.visited += other.visited
        self.reported += other.reported
        self.skipped += other.skipped
        self.duration_ms = round(self.duration_ms + other.duration_ms, 2)
