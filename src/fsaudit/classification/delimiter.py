"""Field-delimiter sniffing for CSV-like files.

Counts each candidate character in a bounded sample of the file's text and
picks the most frequent one. The "undetermined" sentinel is seeded with a
count of 1, so it wins whenever none of the real candidates occur. Ties go to
the earlier candidate (comma before tab before colon, and so on).
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Tuple, Union

from fsaudit.classification.models import UNDETERMINED_DELIMITER

logger = logging.getLogger(__name__)

SAMPLE_LIMIT = 50_000

# (candidate, seed count) in priority order.
CANDIDATES: Tuple[Tuple[str, int], ...] = (
    (UNDETERMINED_DELIMITER, 1),
    (",", 0),
    ("\t", 0),
    (":", 0),
    (";", 0),
    ("|", 0),
    (" ", 0),
)


def count_candidates(content: str, limit: int = SAMPLE_LIMIT) -> List[Tuple[str, int]]:
    """Return (candidate, count) pairs for the first *limit* code points."""
    sample = content[:limit]
    return [(char, seed + sample.count(char)) for char, seed in CANDIDATES]


def sniff(content: str, limit: int = SAMPLE_LIMIT) -> str:
    """Guess the field delimiter of *content*.

    Returns the winning character, or ``UNDETERMINED_DELIMITER``.
    """
    counts = count_candidates(content, limit)
    # max() keeps the first of equal maxima, which is the priority order.
    winner, _ = max(counts, key=lambda pair: pair[1])
    return winner


def read_sample(path: Union[str, Path], limit: int = SAMPLE_LIMIT) -> str:
    """Read up to *limit* code points of UTF-8 text from *path*.

    Unreadable or undecodable files yield an empty string.
    """
    try:
        with open(path, encoding="utf-8", newline="") as f:
            return f.read(limit)
    except (OSError, UnicodeDecodeError) as exc:
        logger.debug("Treating %s as empty: %s", path, exc)
        return ""


def sniff_file(path: Union[str, Path], limit: int = SAMPLE_LIMIT) -> str:
    """Sniff the delimiter of the file at *path*."""
    return sniff(read_sample(path, limit), limit)
