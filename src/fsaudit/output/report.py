"""Line reporter — one ``<path> # <label>`` line per interesting entry."""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Optional, TextIO, Union

from fsaudit.classification.models import (
    UNDETERMINED_DELIMITER,
    Classification,
    DirectoryClassification,
    DocumentKind,
)
from fsaudit.output.labels import label


def is_suppressed(classification: Classification) -> bool:
    """True for regular entries, plain text and CSV with no clear delimiter."""
    if isinstance(classification, DirectoryClassification):
        return classification.is_regular
    if classification.is_regular:
        return True
    if classification.kind is DocumentKind.TEXT:
        return True
    return classification.is_csv and classification.delimiter == UNDETERMINED_DELIMITER


def display_path(path: Union[str, Path]) -> str:
    """Render *path* for output, replacing bytes the filesystem encoding cannot decode."""
    return os.fsencode(path).decode(sys.getfilesystemencoding(), "replace")


def format_line(path: Union[str, Path], classification: Classification) -> str:
    return f"{display_path(path)} # {label(classification)}"


def report(
    path: Union[str, Path],
    classification: Classification,
    stream: Optional[TextIO] = None,
) -> bool:
    """Write the report line for *path* unless suppressed. Returns True if written."""
    if is_suppressed(classification):
        return False
    print(format_line(path, classification), file=stream or sys.stdout)
    return True
