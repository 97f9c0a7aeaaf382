"""Scan engine — walk, classify and report each drive root in turn.

Roots are processed strictly one after another; every entry of a root is
classified and reported before the next root is opened.
"""

from __future__ import annotations

import logging
import time
from pathlib import Path
from typing import Optional, TextIO, Union

from fsaudit.classification.classifier import Classifier
from fsaudit.config.schema import PlatformPaths
from fsaudit.output.report import report
from fsaudit.scanner.blacklist import final_component_blacklist
from fsaudit.scanner.models import ScanSummary, WalkError
from fsaudit.scanner.policies import ErrorHandler, IgnoreErrors
from fsaudit.scanner.walker import VisitPredicate, walk

logger = logging.getLogger(__name__)


def scan_root(
    root: Union[str, Path],
    platform: PlatformPaths,
    *,
    classifier: Optional[Classifier] = None,
    stream: Optional[TextIO] = None,
    on_error: Optional[ErrorHandler] = None,
    visit: Optional[VisitPredicate] = None,
) -> ScanSummary:
    """Scan a single root and write its report lines to *stream*."""
    start = time.perf_counter()
    classifier = classifier or Classifier()
    handler = on_error if on_error is not None else IgnoreErrors()
    predicate = visit if visit is not None else final_component_blacklist(platform)
    summary = ScanSummary(roots=[str(root)])

    def count_skip(error: WalkError) -> None:
        summary.skipped += 1
        handler(error)

    logger.debug("Scanning %s", root)
    for entry in walk(root, visit=predicate, on_error=count_skip):
        summary.visited += 1
        classification = classifier.classify(entry)
        if report(entry.path, classification, stream):
            summary.reported += 1

    summary.duration_ms = round((time.perf_counter() - start) * 1000, 2)
    logger.debug(
        "Finished %s: %d visited, %d reported, %d skipped",
        root, summary.visited, summary.reported, summary.skipped,
    )
    return summary


def scan_drives(
    platform: PlatformPaths,
    *,
    classifier: Optional[Classifier] = None,
    stream: Optional[TextIO] = None,
    on_error: Optional[ErrorHandler] = None,
    visit: Optional[VisitPredicate] = None,
) -> ScanSummary:
    """Scan every drive root of *platform* sequentially."""
    classifier = classifier or Classifier()
    total = ScanSummary()
    for root in platform.drive_roots():
        total.merge(
            scan_root(
                root,
                platform,
                classifier=classifier,
                stream=stream,
                on_error=on_error,
                visit=visit,
            )
        )
    return total
