"""Entry classifier — maps a walked entry to its Classification.

Directories are classified by name only. Files are classified by name, then
by extension; CSV-family files additionally have their delimiter sniffed
from content. No other category looks at content.
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Optional

from fsaudit.classification.delimiter import SAMPLE_LIMIT, read_sample, sniff
from fsaudit.classification.models import (
    REGULAR_DIRECTORY,
    REGULAR_FILE,
    Classification,
    DirectoryClassification,
    FileClassification,
)
from fsaudit.rules.registry import RuleRegistry, default_registry
from fsaudit.scanner.models import Entry

ContentReader = Callable[[Path], str]


class Classifier:
    """Classify entries against a rule registry."""

    def __init__(
        self,
        registry: Optional[RuleRegistry] = None,
        read_content: ContentReader = read_sample,
    ) -> None:
        self.registry = registry if registry is not None else default_registry()
        self._read_content = read_content

    def classify(self, entry: Entry) -> Classification:
        if entry.is_dir:
            return self.classify_directory(entry)
        return self.classify_file(entry)

    def classify_directory(self, entry: Entry) -> DirectoryClassification:
        rule = self.registry.match_directory(entry.name)
        if rule is None:
            return REGULAR_DIRECTORY
        assert isinstance(rule.classification, DirectoryClassification)
        return rule.classification

    def classify_file(self, entry: Entry) -> FileClassification:
        if not entry.name:
            return REGULAR_FILE
        rule = self.registry.match_file(entry.name, entry.extension)
        if rule is None:
            return REGULAR_FILE
        assert isinstance(rule.classification, FileClassification)
        if rule.sniff_delimiter:
            content = self._read_content(entry.path)
            return rule.classification.with_delimiter(sniff(content, SAMPLE_LIMIT))
        return rule.classification


def classify(entry: Entry, classifier: Optional[Classifier] = None) -> Classification:
    """Classify *entry* with *classifier*, or with the built-in rules."""
    return (classifier or Classifier()).classify(entry)
