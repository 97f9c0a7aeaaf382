"""Classification models and the delimiter sniffer.

The classifier lives in ``fsaudit.classification.classifier``; it depends on
the rule tables, which in turn depend on these models.
"""

from fsaudit.classification.delimiter import read_sample, sniff, sniff_file
from fsaudit.classification.models import (
    UNDETERMINED_DELIMITER,
    ArchiveKind,
    Classification,
    ConfigurationKind,
    DatabaseKind,
    DirectoryClassification,
    DocumentKind,
    FileCategory,
    FileClassification,
    SecretKind,
    SpreadsheetKind,
    VersionControlSystem,
)

__all__ = [
    "UNDETERMINED_DELIMITER",
    "ArchiveKind",
    "Classification",
    "ConfigurationKind",
    "DatabaseKind",
    "DirectoryClassification",
    "DocumentKind",
    "FileCategory",
    "FileClassification",
    "SecretKind",
    "SpreadsheetKind",
    "VersionControlSystem",
    "read_sample",
    "sniff",
    "sniff_file",
]
