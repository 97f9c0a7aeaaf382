"""Canonical labels — the short string printed after each reported path."""

from __future__ import annotations

from enum import Enum
from typing import Dict

from fsaudit.classification.models import (
    ArchiveKind,
    Classification,
    ConfigurationKind,
    DatabaseKind,
    DirectoryClassification,
    DocumentKind,
    SecretKind,
    SpreadsheetKind,
    VersionControlSystem,
)

LABELS: Dict[Enum, str] = {
    VersionControlSystem.GIT: "git",
    VersionControlSystem.SVN: "svn",
    SecretKind.ENV: "dotenv",
    SpreadsheetKind.EXCEL: "excel",
    SpreadsheetKind.CSV: "csv('{delimiter}')",
    DocumentKind.PDF: "pdf",
    DocumentKind.TEXT: "txt",
    DocumentKind.WORD: "word",
    ConfigurationKind.YAML: "yaml",
    ConfigurationKind.JSON: "json",
    ConfigurationKind.INI: "ini",
    DatabaseKind.SQLITE: "sqlite",
    DatabaseKind.SQL: "sql",
    DatabaseKind.DB: "db",
    DatabaseKind.PDB: "pdb",
    ArchiveKind.ZIP: "zip",
    ArchiveKind.RAR: "rar",
}


def label(classification: Classification) -> str:
    """Return the canonical label, or "" for regular files and directories."""
    if isinstance(classification, DirectoryClassification):
        kind = classification.vcs
    else:
        kind = classification.kind
    if kind is None:
        return ""
    return LABELS[kind].format(delimiter=getattr(classification, "delimiter", None))
