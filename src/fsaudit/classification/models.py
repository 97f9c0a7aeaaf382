"""Classification data models — one enum per kind, two top-level variants."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

# Delimiter returned when no candidate character clearly dominates.
UNDETERMINED_DELIMITER = "\0"


class VersionControlSystem(str, Enum):
    GIT = "git"
    SVN = "svn"


class FileCategory(str, Enum):
    REGULAR = "regular"
    SECRET = "secret"
    SPREADSHEET = "spreadsheet"
    DOCUMENT = "document"
    CONFIGURATION = "configuration"
    DATABASE = "database"
    ARCHIVE = "archive"


class SecretKind(str, Enum):
    ENV = "env"


class SpreadsheetKind(str, Enum):
    EXCEL = "excel"
    CSV = "csv"


class DocumentKind(str, Enum):
    PDF = "pdf"
    TEXT = "text"
    WORD = "word"


class ConfigurationKind(str, Enum):
    YAML = "yaml"
    JSON = "json"
    INI = "ini"


class DatabaseKind(str, Enum):
    SQLITE = "sqlite"
    SQL = "sql"
    DB = "db"
    PDB = "pdb"


class ArchiveKind(str, Enum):
    ZIP = "zip"
    RAR = "rar"


FileKind = Union[
    SecretKind,
    SpreadsheetKind,
    DocumentKind,
    ConfigurationKind,
    DatabaseKind,
    ArchiveKind,
]

# Which kind enum belongs to which category.
CATEGORY_KINDS: dict[FileCategory, type[Enum]] = {
    FileCategory.SECRET: SecretKind,
    FileCategory.SPREADSHEET: SpreadsheetKind,
    FileCategory.DOCUMENT: DocumentKind,
    FileCategory.CONFIGURATION: ConfigurationKind,
    FileCategory.DATABASE: DatabaseKind,
    FileCategory.ARCHIVE: ArchiveKind,
}


@dataclass(frozen=True)
class DirectoryClassification:
    """A directory is either regular or a version-control metadata directory."""

    vcs: Optional[VersionControlSystem] = None

    @property
    def is_regular(self) -> bool:
        return self.vcs is None


@dataclass(frozen=True)
class FileClassification:
    """A file's category and kind.

    ``kind`` is None only for ``FileCategory.REGULAR``. ``delimiter`` is set
    only for CSV spreadsheets and holds either the sniffed character or
    ``UNDETERMINED_DELIMITER``.
    """

    category: FileCategory = FileCategory.REGULAR
    kind: Optional[FileKind] = None
    delimiter: Optional[str] = None

    def __post_init__(self) -> None:
        if self.category is FileCategory.REGULAR:
            if self.kind is not None:
                raise ValueError("regular files carry no kind")
        elif not isinstance(self.kind, CATEGORY_KINDS[self.category]):
            raise ValueError(f"{self.kind!r} is not a {self.category.value} kind")
        if self.delimiter is not None and self.kind is not SpreadsheetKind.CSV:
            raise ValueError("only CSV spreadsheets carry a delimiter")

    @property
    def is_regular(self) -> bool:
        return self.category is FileCategory.REGULAR

    @property
    def is_csv(self) -> bool:
        return self.kind is SpreadsheetKind.CSV

    def with_delimiter(self, delimiter: str) -> "FileClassification":
        """Return a copy of this CSV classification carrying *delimiter*."""
        return FileClassification(self.category, self.kind, delimiter)


Classification = Union[DirectoryClassification, FileClassification]

REGULAR_DIRECTORY = DirectoryClassification()
REGULAR_FILE = FileClassification()


def secret(kind: SecretKind) -> FileClassification:
    return FileClassification(FileCategory.SECRET, kind)


def spreadsheet(kind: SpreadsheetKind) -> FileClassification:
    return FileClassification(FileCategory.SPREADSHEET, kind)


def document(kind: DocumentKind) -> FileClassification:
    return FileClassification(FileCategory.DOCUMENT, kind)


def configuration(kind: ConfigurationKind) -> FileClassification:
    return FileClassification(FileCategory.CONFIGURATION, kind)


def database(kind: DatabaseKind) -> FileClassification:
    return FileClassification(FileCategory.DATABASE, kind)


def archive(kind: ArchiveKind) -> FileClassification:
    return FileClassification(FileCategory.ARCHIVE, kind)


def csv_file(delimiter: str) -> FileClassification:
    return FileClassification(FileCategory.SPREADSHEET, SpreadsheetKind.CSV, delimiter)
