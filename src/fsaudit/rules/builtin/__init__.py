"""Built-in rules — aggregate all categories."""

from fsaudit.rules.builtin.archives import ALL_ARCHIVE_RULES
from fsaudit.rules.builtin.configuration import ALL_CONFIGURATION_RULES
from fsaudit.rules.builtin.databases import ALL_DATABASE_RULES
from fsaudit.rules.builtin.documents import ALL_DOCUMENT_RULES
from fsaudit.rules.builtin.secrets import ALL_SECRET_RULES
from fsaudit.rules.builtin.spreadsheets import ALL_SPREADSHEET_RULES
from fsaudit.rules.builtin.vcs import ALL_VCS_RULES
from fsaudit.rules.models import ClassificationRule

ALL_BUILTIN_RULES: list[ClassificationRule] = [
    *ALL_VCS_RULES,
    *ALL_SECRET_RULES,
    *ALL_SPREADSHEET_RULES,
    *ALL_DOCUMENT_RULES,
    *ALL_DATABASE_RULES,
    *ALL_CONFIGURATION_RULES,
    *ALL_ARCHIVE_RULES,
]

__all__ = ["ALL_BUILTIN_RULES"]
