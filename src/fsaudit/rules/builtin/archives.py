"""Archive rules."""

from fsaudit.classification.models import ArchiveKind, archive
from fsaudit.rules.models import ClassificationRule

ZIP_ARCHIVE = ClassificationRule(
    id="ZIP_ARCHIVE",
    name="Zip Archive",
    description="Zip archives.",
    classification=archive(ArchiveKind.ZIP),
    extensions=["zip"],
)

RAR_ARCHIVE = ClassificationRule(
    id="RAR_ARCHIVE",
    name="RAR Archive",
    description="RAR archives.",
    classification=archive(ArchiveKind.RAR),
    extensions=["rar"],
)

ALL_ARCHIVE_RULES = [ZIP_ARCHIVE, RAR_ARCHIVE]
