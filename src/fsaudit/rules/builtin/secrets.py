"""Secret rules — dotenv files."""

from fsaudit.classification.models import SecretKind, secret
from fsaudit.rules.models import ClassificationRule

DOTENV_FILE = ClassificationRule(
    id="DOTENV_FILE",
    name=".env File",
    description="Environment files holding variables that are usually secrets.",
    classification=secret(SecretKind.ENV),
    file_names=[".env"],
    extensions=["env"],
)

ALL_SECRET_RULES = [DOTENV_FILE]
