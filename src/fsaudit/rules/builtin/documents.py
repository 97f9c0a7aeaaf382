"""Document rules — plain text, PDF and word-processor formats."""

from fsaudit.classification.models import DocumentKind, document
from fsaudit.rules.models import ClassificationRule

PLAIN_TEXT = ClassificationRule(
    id="PLAIN_TEXT",
    name="Plain Text",
    description="Plain text and log files.",
    classification=document(DocumentKind.TEXT),
    extensions=["txt", "log"],
)

PDF_DOCUMENT = ClassificationRule(
    id="PDF_DOCUMENT",
    name="PDF Document",
    description="Portable Document Format files.",
    classification=document(DocumentKind.PDF),
    extensions=["pdf"],
)

WORD_DOCUMENT = ClassificationRule(
    id="WORD_DOCUMENT",
    name="Word Document",
    description="Rich text, OpenDocument, XPS, Works and Word documents and templates.",
    classification=document(DocumentKind.WORD),
    extensions=["rtf", "odt", "xps", "wps", "dotx", "dotm", "docx", "docm", "doc"],
)

ALL_DOCUMENT_RULES = [PLAIN_TEXT, PDF_DOCUMENT, WORD_DOCUMENT]
