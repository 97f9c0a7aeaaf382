"""Spreadsheet rules — Excel workbooks and delimited text."""

from fsaudit.classification.models import SpreadsheetKind, spreadsheet
from fsaudit.rules.models import ClassificationRule

EXCEL_WORKBOOK = ClassificationRule(
    id="EXCEL_WORKBOOK",
    name="Excel Workbook",
    description="Legacy binary and modern XML Excel workbooks and templates.",
    classification=spreadsheet(SpreadsheetKind.EXCEL),
    extensions=["xls", "xlsx", "xlsm", "xlsb", "xlt", "xltx", "xltm"],
)

DELIMITED_TEXT = ClassificationRule(
    id="DELIMITED_TEXT",
    name="Delimited Text",
    description="Comma-separated and printer-formatted text; the delimiter is sniffed.",
    classification=spreadsheet(SpreadsheetKind.CSV),
    extensions=["csv", "prn"],
    sniff_delimiter=True,
)

ALL_SPREADSHEET_RULES = [EXCEL_WORKBOOK, DELIMITED_TEXT]
