"""Report output — labels, line reporter, terminal summary."""

from fsaudit.output.labels import LABELS, label
from fsaudit.output.report import format_line, is_suppressed, report

__all__ = ["LABELS", "format_line", "is_suppressed", "label", "report"]
