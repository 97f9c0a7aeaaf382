"""Scanner — walker, blacklist predicates, error policies.

The engine lives in ``fsaudit.scanner.engine``; it pulls in the classifier,
which itself depends on ``fsaudit.scanner.models``.
"""

from fsaudit.scanner.blacklist import ancestor_blacklist, final_component_blacklist
from fsaudit.scanner.models import Entry, ScanSummary, WalkError
from fsaudit.scanner.policies import CollectErrors, IgnoreErrors
from fsaudit.scanner.walker import walk

__all__ = [
    "CollectErrors",
    "Entry",
    "IgnoreErrors",
    "ScanSummary",
    "WalkError",
    "ancestor_blacklist",
    "final_component_blacklist",
    "walk",
]
