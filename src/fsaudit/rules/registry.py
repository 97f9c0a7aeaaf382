"""Rule registry — indexes built-in rules by directory name, file name and extension."""

from __future__ import annotations

from functools import lru_cache
from typing import Dict, List, Optional

from fsaudit.rules.models import ClassificationRule


class RuleConflictError(Exception):
    """Raised when two rules claim the same name or extension."""


class RuleRegistry:
    """Central store for all classification rules."""

    def __init__(self) -> None:
        self._rules: Dict[str, ClassificationRule] = {}
        self._directory_names: Dict[str, ClassificationRule] = {}
        self._file_names: Dict[str, ClassificationRule] = {}
        self._extensions: Dict[str, ClassificationRule] = {}

    # ---- registration ----

    def register(self, rule: ClassificationRule) -> None:
        if rule.id in self._rules:
            raise RuleConflictError(f"Duplicate rule id: {rule.id}")
        if rule.is_directory_rule:
            if rule.extensions:
                raise RuleConflictError(f"{rule.id}: directory rules match names only")
            self._index(rule, rule.file_names, self._directory_names, "directory name")
        else:
            self._index(rule, rule.file_names, self._file_names, "file name")
            self._index(rule, rule.extensions, self._extensions, "extension")
        self._rules[rule.id] = rule

    def register_many(self, rules: List[ClassificationRule]) -> None:
        for r in rules:
            self.register(r)

    @staticmethod
    def _index(
        rule: ClassificationRule,
        keys: List[str],
        index: Dict[str, ClassificationRule],
        what: str,
    ) -> None:
        for key in keys:
            existing = index.get(key)
            if existing is not None:
                raise RuleConflictError(
                    f"{what} {key!r} claimed by both {existing.id} and {rule.id}"
                )
        for key in keys:
            index[key] = rule

    # ---- queries ----

    @property
    def all_rules(self) -> List[ClassificationRule]:
        return list(self._rules.values())

    def get(self, rule_id: str) -> Optional[ClassificationRule]:
        return self._rules.get(rule_id)

    @property
    def extensions(self) -> List[str]:
        return sorted(self._extensions)

    def match_directory(self, name: str) -> Optional[ClassificationRule]:
        """Return the directory rule for final component *name*, if any."""
        return self._directory_names.get(name.lower())

    def match_file(self, name: str, extension: Optional[str]) -> Optional[ClassificationRule]:
        """Return the file rule for *name*; the whole name wins over the extension."""
        rule = self._file_names.get(name.lower())
        if rule is not None:
            return rule
        if not extension:
            return None
        return self._extensions.get(extension.lower())


def build_registry() -> RuleRegistry:
    """Create a registry populated with every built-in rule."""
    from fsaudit.rules.builtin import ALL_BUILTIN_RULES

    registry = RuleRegistry()
    registry.register_many(ALL_BUILTIN_RULES)
    return registry


@lru_cache(maxsize=None)
def default_registry() -> RuleRegistry:
    """Process-wide registry of built-in rules, built on first use."""
    return build_registry()
