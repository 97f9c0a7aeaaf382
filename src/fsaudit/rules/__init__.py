"""Rule engine — models, registry, built-in rules."""

from fsaudit.rules.models import ClassificationRule
from fsaudit.rules.registry import (
    RuleConflictError,
    RuleRegistry,
    build_registry,
    default_registry,
)

__all__ = [
    "ClassificationRule",
    "RuleConflictError",
    "RuleRegistry",
    "build_registry",
    "default_registry",
]
