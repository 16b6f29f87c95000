"""Rule engine and built-in rules."""

from .base import (
    BaseRule,
    Context,
    RuleDiagnostic,
    Severity,
    ViewTreeRule,
    Violation,
)
from .custom import ColorThemeRule, LocalizationRule
from .engine import LintResult, RuleEngine, RuleError, create_rule_engine
from .registry import ALL_RULES, DEFAULT_RULES
from .walker import iter_views, root_views, validate_document, walk

__all__ = [
    "ALL_RULES",
    "DEFAULT_RULES",
    "BaseRule",
    "ColorThemeRule",
    "Context",
    "LintResult",
    "LocalizationRule",
    "RuleDiagnostic",
    "RuleEngine",
    "RuleError",
    "Severity",
    "ViewTreeRule",
    "Violation",
    "create_rule_engine",
    "iter_views",
    "root_views",
    "validate_document",
    "walk",
]
