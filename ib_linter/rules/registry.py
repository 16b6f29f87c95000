"""Known rules, keyed by identifier in registration order."""

from .base import BaseRule
from .custom import ColorThemeRule, LocalizationRule

ALL_RULES: dict[str, type[BaseRule]] = {
    rule_class.identifier: rule_class
    for rule_class in (ColorThemeRule, LocalizationRule)
}

# Both custom rules need project reference files, so they are opt-in
# through enabled_rules.
DEFAULT_RULES: list[str] = []


def get_rule_class(rule_id: str) -> type[BaseRule] | None:
    """Rule class for an identifier, or None if unknown."""
    return ALL_RULES.get(rule_id)


def rule_ids() -> list[str]:
    """Every known identifier."""
    return list(ALL_RULES)
