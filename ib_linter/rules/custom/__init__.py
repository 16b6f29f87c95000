"""Project-specific rules driven by auxiliary reference files."""

from .color_theme import (
    STYLE_POLICIES,
    ColorThemeRule,
    ComponentStylePolicy,
    StyleMatch,
    ThemeTables,
    load_theme,
)
from .localization import LocalizationRule, load_strings

__all__ = [
    "STYLE_POLICIES",
    "ColorThemeRule",
    "ComponentStylePolicy",
    "LocalizationRule",
    "StyleMatch",
    "ThemeTables",
    "load_strings",
    "load_theme",
]
