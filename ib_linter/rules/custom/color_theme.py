"""Theme consistency rule.

Cross-checks color, parent theme and style attributes of every view
against a YAML theme file, and optionally flags hard-coded colors.
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any

import yaml

from ...documents import InterfaceBuilderDocument, View
from ...errors import AuxiliaryDataError
from ...utils.strings import snake_to_camel_case
from ..base import Context, Severity, Violation, ViewTreeRule

COLOR_NAME_SUFFIX = "ColorName"
THEME_PARENT_KEY_PATH = "themeParent"
THEME_STYLE_KEY_PATH = "themeStyle"


@dataclass(frozen=True)
class ThemeTables:
    """Lookup sets built from a theme file, keys in camelCase."""

    application_colors: frozenset[str] = frozenset()
    groups: frozenset[str] = frozenset()
    controllers: frozenset[str] = frozenset()
    component_styles: Mapping[str, frozenset[str]] = field(default_factory=dict)

    @property
    def parents(self) -> frozenset[str]:
        """Names a ``themeParent`` attribute may reference."""
        return self.groups | self.controllers

    @classmethod
    def from_data(cls, data: Mapping[str, Any]) -> "ThemeTables":
        """Build tables from a parsed theme mapping.

        Missing or non-mapping sections are empty. ``components`` is only
        used when every component maps style names to values.
        """
        components = data.get("components")
        component_styles: dict[str, frozenset[str]] = {}
        if isinstance(components, Mapping) and all(
            isinstance(styles, Mapping) for styles in components.values()
        ):
            component_styles = {
                snake_to_camel_case(str(name)): _normalized_keys(styles)
                for name, styles in components.items()
            }

        return cls(
            application_colors=_normalized_keys(data.get("application_theme")),
            groups=_normalized_keys(data.get("groups")),
            controllers=_normalized_keys(data.get("controllers")),
            component_styles=component_styles,
        )


def _normalized_keys(section: Any) -> frozenset[str]:
    if not isinstance(section, Mapping):
        return frozenset()
    return frozenset(snake_to_camel_case(str(key)) for key in section)


def load_theme(path: Path) -> ThemeTables:
    """Read and parse a theme file.

    Raises:
        AuxiliaryDataError: If the file is missing, unreadable, not YAML,
            or not a mapping at the top level.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise AuxiliaryDataError(str(path), str(e)) from e

    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise AuxiliaryDataError(str(path), f"invalid YAML: {e}") from e

    if not isinstance(data, Mapping):
        raise AuxiliaryDataError(str(path), "theme file is not a mapping")

    return ThemeTables.from_data(data)


class StyleMatch(Enum):
    """How a ``themeStyle`` value is matched against a component's styles."""

    EXACT = "exact"
    # A style whose lowercased name contains the value as written
    LOWERCASED_CONTAINS = "lowercased_contains"


@dataclass(frozen=True)
class ComponentStylePolicy:
    """Which theme component a custom class is styled from, and how."""

    component: str
    match: StyleMatch

    def accepts(self, value: str, styles: frozenset[str]) -> bool:
        if self.match is StyleMatch.EXACT:
            return value in styles
        return any(value in style.lower() for style in styles)


STYLE_POLICIES: dict[str, ComponentStylePolicy] = {
    "CustomLabel": ComponentStylePolicy("label", StyleMatch.EXACT),
    "LargeButton": ComponentStylePolicy("largeButton", StyleMatch.LOWERCASED_CONTAINS),
}


class ColorThemeRule(ViewTreeRule):
    """Flags color and theme attributes that do not exist in the theme file."""

    identifier = "color_theme"
    description = (
        "Display error when color attribute does not correspond to a Theme file color"
    )

    def __init__(
        self,
        context: Context,
        logger: logging.Logger | None = None,
        style_policies: Mapping[str, ComponentStylePolicy] | None = None,
    ):
        super().__init__(context, logger)
        self.style_policies = dict(
            STYLE_POLICIES if style_policies is None else style_policies
        )
        self.enforce_component_theming = False
        self.tables = ThemeTables()

        config = context.config.color_theme_rule
        if config is None:
            return

        self.enforce_component_theming = config.enforce
        try:
            self.tables = load_theme(context.work_directory / config.path)
        except AuxiliaryDataError as e:
            self._degrade(e)

    def validate_view(
        self, view: View, document: InterfaceBuilderDocument
    ) -> list[Violation]:
        if not self.tables.component_styles:
            return []

        name = view.display_name
        violations: list[Violation] = []

        if self.enforce_component_theming:
            for prop in view.hard_coded_colors():
                violations.append(
                    self._violation(
                        document, f"{name} {prop} is hard-coded", Severity.WARNING
                    )
                )

        for attribute in view.user_defined_runtime_attributes:
            key_path = attribute.key_path
            value = attribute.value
            valid = isinstance(value, str) and value != ""

            if key_path.endswith(COLOR_NAME_SUFFIX):
                if not valid:
                    message = f"{name} invalid color key"
                elif "." in value:
                    message = f"{name} legacy color format: {value}"
                elif value not in self.tables.application_colors:
                    message = f"{name} unknown color: {value}"
                else:
                    continue
            elif key_path == THEME_PARENT_KEY_PATH:
                if not valid:
                    message = f"{name} invalid parent theme"
                elif value not in self.tables.parents:
                    message = f"{name} unknown parent theme: {value}"
                else:
                    continue
            elif key_path == THEME_STYLE_KEY_PATH:
                if not valid:
                    message = f"{name} invalid parent theme"
                else:
                    message = self._check_style(view, value)
                    if message is None:
                        continue
            else:
                continue

            violations.append(self._violation(document, message, Severity.ERROR))

        return violations

    def _check_style(self, view: View, value: str) -> str | None:
        """Message for a non-empty ``themeStyle``, or None if it is valid."""
        component = view.custom_class
        if component is None:
            return None

        policy = self.style_policies.get(component)
        if policy is None:
            return f"Theme style check not implemented for class: {component}"

        styles = self.tables.component_styles.get(policy.component, frozenset())
        if policy.accepts(value, styles):
            return None
        return f"{view.display_name} unknown theme style: {value}"
