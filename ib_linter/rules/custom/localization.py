"""Localization key rule.

Checks that every ``locKey*`` runtime attribute names a key declared in
the project's strings file.
"""

import codecs
import logging
from pathlib import Path

from ...documents import InterfaceBuilderDocument, View
from ...errors import AuxiliaryDataError
from ...utils.strings import matches
from ..base import Context, Severity, Violation, ViewTreeRule

LOC_KEY_PREFIX = "locKey"

# Group 1 runs greedily to the last quote before "=". A key containing
# '=' or extra quotes on the same line is captured incorrectly; kept as is
# so existing strings files produce the same key set.
STRINGS_KEY_PATTERN = r'"(.*)".*=.*'


def read_strings_text(path: Path) -> str:
    """Read a strings file as UTF-8, or UTF-16 when it carries a BOM.

    Raises:
        AuxiliaryDataError: If the file is missing or cannot be decoded.
    """
    try:
        data = path.read_bytes()
    except OSError as e:
        raise AuxiliaryDataError(str(path), str(e)) from e

    encoding = "utf-8"
    if data.startswith((codecs.BOM_UTF16_LE, codecs.BOM_UTF16_BE)):
        encoding = "utf-16"

    try:
        return data.decode(encoding)
    except UnicodeDecodeError as e:
        raise AuxiliaryDataError(str(path), str(e)) from e


def load_strings(path: Path) -> frozenset[str]:
    """Keys declared in the strings file at ``path``."""
    return frozenset(matches(read_strings_text(path), STRINGS_KEY_PATTERN))


class LocalizationRule(ViewTreeRule):
    """Flags localization keys missing from the strings file."""

    identifier = "localization"
    description = (
        "Display error when localization string attribute does not correspond "
        "to an existing string of Localizable.strings file"
    )

    def __init__(self, context: Context, logger: logging.Logger | None = None):
        super().__init__(context, logger)
        self.strings: frozenset[str] = frozenset()
        self.report_all_keys = False

        config = context.config.localization_rule
        if config is None:
            return

        self.report_all_keys = config.report_all_keys
        try:
            self.strings = load_strings(context.work_directory / config.path)
        except AuxiliaryDataError as e:
            self._degrade(e)

    def validate_view(
        self, view: View, document: InterfaceBuilderDocument
    ) -> list[Violation]:
        if not self.strings:
            return []

        violations: list[Violation] = []
        for attribute in view.user_defined_runtime_attributes:
            if not attribute.key_path.startswith(LOC_KEY_PREFIX):
                continue

            value = attribute.value
            if not isinstance(value, str) or value == "":
                message = f"{view.display_name} invalid localization key"
            elif value not in self.strings:
                message = f"{view.display_name} unknown localization key: {value}"
            else:
                continue

            violations.append(self._violation(document, message, Severity.ERROR))
            # Without report_all_keys only the first offending key is reported
            if not self.report_all_keys:
                break

        return violations
