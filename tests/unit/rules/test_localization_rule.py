"""Unit tests for ib_linter.rules.custom.localization."""

from pathlib import Path
from unittest.mock import MagicMock

import pytest

from ib_linter.config import LocalizationConfig
from ib_linter.documents import UserDefinedRuntimeAttribute, View, ViewKind, XibDocument
from ib_linter.errors import AuxiliaryDataError
from ib_linter.rules.base import Severity
from ib_linter.rules.custom.localization import (
    LocalizationRule,
    load_strings,
    read_strings_text,
)


def _label(*attributes: tuple[str, object], subviews=()) -> View:
    return View(
        kind=ViewKind.LABEL,
        user_defined_runtime_attributes=tuple(
            UserDefinedRuntimeAttribute(key_path=key, value=value) for key, value in attributes
        ),
        subviews=tuple(subviews),
    )


def _document(*views: View) -> XibDocument:
    return XibDocument(path=Path("Welcome.xib"), views=views)


@pytest.fixture()
def rule(make_context, strings_file) -> LocalizationRule:
    return LocalizationRule(
        make_context(localization_rule=LocalizationConfig(path=strings_file.name))
    )


class TestLoadStrings:
    """Tests for strings file parsing."""

    def test_keys_are_extracted(self, strings_file: Path):
        """Every assignment line contributes its key."""
        assert load_strings(strings_file) == {"welcome_title", "logout"}

    def test_single_entry(self, tmp_path: Path):
        """A single assignment yields a single key."""
        path = tmp_path / "Localizable.strings"
        path.write_text('"welcome_title" = "Welcome";')

        assert load_strings(path) == {"welcome_title"}

    def test_utf16_with_bom(self, tmp_path: Path):
        """Xcode's UTF-16 strings files are decoded."""
        path = tmp_path / "Localizable.strings"
        path.write_bytes('"logout" = "Log out";\n'.encode("utf-16"))

        assert read_strings_text(path).strip() == '"logout" = "Log out";'
        assert load_strings(path) == {"logout"}

    def test_missing_file_raises(self, tmp_path: Path):
        """A missing strings file is an auxiliary data error."""
        with pytest.raises(AuxiliaryDataError):
            load_strings(tmp_path / "missing.strings")

    def test_invalid_utf8_raises(self, tmp_path: Path):
        """Undecodable content is an auxiliary data error."""
        path = tmp_path / "Localizable.strings"
        path.write_bytes(b'"key" = "\xff\xfe\xfa";')

        with pytest.raises(AuxiliaryDataError):
            load_strings(path)


class TestLocalizationRuleSetup:
    """Tests for rule construction."""

    def test_without_config_is_noop(self, make_context):
        """No localization_rule section means nothing is validated."""
        rule = LocalizationRule(make_context())
        assert rule.validate(_document(_label(("locKeyTitle", "missing_key")))) == []

    def test_missing_strings_file_degrades(self, make_context):
        """An unreadable strings file yields one diagnostic and no violations."""
        logger = MagicMock()
        rule = LocalizationRule(
            make_context(localization_rule=LocalizationConfig(path="missing.strings")),
            logger=logger,
        )

        assert rule.is_degraded
        assert rule.diagnostics[0].rule_id == "localization"
        assert "Cannot read file at path" in rule.diagnostics[0].message
        logger.warning.assert_called_once()
        assert rule.validate(_document(_label(("locKeyTitle", "missing_key")))) == []

    def test_empty_strings_file_is_noop(self, make_context, tmp_path: Path):
        """A strings file without keys disables checking."""
        (tmp_path / "Localizable.strings").write_text("/* nothing yet */\n")
        rule = LocalizationRule(
            make_context(localization_rule=LocalizationConfig(path="Localizable.strings"))
        )

        assert rule.validate(_document(_label(("locKeyTitle", "missing_key")))) == []


class TestLocalizationKeys:
    """Tests for locKey attribute validation."""

    def test_unknown_key(self, rule):
        """Keys missing from the strings file are errors."""
        violations = rule.validate(_document(_label(("locKeyTitle", "missing_key"))))

        assert len(violations) == 1
        assert violations[0].level == Severity.ERROR
        assert violations[0].message == "UILabel unknown localization key: missing_key"

    def test_known_key(self, rule):
        """Declared keys are accepted."""
        assert rule.validate(_document(_label(("locKeyTitle", "welcome_title")))) == []

    def test_empty_key(self, rule):
        """Empty values are invalid."""
        violations = rule.validate(_document(_label(("locKeyTitle", ""))))
        assert violations[0].message == "UILabel invalid localization key"

    def test_missing_value(self, rule):
        """Attributes without a value are invalid."""
        violations = rule.validate(_document(_label(("locKeyPlaceholder", None))))
        assert "invalid localization key" in violations[0].message

    def test_non_loc_key_paths_are_ignored(self, rule):
        """Only key paths starting with locKey are checked."""
        assert rule.validate(_document(_label(("titleKey", "missing_key")))) == []

    def test_first_offense_per_view_only(self, rule):
        """Checking a view stops at its first offending attribute."""
        view = _label(("locKeyTitle", "missing_one"), ("locKeySubtitle", "missing_two"))

        violations = rule.validate(_document(view))

        assert [v.message for v in violations] == [
            "UILabel unknown localization key: missing_one"
        ]

    def test_valid_key_before_offense_is_skipped(self, rule):
        """Valid attributes do not stop the check."""
        view = _label(("locKeyTitle", "logout"), ("locKeySubtitle", "missing_two"))

        violations = rule.validate(_document(view))

        assert violations[0].message.endswith("missing_two")

    def test_report_all_keys(self, make_context, strings_file):
        """The compatibility flag reports every offending attribute."""
        rule = LocalizationRule(
            make_context(
                localization_rule=LocalizationConfig(
                    path=strings_file.name, report_all_keys=True
                )
            )
        )
        view = _label(("locKeyTitle", "missing_one"), ("locKeySubtitle", ""))

        violations = rule.validate(_document(view))

        assert [v.message for v in violations] == [
            "UILabel unknown localization key: missing_one",
            "UILabel invalid localization key",
        ]

    def test_each_view_reports_independently(self, rule):
        """The short-circuit is per view, not per document."""
        tree = _label(
            ("locKeyTitle", "missing_parent"),
            subviews=[_label(("locKeyTitle", "missing_child"))],
        )

        violations = rule.validate(_document(tree))

        assert [v.message.rsplit(": ", 1)[1] for v in violations] == [
            "missing_parent",
            "missing_child",
        ]
