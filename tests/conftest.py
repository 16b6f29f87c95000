"""
Shared fixtures for the ib-linter test suite.

Provides test fixtures for:
- Theme and strings reference files
- Rule contexts built from a LintConfig
- Sample .xib and .storyboard documents
- Logger state reset between tests
"""

import logging
from collections.abc import Callable, Iterator
from pathlib import Path

import pytest

from ib_linter.config import LintConfig
from ib_linter.linter_logging import LOGGER_NAME
from ib_linter.rules.base import Context

THEME_YAML = """\
application_theme:
  primary_brand: "#E4002B"
  SECONDARY: "#00A3E0"
groups:
  dark:
    background: primary_brand
  light:
    background: secondary
controllers:
  settings_screen:
    title: label.title
components:
  label:
    title:
      color: primary_brand
    body_text:
      color: secondary
  large_button:
    primary_filled:
      color: primary_brand
    secondary_outline:
      color: secondary
"""

STRINGS_TEXT = """\
/* Onboarding */
"welcome_title" = "Welcome";
"logout" = "Log out";
"""

SAMPLE_XIB = """\
<?xml version="1.0" encoding="UTF-8"?>
<document type="com.apple.InterfaceBuilder3.CocoaTouch.XIB" version="3.0" toolsVersion="21701">
    <objects>
        <placeholder placeholderIdentifier="IBFilesOwner" id="-1" userLabel="File's Owner"/>
        <view contentMode="scaleToFill" id="root-1" userLabel="Header">
            <subviews>
                <label customClass="CustomLabel" id="label-1">
                    <color key="textColor" red="1" green="0" blue="0" alpha="1" colorSpace="custom"/>
                    <userDefinedRuntimeAttributes>
                        <userDefinedRuntimeAttribute type="string" keyPath="textColorName" value="primaryBrand"/>
                        <userDefinedRuntimeAttribute type="string" keyPath="locKeyText" value="welcome_title"/>
                    </userDefinedRuntimeAttributes>
                </label>
                <button customClass="LargeButton" id="button-1">
                    <userDefinedRuntimeAttributes>
                        <userDefinedRuntimeAttribute type="string" keyPath="themeStyle" value="primary"/>
                        <userDefinedRuntimeAttribute type="boolean" keyPath="isRounded" value="YES"/>
                        <userDefinedRuntimeAttribute type="number" keyPath="cornerRadius">
                            <integer key="value" value="8"/>
                        </userDefinedRuntimeAttribute>
                    </userDefinedRuntimeAttributes>
                </button>
            </subviews>
            <color key="backgroundColor" systemColor="systemBackgroundColor"/>
        </view>
    </objects>
</document>
"""

SAMPLE_STORYBOARD = """\
<?xml version="1.0" encoding="UTF-8"?>
<document type="com.apple.InterfaceBuilder3.CocoaTouch.Storyboard.XIB" version="3.0" toolsVersion="21701">
    <scenes>
        <scene sceneID="scene-1">
            <objects>
                <viewController id="vc-1" customClass="SettingsViewController" sceneMemberID="viewController">
                    <view key="view" contentMode="scaleToFill" id="vc-1-view">
                        <subviews>
                            <switch id="switch-1">
                                <color key="onTintColor" name="AccentColor"/>
                            </switch>
                        </subviews>
                        <userDefinedRuntimeAttributes>
                            <userDefinedRuntimeAttribute type="string" keyPath="themeParent" value="settingsScreen"/>
                        </userDefinedRuntimeAttributes>
                    </view>
                </viewController>
                <placeholder placeholderIdentifier="IBFirstResponder" id="fr-1" sceneMemberID="firstResponder"/>
            </objects>
        </scene>
        <scene sceneID="scene-2">
            <objects>
                <placeholder placeholderIdentifier="IBFirstResponder" id="fr-2" sceneMemberID="firstResponder"/>
            </objects>
        </scene>
    </scenes>
</document>
"""


@pytest.fixture(autouse=True)
def reset_linter_logger() -> Iterator[None]:
    """Undo handler and propagation changes made by setup_logging."""
    yield
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)


@pytest.fixture()
def theme_file(tmp_path: Path) -> Path:
    """Theme file with colors, groups, controllers and two components."""
    path = tmp_path / "theme.yml"
    path.write_text(THEME_YAML, encoding="utf-8")
    return path


@pytest.fixture()
def strings_file(tmp_path: Path) -> Path:
    """Localizable.strings declaring welcome_title and logout."""
    path = tmp_path / "Localizable.strings"
    path.write_text(STRINGS_TEXT, encoding="utf-8")
    return path


@pytest.fixture()
def make_context(tmp_path: Path) -> Callable[..., Context]:
    """Factory for rule contexts rooted at tmp_path."""

    def _make(**config_values) -> Context:
        return Context(config=LintConfig(**config_values), work_directory=tmp_path)

    return _make


@pytest.fixture()
def sample_project(tmp_path: Path, theme_file: Path, strings_file: Path) -> Path:
    """Project directory with one xib, one storyboard and reference files."""
    views = tmp_path / "App" / "Views"
    views.mkdir(parents=True)
    (views / "Header.xib").write_text(SAMPLE_XIB, encoding="utf-8")
    (tmp_path / "App" / "Main.storyboard").write_text(SAMPLE_STORYBOARD, encoding="utf-8")
    return tmp_path


@pytest.fixture()
def sample_xib() -> bytes:
    """Header.xib content: a view holding a CustomLabel and a LargeButton."""
    return SAMPLE_XIB.encode()


@pytest.fixture()
def sample_storyboard() -> bytes:
    """Main.storyboard content: one controller scene and one empty scene."""
    return SAMPLE_STORYBOARD.encode()
