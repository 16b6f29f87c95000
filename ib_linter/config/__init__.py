"""Configuration for the interface builder linter."""

from .loader import (
    load_config,
    load_config_from_directory,
    parse_config,
    resolve_config,
)
from .models import (
    CONFIG_FILENAME,
    ColorThemeConfig,
    CustomModuleConfig,
    LintConfig,
    LocalizationConfig,
    UseBaseClassConfig,
    UseTraitCollectionsConfig,
    ViewAsDeviceConfig,
)

__all__ = [
    "CONFIG_FILENAME",
    "ColorThemeConfig",
    "CustomModuleConfig",
    "LintConfig",
    "LocalizationConfig",
    "UseBaseClassConfig",
    "UseTraitCollectionsConfig",
    "ViewAsDeviceConfig",
    "load_config",
    "load_config_from_directory",
    "parse_config",
    "resolve_config",
]
