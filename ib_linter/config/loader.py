"""Loads .iblinter.yml into a LintConfig.

A configuration that cannot be decoded is fatal: every failure here is
raised as ConfigDecodeError before any rule is constructed.
"""

from pathlib import Path

import yaml
from pydantic import ValidationError

from ..errors import ConfigDecodeError
from ..linter_logging import get_logger
from .models import CONFIG_FILENAME, LintConfig

logger = get_logger()


def parse_config(text: str, source: str | None = None) -> LintConfig:
    """Decode configuration YAML text.

    Args:
        text: YAML document.
        source: Where the text came from, for error messages.

    Returns:
        Decoded LintConfig. An empty document yields the defaults.

    Raises:
        ConfigDecodeError: If the YAML or its values are invalid.
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise ConfigDecodeError(f"Invalid YAML: {e}", path=source) from e

    if data is None:
        return LintConfig.default()

    if not isinstance(data, dict):
        raise ConfigDecodeError(
            f"Expected a mapping at the top level, got {type(data).__name__}",
            path=source,
        )

    try:
        return LintConfig(**{str(key): value for key, value in data.items()})
    except ValidationError as e:
        raise ConfigDecodeError(f"Invalid configuration: {e}", path=source) from e


def load_config(path: Path) -> LintConfig:
    """Load configuration from a file.

    Raises:
        ConfigDecodeError: If the file cannot be read or decoded.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigDecodeError(f"Cannot read configuration: {e}", path=str(path)) from e

    config = parse_config(text, source=str(path))
    logger.debug(f"Loaded configuration from {path}")
    return config


def load_config_from_directory(
    directory: Path, file_name: str = CONFIG_FILENAME
) -> LintConfig:
    """Load ``file_name`` from ``directory``."""
    return load_config(directory / file_name)


def resolve_config(directory: Path, explicit_path: Path | None = None) -> LintConfig:
    """Pick the configuration for a run.

    An explicit path must exist and decode. Without one, the project's
    .iblinter.yml is used when present, otherwise the built-in default.

    Args:
        directory: Project working directory.
        explicit_path: Path passed on the command line, if any.

    Returns:
        The LintConfig for this run.
    """
    if explicit_path is not None:
        return load_config(explicit_path)

    candidate = directory / CONFIG_FILENAME
    if candidate.exists():
        return load_config(candidate)

    logger.debug(f"No {CONFIG_FILENAME} in {directory}, using defaults")
    return LintConfig.default()
