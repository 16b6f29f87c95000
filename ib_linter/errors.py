"""Error types raised by the linter.

Only configuration decode failures are allowed to abort a lint run.
Auxiliary data errors are absorbed by the rule that owns the data, and
document decode errors skip the offending file.
"""

from __future__ import annotations

from enum import Enum


class ErrorCategory(Enum):
    """Categories of linter errors."""

    CONFIGURATION = "configuration"  # Malformed .iblinter.yml
    AUXILIARY_DATA = "auxiliary_data"  # Theme or strings file
    DOCUMENT = "document"  # Undecodable xib/storyboard


class LinterError(Exception):
    """Base class for linter errors.

    Attributes:
        category: Error category for grouping.
        message: Human-readable error message.
        path: File the error refers to, if any.
        suggestion: Optional recovery hint printed by the CLI.
        exit_code: Exit code to use when this error causes termination.
    """

    category: ErrorCategory
    suggestion: str | None = None
    exit_code: int = 1

    def __init__(self, message: str, path: str | None = None):
        super().__init__(message)
        self.message = message
        self.path = path

    def format(self, use_color: bool = True) -> str:
        """Format the error for display on stderr."""
        red = "\033[91m" if use_color else ""
        cyan = "\033[96m" if use_color else ""
        reset = "\033[0m" if use_color else ""

        text = f"{red}Error:{reset} {self.message}"
        if self.suggestion:
            text += f"\n{cyan}Suggestion:{reset} {self.suggestion}"
        return text


class ConfigDecodeError(LinterError):
    """The configuration file could not be read or decoded."""

    category = ErrorCategory.CONFIGURATION
    suggestion = "Check the YAML syntax and key types of your .iblinter.yml"


class AuxiliaryDataError(LinterError):
    """A rule's reference file (theme, strings) is missing or malformed."""

    category = ErrorCategory.AUXILIARY_DATA

    def __init__(self, path: str, reason: str):
        super().__init__(f"Cannot read file at path {path}: {reason}", path=path)
        self.reason = reason


class DocumentDecodeError(LinterError):
    """An interface builder document could not be decoded."""

    category = ErrorCategory.DOCUMENT

    def __init__(self, path: str, reason: str):
        super().__init__(f"Cannot decode {path}: {reason}", path=path)
        self.reason = reason
