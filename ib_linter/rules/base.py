"""
Base classes and types for the interface builder rule engine.

Every rule is constructed once per run from a Context, performs all
auxiliary loading in its constructor, and exposes one validation entry
point per document kind.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, ClassVar

from ..config.models import LintConfig
from ..documents import InterfaceBuilderDocument, StoryboardDocument, View, XibDocument
from ..errors import AuxiliaryDataError
from ..linter_logging import get_logger
from .walker import validate_document


class Severity(Enum):
    """Severity levels for violations."""

    WARNING = "warning"
    ERROR = "error"


@dataclass(frozen=True)
class Violation:
    """One reported defect in a document."""

    path_string: str
    message: str
    level: Severity

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "path": self.path_string,
            "message": self.message,
            "level": self.level.value,
        }


@dataclass(frozen=True)
class Context:
    """Shared construction input for rules."""

    config: LintConfig
    work_directory: Path


@dataclass(frozen=True)
class RuleDiagnostic:
    """A rule could not load its auxiliary data and runs as a no-op."""

    rule_id: str
    message: str
    path: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {"rule_id": self.rule_id, "message": self.message, "path": self.path}


class BaseRule(ABC):
    """Abstract base class for all rules.

    Subclasses set ``identifier`` and ``description`` and implement the two
    validation entry points. Validation must not raise and must not have
    side effects beyond returning violations.
    """

    identifier: ClassVar[str]
    description: ClassVar[str]

    def __init__(self, context: Context, logger: logging.Logger | None = None):
        self.context = context
        self.logger = logger or get_logger()
        self.diagnostics: list[RuleDiagnostic] = []

    @abstractmethod
    def validate_xib(self, document: XibDocument) -> list[Violation]:
        """Validate a decoded .xib document."""

    @abstractmethod
    def validate_storyboard(self, document: StoryboardDocument) -> list[Violation]:
        """Validate a decoded .storyboard document."""

    def validate(self, document: InterfaceBuilderDocument) -> list[Violation]:
        """Dispatch to the entry point for the document kind."""
        if isinstance(document, XibDocument):
            return self.validate_xib(document)
        return self.validate_storyboard(document)

    @property
    def is_degraded(self) -> bool:
        """Whether setup failed and the rule validates nothing."""
        return bool(self.diagnostics)

    def _degrade(self, error: AuxiliaryDataError) -> None:
        """Record a setup failure once; the caller keeps empty tables."""
        diagnostic = RuleDiagnostic(
            rule_id=self.identifier, message=error.message, path=error.path
        )
        self.diagnostics.append(diagnostic)
        self.logger.warning(
            f"Rule {self.identifier} disabled: {error.message}",
            extra={"rule_id": self.identifier, "file_path": error.path},
        )

    def __repr__(self) -> str:
        """String representation of the rule."""
        return f"<{self.__class__.__name__} {self.identifier}>"


class ViewTreeRule(BaseRule):
    """Rule that inspects every view of a document in pre-order.

    Subclasses implement ``validate_view`` for a single node; traversal
    and concatenation are shared.
    """

    def validate_xib(self, document: XibDocument) -> list[Violation]:
        return validate_document(document, lambda view: self.validate_view(view, document))

    def validate_storyboard(self, document: StoryboardDocument) -> list[Violation]:
        return validate_document(document, lambda view: self.validate_view(view, document))

    @abstractmethod
    def validate_view(
        self, view: View, document: InterfaceBuilderDocument
    ) -> list[Violation]:
        """Violations of one node, excluding its subviews."""

    def _violation(
        self, document: InterfaceBuilderDocument, message: str, level: Severity
    ) -> Violation:
        return Violation(path_string=document.path_string, message=message, level=level)
