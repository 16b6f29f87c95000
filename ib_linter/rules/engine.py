"""
Rule engine coordinator for linting interface builder documents.

The RuleEngine instantiates every enabled rule once, then runs each rule
against each document. Per document the violations of rules are
concatenated in registry order; documents keep their input order even
when validated on a thread pool.
"""

import logging
import time
from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from pathlib import Path

from ..config.models import LintConfig
from ..documents import InterfaceBuilderDocument
from ..linter_logging import get_logger
from .base import BaseRule, Context, RuleDiagnostic, Severity, Violation
from .registry import ALL_RULES, DEFAULT_RULES


@dataclass
class RuleError:
    """A rule raised while validating a document."""

    rule_id: str
    path_string: str
    error_message: str
    exception_type: str | None = None

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "rule_id": self.rule_id,
            "path": self.path_string,
            "error_message": self.error_message,
            "exception_type": self.exception_type,
        }


@dataclass
class DocumentResult:
    """Violations and errors for one document."""

    path_string: str
    violations: list[Violation] = field(default_factory=list)
    errors: list[RuleError] = field(default_factory=list)


@dataclass
class LintResult:
    """Result of a lint run."""

    violations: list[Violation] = field(default_factory=list)
    diagnostics: list[RuleDiagnostic] = field(default_factory=list)
    errors: list[RuleError] = field(default_factory=list)
    documents_checked: int = 0
    execution_time_ms: float = 0.0

    @property
    def error_count(self) -> int:
        """Number of error-level violations."""
        return sum(1 for v in self.violations if v.level == Severity.ERROR)

    @property
    def warning_count(self) -> int:
        """Number of warning-level violations."""
        return sum(1 for v in self.violations if v.level == Severity.WARNING)

    @property
    def has_errors(self) -> bool:
        """Whether any error-level violation was found."""
        return self.error_count > 0

    def get_violations_for(self, path_string: str) -> list[Violation]:
        """Violations reported for one document."""
        return [v for v in self.violations if v.path_string == path_string]

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "violations": [v.to_dict() for v in self.violations],
            "diagnostics": [d.to_dict() for d in self.diagnostics],
            "errors": [e.to_dict() for e in self.errors],
            "documents_checked": self.documents_checked,
            "execution_time_ms": self.execution_time_ms,
            "summary": {
                "total_violations": len(self.violations),
                "errors": self.error_count,
                "warnings": self.warning_count,
            },
        }


class RuleEngine:
    """Engine for running rules over decoded documents.

    Example usage:
        engine = RuleEngine(config, work_directory=Path.cwd())
        engine.load_rules()
        result = engine.lint(documents)

        if result.has_errors:
            sys.exit(2)
    """

    def __init__(
        self,
        config: LintConfig,
        work_directory: Path,
        logger: logging.Logger | None = None,
        parallel: bool = False,
        max_workers: int = 4,
    ):
        """Initialize the rule engine.

        Args:
            config: Decoded configuration for the run.
            work_directory: Project directory rule paths are relative to.
            logger: Logger receiving rule diagnostics.
            parallel: Validate documents on a thread pool.
            max_workers: Thread pool size when parallel.
        """
        self.config = config
        self.work_directory = work_directory
        self.logger = logger or get_logger()
        self.parallel = parallel
        self.max_workers = max_workers
        self._rules: dict[str, BaseRule] = {}

    def load_rules(self) -> int:
        """Instantiate every enabled rule.

        Returns:
            Number of rules loaded.
        """
        all_rule_ids = list(ALL_RULES)
        for rule_id in self.config.unknown_rule_ids(all_rule_ids):
            self.logger.warning(f"Unknown rule identifier in configuration: {rule_id}")

        context = Context(config=self.config, work_directory=self.work_directory)
        for rule_id in self.config.enabled_rule_ids(DEFAULT_RULES, all_rule_ids):
            self.register(ALL_RULES[rule_id](context, logger=self.logger))

        self.logger.debug(f"Loaded {len(self._rules)} rules")
        return len(self._rules)

    def register(self, rule: BaseRule) -> None:
        """Register a constructed rule.

        Raises:
            ValueError: If a rule with the same identifier is registered.
        """
        if rule.identifier in self._rules:
            raise ValueError(f"Rule {rule.identifier} is already registered")
        self._rules[rule.identifier] = rule
        self.logger.debug(f"Registered rule: {rule.identifier}")

    def get_rule(self, rule_id: str) -> BaseRule | None:
        """Get a registered rule by identifier."""
        return self._rules.get(rule_id)

    def get_all_rules(self) -> list[BaseRule]:
        """All registered rules in registration order."""
        return list(self._rules.values())

    @property
    def diagnostics(self) -> list[RuleDiagnostic]:
        """Setup diagnostics of every registered rule."""
        return [d for rule in self._rules.values() for d in rule.diagnostics]

    def lint_document(self, document: InterfaceBuilderDocument) -> list[Violation]:
        """Violations of all rules for one document."""
        return self._validate_document(document).violations

    def lint(self, documents: Sequence[InterfaceBuilderDocument]) -> LintResult:
        """Run every registered rule over ``documents``.

        Args:
            documents: Decoded documents, in reporting order.

        Returns:
            LintResult with violations in document order.
        """
        start_time = time.time()

        if self.parallel and len(documents) > 1:
            workers = min(self.max_workers, len(documents))
            with ThreadPoolExecutor(max_workers=workers) as executor:
                # map() yields in submission order
                results = list(executor.map(self._validate_document, documents))
        else:
            results = [self._validate_document(document) for document in documents]

        violations: list[Violation] = []
        errors: list[RuleError] = []
        for result in results:
            violations.extend(result.violations)
            errors.extend(result.errors)

        return LintResult(
            violations=violations,
            diagnostics=self.diagnostics,
            errors=errors,
            documents_checked=len(documents),
            execution_time_ms=(time.time() - start_time) * 1000,
        )

    def _validate_document(self, document: InterfaceBuilderDocument) -> DocumentResult:
        result = DocumentResult(path_string=document.path_string)
        for rule in self._rules.values():
            try:
                result.violations.extend(rule.validate(document))
            except Exception as e:
                error = RuleError(
                    rule_id=rule.identifier,
                    path_string=document.path_string,
                    error_message=str(e),
                    exception_type=type(e).__name__,
                )
                result.errors.append(error)
                self.logger.warning(
                    f"Rule {rule.identifier} failed on {document.path_string}: {e}"
                )
        return result


def create_rule_engine(
    config: LintConfig,
    work_directory: Path,
    logger: logging.Logger | None = None,
    parallel: bool = False,
) -> RuleEngine:
    """Create an engine with every enabled rule loaded."""
    engine = RuleEngine(config, work_directory, logger=logger, parallel=parallel)
    engine.load_rules()
    return engine
