"""Output reporters for lint results.

Reporters write violations of a finished run to a stream:

- ``xcode``: one ``<path>:1:1: <level>: <message>`` line per violation, the
  format Xcode turns into inline build issues.
- ``json``: a JSON list of violation dicts.
- ``console``: violations grouped per file with a summary line.
"""

import json
import sys
from itertools import groupby
from typing import Any, TextIO

from .errors import ConfigDecodeError
from .rules.base import Severity, Violation
from .rules.engine import LintResult


class XcodeReporter:
    """Xcode build-log reporter."""

    name = "xcode"

    def __init__(self, stream: TextIO | None = None):
        self.stream = stream if stream is not None else sys.stdout

    @staticmethod
    def format_violation(violation: Violation) -> str:
        """Format a violation as an Xcode diagnostic line."""
        return f"{violation.path_string}:1:1: {violation.level.value}: {violation.message}"

    def report(self, result: LintResult) -> None:
        for violation in result.violations:
            print(self.format_violation(violation), file=self.stream)


class JSONReporter:
    """JSON reporter for machine consumption.

    Output format:
    [
        {"path": str, "message": str, "level": "warning" | "error"},
        ...
    ]
    """

    name = "json"

    def __init__(self, stream: TextIO | None = None):
        """Initialize the JSON reporter.

        Args:
            stream: Output stream (default: stdout).
        """
        self.stream = stream if stream is not None else sys.stdout

    def report(self, result: LintResult) -> list[dict[str, Any]]:
        """Output violations as JSON.

        Args:
            result: Lint result to report.

        Returns:
            The output list (also written to stream).
        """
        output = [violation.to_dict() for violation in result.violations]
        print(json.dumps(output, indent=2), file=self.stream)
        return output


class ConsoleReporter:
    """Human-readable reporter with color-coded output.

    Example output:
        Main.storyboard
          error   CustomLabel invalid color key
          warning UIView (Header) has hard-coded backgroundColor

        2 violation(s) in 1 file(s) (1 error, 1 warning) in 12ms
    """

    COLORS = {
        Severity.ERROR: "\033[0;31m",  # Red
        Severity.WARNING: "\033[1;33m",  # Yellow
    }
    RESET = "\033[0m"
    BOLD = "\033[1m"

    name = "console"

    def __init__(self, stream: TextIO | None = None, use_color: bool | None = None):
        """Initialize the console reporter.

        Args:
            stream: Output stream (default: stdout).
            use_color: Whether to use ANSI colors. Auto-detects if None.
        """
        self.stream = stream if stream is not None else sys.stdout
        if use_color is None:
            self.use_color = hasattr(self.stream, "isatty") and self.stream.isatty()
        else:
            self.use_color = use_color

    def report(self, result: LintResult) -> None:
        """Output violations grouped by document.

        Args:
            result: Lint result to report.
        """
        bold = self.BOLD if self.use_color else ""
        reset = self.RESET if self.use_color else ""

        # Violations are already ordered by document
        for path_string, violations in groupby(result.violations, key=lambda v: v.path_string):
            print(f"{bold}{path_string}{reset}", file=self.stream)
            for violation in violations:
                print(f"  {self._format_level(violation.level)} {violation.message}", file=self.stream)

        self._print_summary(result)

    def _format_level(self, level: Severity) -> str:
        label = f"{level.value:<7}"
        if not self.use_color:
            return label
        return f"{self.COLORS.get(level, '')}{label}{self.RESET}"

    def _print_summary(self, result: LintResult) -> None:
        total = len(result.violations)
        time_ms = result.execution_time_ms

        if total == 0:
            summary = (
                f"\nNo violations found in {result.documents_checked} file(s) "
                f"({time_ms:.0f}ms)"
            )
        else:
            files = len({v.path_string for v in result.violations})
            summary = (
                f"\n{total} violation(s) in {files} file(s) "
                f"({result.error_count} error, {result.warning_count} warning) "
                f"in {time_ms:.0f}ms"
            )

        print(summary, file=self.stream)


REPORTERS = {
    reporter.name: reporter for reporter in (XcodeReporter, JSONReporter, ConsoleReporter)
}


def get_reporter(
    name: str, stream: TextIO | None = None
) -> XcodeReporter | JSONReporter | ConsoleReporter:
    """Create the reporter registered under ``name``.

    Raises:
        ConfigDecodeError: If no reporter has that name.
    """
    reporter_class = REPORTERS.get(name)
    if reporter_class is None:
        raise ConfigDecodeError(
            f"Unknown reporter '{name}'. Available: {', '.join(REPORTERS)}"
        )
    return reporter_class(stream=stream)
