"""Click-based command line interface for the interface builder linter."""

import sys
from pathlib import Path

import click

from . import __version__
from .config import resolve_config
from .decoder import decode_files
from .discovery import discover_documents
from .errors import LinterError
from .linter_logging import setup_logging
from .reporters import REPORTERS, get_reporter
from .rules import ALL_RULES, DEFAULT_RULES, create_rule_engine

# Exit codes: 0=clean, 1=fatal configuration error, 2=error-level violations
EXIT_OK = 0
EXIT_CONFIG_ERROR = 1
EXIT_VIOLATIONS = 2


@click.group()
@click.version_option(version=__version__, prog_name="ib-linter")
def cli() -> None:
    """Lint Xcode .xib and .storyboard files against project conventions."""


@cli.command()
@click.option(
    "-p",
    "--path",
    "project_path",
    default=".",
    type=click.Path(exists=True, file_okay=False),
    help="Project directory to lint (default: current directory)",
)
@click.option(
    "-c",
    "--config",
    "config_path",
    default=None,
    type=click.Path(dir_okay=False),
    help="Configuration file (default: <path>/.iblinter.yml)",
)
@click.option(
    "-r",
    "--reporter",
    default=None,
    type=click.Choice(sorted(REPORTERS)),
    help="Output format (overrides the configured reporter)",
)
@click.option("--parallel", is_flag=True, help="Validate documents on a thread pool")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.option("--quiet", "-q", is_flag=True, help="Only log errors")
@click.option(
    "--log-format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Log output format",
)
@click.option(
    "--log-file",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Also write debug logs to this file (rotated)",
)
def lint(
    project_path: str,
    config_path: str | None,
    reporter: str | None,
    parallel: bool,
    verbose: bool,
    quiet: bool,
    log_format: str,
    log_file: Path | None,
) -> None:
    """Lint every document under the project directory.

    Examples:
        ib-linter lint
        ib-linter lint -p MyApp --reporter console
        ib-linter lint --config ci/.iblinter.yml --reporter json
    """
    if verbose and quiet:
        click.echo("Error: --quiet and --verbose are mutually exclusive", err=True)
        sys.exit(EXIT_CONFIG_ERROR)

    logger = setup_logging(
        quiet=quiet, verbose=verbose, log_file=log_file, log_format=log_format
    )
    work_directory = Path(project_path).resolve()

    try:
        config = resolve_config(
            work_directory, Path(config_path) if config_path else None
        )
        output = get_reporter(reporter or config.reporter)
    except LinterError as e:
        click.echo(e.format(use_color=sys.stderr.isatty()), err=True)
        sys.exit(e.exit_code)

    engine = create_rule_engine(config, work_directory, logger=logger, parallel=parallel)
    paths = discover_documents(work_directory, config.included, config.excluded)
    documents = decode_files(paths, logger=logger)

    result = engine.lint(documents)
    output.report(result)

    logger.debug(
        f"Checked {result.documents_checked} documents",
        extra={
            "violation_count": len(result.violations),
            "duration_ms": round(result.execution_time_ms, 2),
        },
    )

    sys.exit(EXIT_VIOLATIONS if result.has_errors else EXIT_OK)


@cli.command()
@click.option(
    "-p",
    "--path",
    "project_path",
    default=".",
    type=click.Path(exists=True, file_okay=False),
    help="Project directory whose configuration is used",
)
@click.option(
    "-c",
    "--config",
    "config_path",
    default=None,
    type=click.Path(dir_okay=False),
    help="Configuration file (default: <path>/.iblinter.yml)",
)
def rules(project_path: str, config_path: str | None) -> None:
    """List available rules, marking the enabled ones."""
    try:
        config = resolve_config(
            Path(project_path).resolve(), Path(config_path) if config_path else None
        )
    except LinterError as e:
        click.echo(e.format(use_color=sys.stderr.isatty()), err=True)
        sys.exit(e.exit_code)

    enabled = set(config.enabled_rule_ids(DEFAULT_RULES, list(ALL_RULES)))
    for rule_id, rule_class in ALL_RULES.items():
        if rule_id in enabled:
            marker = click.style("✓", fg="green")
        else:
            marker = click.style("○", fg="cyan")
        click.echo(f"{marker} {click.style(rule_id, bold=True)}")
        click.echo(f"    {rule_class.description}")


def main() -> None:
    """Entry point for the ib-linter console script."""
    cli()


if __name__ == "__main__":
    main()
