"""Locate interface builder documents under a project directory."""

import fnmatch
from collections.abc import Iterable
from pathlib import Path

from .linter_logging import get_logger

DOCUMENT_SUFFIXES = (".xib", ".storyboard")

logger = get_logger()


def _candidates(root: Path, included: Iterable[str]) -> set[Path]:
    files: set[Path] = set()
    patterns = list(included) or ["."]

    for pattern in patterns:
        base = root / pattern
        if base.is_dir():
            for suffix in DOCUMENT_SUFFIXES:
                files.update(base.rglob(f"*{suffix}"))
        elif base.is_file():
            files.add(base)
        elif not Path(pattern).is_absolute():
            files.update(root.glob(pattern))
        else:
            logger.warning(f"Included path does not exist: {pattern}")

    return {path for path in files if path.is_file() and path.suffix in DOCUMENT_SUFFIXES}


def is_excluded(relative_path: Path, excluded: Iterable[str]) -> bool:
    """Whether ``relative_path`` matches an excluded glob or directory."""
    relative_str = relative_path.as_posix()

    for pattern in excluded:
        pattern = pattern.rstrip("/")
        if not pattern:
            continue
        # Directory entries exclude everything beneath them
        if relative_str == pattern or relative_str.startswith(f"{pattern}/"):
            return True
        if fnmatch.fnmatch(relative_str, pattern) or any(
            fnmatch.fnmatch(part, pattern) for part in relative_path.parts
        ):
            return True

    return False


def discover_documents(
    root: Path,
    included: Iterable[str] = (),
    excluded: Iterable[str] = (),
) -> list[Path]:
    """Find ``.xib`` and ``.storyboard`` files to lint.

    Args:
        root: Project directory; patterns are relative to it.
        included: Directories or globs to search. Searches all of ``root``
            when empty.
        excluded: Globs or directories to skip.

    Returns:
        Sorted, de-duplicated document paths.
    """
    root = root.resolve()
    excluded = list(excluded)

    documents = []
    for path in _candidates(root, included):
        path = path.resolve()
        try:
            relative_path = path.relative_to(root)
        except ValueError:
            relative_path = path
        if is_excluded(relative_path, excluded):
            logger.debug(f"Excluded document: {relative_path}")
            continue
        documents.append(path)

    documents = sorted(set(documents))
    logger.debug(f"Discovered {len(documents)} documents under {root}")
    return documents
