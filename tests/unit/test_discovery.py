"""Unit tests for ib_linter.discovery."""

from pathlib import Path

import pytest

from ib_linter.discovery import discover_documents, is_excluded


@pytest.fixture()
def project(tmp_path: Path) -> Path:
    for relative in [
        "App/Main.storyboard",
        "App/Views/Header.xib",
        "App/Views/Header.swift",
        "Pods/Vendor/Vendor.xib",
        "Tests/Fixtures/Fixture.xib",
        "Widget/Widget.storyboard",
    ]:
        path = tmp_path / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text("<document/>")
    return tmp_path


def _names(paths: list[Path], root: Path) -> list[str]:
    return [path.relative_to(root.resolve()).as_posix() for path in paths]


class TestDiscoverDocuments:
    """Tests for document discovery."""

    def test_finds_all_documents(self, project: Path):
        """Every xib and storyboard is found, sorted."""
        assert _names(discover_documents(project), project) == [
            "App/Main.storyboard",
            "App/Views/Header.xib",
            "Pods/Vendor/Vendor.xib",
            "Tests/Fixtures/Fixture.xib",
            "Widget/Widget.storyboard",
        ]

    def test_included_directories(self, project: Path):
        """Included directories limit the search."""
        found = discover_documents(project, included=["App", "Widget"])

        assert _names(found, project) == [
            "App/Main.storyboard",
            "App/Views/Header.xib",
            "Widget/Widget.storyboard",
        ]

    def test_included_globs(self, project: Path):
        """Included globs are matched relative to the root."""
        found = discover_documents(project, included=["**/*.storyboard"])

        assert _names(found, project) == ["App/Main.storyboard", "Widget/Widget.storyboard"]

    def test_excluded_directories(self, project: Path):
        """Excluded directories are skipped with everything beneath."""
        found = discover_documents(project, excluded=["Pods", "Tests/"])

        assert "Pods/Vendor/Vendor.xib" not in _names(found, project)
        assert "Tests/Fixtures/Fixture.xib" not in _names(found, project)
        assert len(found) == 3

    def test_excluded_globs(self, project: Path):
        """Excluded globs match file names."""
        found = discover_documents(project, excluded=["*.storyboard"])
        assert all(path.suffix == ".xib" for path in found)

    def test_overlapping_includes_are_deduplicated(self, project: Path):
        """A file reached twice is reported once."""
        found = discover_documents(project, included=["App", "App/Views"])
        assert _names(found, project).count("App/Views/Header.xib") == 1

    def test_included_file(self, project: Path):
        """A single included file is linted."""
        found = discover_documents(project, included=["Widget/Widget.storyboard"])
        assert _names(found, project) == ["Widget/Widget.storyboard"]

    def test_empty_project(self, tmp_path: Path):
        """No documents yields an empty list."""
        assert discover_documents(tmp_path) == []


class TestIsExcluded:
    """Tests for exclusion matching."""

    def test_nested_directory_name(self):
        """A pattern matching any path component excludes."""
        assert is_excluded(Path("Modules/Pods/A.xib"), ["Pods"])

    def test_not_excluded(self):
        """Unrelated paths are kept."""
        assert not is_excluded(Path("App/A.xib"), ["Pods", "*.storyboard"])

    def test_empty_pattern_is_ignored(self):
        """Blank entries never exclude everything."""
        assert not is_excluded(Path("App/A.xib"), ["", "/"])
