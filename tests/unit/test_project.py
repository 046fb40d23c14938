"""Tests for loading projects from package manifests."""

from __future__ import annotations

from pathlib import Path

import pytest

from entrycheck.errors import FatalError, ProjectError
from entrycheck.models import MappedEntries, SingleEntry
from entrycheck.project import Project
from tests.conftest import ManifestWriter


def test_single_package_project(tmp_path: Path, write_manifest: ManifestWriter) -> None:
    """A root manifest without package globs is the only package."""
    write_manifest(
        tmp_path,
        {
            "name": "my-pkg",
            "main": "dist/my-pkg.cjs.js",
            "browser": {"./dist/my-pkg.cjs.js": "./dist/my-pkg.browser.cjs.js"},
            "react-native": "dist/native.js",
            "dependencies": {"react": "^18.0.0"},
            "preconstruct": {"umdName": "MyPkg"},
        },
    )
    project = Project.load(tmp_path)

    assert len(project.packages) == 1
    package = project.packages[0]
    assert package.name == "my-pkg"
    assert package.directory == str(tmp_path.resolve())
    assert package.dependencies == {"react": "^18.0.0"}
    (entrypoint,) = package.entrypoints
    assert entrypoint.name == "my-pkg"
    assert entrypoint.module is None
    assert entrypoint.config_source == "src/index"
    assert entrypoint.config["umdName"] == "MyPkg"
    assert isinstance(entrypoint.browser, MappedEntries)
    assert entrypoint.react_native == SingleEntry("dist/native.js")
    assert entrypoint.source == str(tmp_path.resolve() / "src" / "index.js")


def test_workspace_packages_and_entrypoints(
    tmp_path: Path,
    write_manifest: ManifestWriter,
) -> None:
    """Package globs and extra entrypoints are discovered."""
    write_manifest(
        tmp_path,
        {"name": "root", "private": True, "preconstruct": {"packages": ["packages/*"]}},
        source=None,
    )
    write_manifest(
        tmp_path / "packages" / "b",
        {"name": "@scope/b", "main": "dist/b.cjs.js"},
    )
    write_manifest(
        tmp_path / "packages" / "a",
        {
            "name": "a",
            "main": "dist/a.cjs.js",
            "preconstruct": {"entrypoints": [".", "utils"]},
        },
    )
    write_manifest(
        tmp_path / "packages" / "a" / "utils",
        {"main": "dist/a.cjs.js", "preconstruct": {"source": "../src/utils"}},
        source=None,
    )
    (tmp_path / "packages" / "not-a-package").mkdir()

    project = Project.load(tmp_path)

    assert [package.name for package in project.packages] == ["a", "@scope/b"]
    names = [entrypoint.name for entrypoint in project.packages[0].entrypoints]
    assert names == ["a", "a/utils"]
    assert project.packages[0].entrypoints[1].config_source == "../src/utils"


def test_missing_manifest_is_a_project_error(tmp_path: Path) -> None:
    """A directory without package.json cannot be loaded."""
    with pytest.raises(ProjectError, match="No package.json"):
        Project.load(tmp_path)


def test_invalid_json_is_a_project_error(tmp_path: Path) -> None:
    """Malformed manifests are reported with their path."""
    (tmp_path / "package.json").write_text("{", encoding="utf-8")
    with pytest.raises(ProjectError, match="not valid JSON"):
        Project.load(tmp_path)


def test_missing_name_is_fatal(tmp_path: Path, write_manifest: ManifestWriter) -> None:
    """A package without a name cannot be validated."""
    write_manifest(tmp_path, {"main": "dist/index.js"})
    with pytest.raises(FatalError) as excinfo:
        Project.load(tmp_path)
    assert excinfo.value.code == "missing-name"


def test_non_string_main_is_rejected(
    tmp_path: Path,
    write_manifest: ManifestWriter,
) -> None:
    """String fields holding other JSON types are reported while loading."""
    write_manifest(tmp_path, {"name": "my-pkg", "main": ["dist/my-pkg.cjs.js"]})
    with pytest.raises(ProjectError, match="main field must be a string"):
        Project.load(tmp_path)


def test_browser_of_wrong_type_is_rejected(
    tmp_path: Path,
    write_manifest: ManifestWriter,
) -> None:
    """browser must be a string or an object."""
    write_manifest(tmp_path, {"name": "my-pkg", "browser": 3})
    with pytest.raises(ProjectError, match="browser field must be"):
        Project.load(tmp_path)
