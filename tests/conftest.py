"""Shared pytest fixtures for entrycheck tests."""

from __future__ import annotations

import collections.abc as cabc
import json
import typing as typ
from pathlib import Path

import pytest

from entrycheck.expectations import expected_string
from entrycheck.models import Entrypoint, Package

EntrypointFactory = cabc.Callable[..., Entrypoint]
ManifestWriter = cabc.Callable[..., Path]


@pytest.fixture
def package() -> Package:
    """Return a package rooted at a fixed, non-existent directory."""
    return Package(name="my-pkg", directory="/repo/my-pkg")


@pytest.fixture
def make_entrypoint(package: Package) -> EntrypointFactory:
    """Build entrypoints that pass every check unless overridden."""

    def factory(**overrides: typ.Any) -> Entrypoint:
        owner = overrides.pop("package", package)
        values: dict[str, typ.Any] = {
            "package": owner,
            "name": owner.name,
            "directory": owner.directory,
            "config_source": "src/index",
            "main": expected_string("main", owner.name),
            "resolved_source": f"{owner.directory}/src/index.js",
        }
        values.update(overrides)
        entrypoint = Entrypoint(**values)
        if entrypoint not in owner.entrypoints:
            owner.entrypoints.append(entrypoint)
        return entrypoint

    return factory


@pytest.fixture
def write_manifest() -> ManifestWriter:
    """Write a `package.json` (and optionally a source file) into a directory."""

    def writer(
        directory: Path,
        manifest: dict[str, typ.Any],
        *,
        source: str | None = "src/index.js",
    ) -> Path:
        directory.mkdir(parents=True, exist_ok=True)
        (directory / "package.json").write_text(
            json.dumps(manifest, indent=2), encoding="utf-8"
        )
        if source is not None:
            source_path = directory / source
            source_path.parent.mkdir(parents=True, exist_ok=True)
            source_path.write_text("export default 1;\n", encoding="utf-8")
        return directory

    return writer
