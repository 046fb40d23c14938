"""Discovery of packages and entrypoints from `package.json` manifests."""

from __future__ import annotations

import dataclasses
import json
import logging
import os
import typing as typ
from pathlib import Path

from . import messages
from .errors import FatalError, ProjectError
from .models import Entrypoint, Package, field_from_json

_logger = logging.getLogger(__name__)

MANIFEST_FILENAME = "package.json"
CONFIG_KEY = "preconstruct"
DEFAULT_SOURCE = "src/index"
DEFAULT_ENTRYPOINTS = (".",)


@dataclasses.dataclass(frozen=True)
class Project:
    """A project root and the packages discovered beneath it."""

    directory: str
    packages: tuple[Package, ...]

    @classmethod
    def load(cls, directory: str | Path) -> Project:
        """Read the project rooted at ``directory``.

        When the root manifest lists `preconstruct.packages` globs, every
        matching directory holding a manifest is a package; otherwise the
        root itself is the only package.
        """
        root = Path(directory).resolve()
        manifest = _read_manifest(root)
        patterns = _config_of(manifest, root).get("packages")
        if patterns is None:
            return cls(directory=str(root), packages=(_load_package(root, manifest),))
        if not isinstance(patterns, list) or not all(
            isinstance(pattern, str) for pattern in patterns
        ):
            message = f"{root / MANIFEST_FILENAME}: packages must be a list of globs."
            raise ProjectError(message)
        packages = [
            _load_package(path, _read_manifest(path))
            for path in _package_directories(root, patterns)
        ]
        _logger.debug("discovered %d packages under %s", len(packages), root)
        return cls(directory=str(root), packages=tuple(packages))


def _package_directories(root: Path, patterns: list[str]) -> list[Path]:
    seen: dict[Path, None] = {}
    for pattern in patterns:
        for match in sorted(root.glob(pattern)):
            if match.is_dir() and (match / MANIFEST_FILENAME).is_file():
                seen.setdefault(match.resolve(), None)
    return list(seen)


def _read_manifest(directory: Path) -> dict[str, typ.Any]:
    path = directory / MANIFEST_FILENAME
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError as error:
        message = f"No {MANIFEST_FILENAME} found in {directory}."
        raise ProjectError(message) from error
    except json.JSONDecodeError as error:
        message = f"{path} is not valid JSON: {error}"
        raise ProjectError(message) from error
    if not isinstance(data, dict):
        message = f"{path} must contain a JSON object."
        raise ProjectError(message)
    return data


def _config_of(manifest: dict[str, typ.Any], directory: Path) -> dict[str, typ.Any]:
    config = manifest.get(CONFIG_KEY, {})
    if not isinstance(config, dict):
        message = f"{directory / MANIFEST_FILENAME}: {CONFIG_KEY} must be an object."
        raise ProjectError(message)
    return config


def _string_mapping(manifest: dict[str, typ.Any], key: str) -> dict[str, str]:
    raw = manifest.get(key, {})
    if not isinstance(raw, dict):
        return {}
    return {str(name): str(version) for name, version in raw.items()}


def _optional_string(
    manifest: dict[str, typ.Any],
    key: str,
    directory: Path,
) -> str | None:
    value = manifest.get(key)
    if value is None or isinstance(value, str):
        return value
    message = f"{directory / MANIFEST_FILENAME}: {key} field must be a string."
    raise ProjectError(message)


def _load_package(directory: Path, manifest: dict[str, typ.Any]) -> Package:
    name = manifest.get("name")
    if not isinstance(name, str) or not name:
        raise FatalError(
            messages.MISSING_NAME,
            messages.error_message(messages.MISSING_NAME, directory=directory),
            None,
        )
    package = Package(
        name=name,
        directory=str(directory),
        dependencies=_string_mapping(manifest, "dependencies"),
        peer_dependencies=_string_mapping(manifest, "peerDependencies"),
    )
    entrypoint_dirs = _config_of(manifest, directory).get(
        "entrypoints", list(DEFAULT_ENTRYPOINTS)
    )
    if not isinstance(entrypoint_dirs, list):
        message = f"{directory / MANIFEST_FILENAME}: entrypoints must be a list."
        raise ProjectError(message)
    for relative in entrypoint_dirs:
        package.entrypoints.append(
            _load_entrypoint(package, directory, manifest, str(relative))
        )
    return package


def _load_entrypoint(
    package: Package,
    package_dir: Path,
    package_manifest: dict[str, typ.Any],
    relative: str,
) -> Entrypoint:
    directory = (package_dir / relative).resolve()
    if directory == package_dir:
        manifest = package_manifest
        name = package.name
    else:
        manifest = _read_manifest(directory)
        relative_path = Path(os.path.relpath(directory, package_dir)).as_posix()
        name = f"{package.name}/{relative_path}"
    config = _config_of(manifest, directory)
    source = config.get("source", DEFAULT_SOURCE)
    if not isinstance(source, str):
        message = f"{directory / MANIFEST_FILENAME}: source must be a string."
        raise ProjectError(message)
    return Entrypoint(
        package=package,
        name=name,
        directory=str(directory),
        config_source=source,
        main=_optional_string(manifest, "main", directory),
        module=_optional_string(manifest, "module", directory),
        umd_main=_optional_string(manifest, "umd:main", directory),
        browser=field_from_json(manifest.get("browser"), field="browser"),
        react_native=field_from_json(
            manifest.get("react-native"), field="react-native"
        ),
        config=config,
    )
