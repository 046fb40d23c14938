"""Package and entrypoint snapshots read from package manifests."""

from __future__ import annotations

import dataclasses
import typing as typ

from .errors import ProjectError
from .sources import resolve_source

EntryValue = typ.Union[str, bool, int, float, None, "MappedEntries"]


@dataclasses.dataclass(frozen=True)
class SingleEntry:
    """A `browser` or `react-native` field written as a plain string."""

    value: str


@dataclasses.dataclass(frozen=True)
class MappedEntries:
    """A `browser` or `react-native` field written as a path mapping."""

    entries: typ.Mapping[str, EntryValue]


EntryField = SingleEntry | MappedEntries


def field_from_json(value: object, *, field: str = "browser") -> EntryField | None:
    """Convert a raw manifest value into an entry field variant."""
    if value is None:
        return None
    if isinstance(value, str):
        return SingleEntry(value)
    if isinstance(value, dict):
        return _mapping_from_json(value)
    message = f"{field} field must be a string or an object, not {value!r}."
    raise ProjectError(message)


def _mapping_from_json(payload: dict[str, object]) -> MappedEntries:
    entries: dict[str, EntryValue] = {}
    for key, item in payload.items():
        if isinstance(item, dict):
            entries[str(key)] = _mapping_from_json(item)
        else:
            entries[str(key)] = typ.cast("EntryValue", item)
    return MappedEntries(entries)


@dataclasses.dataclass
class Package:
    """A package directory holding a `package.json` manifest."""

    name: str
    directory: str
    dependencies: dict[str, str] = dataclasses.field(default_factory=dict)
    peer_dependencies: dict[str, str] = dataclasses.field(default_factory=dict)
    entrypoints: list[Entrypoint] = dataclasses.field(
        default_factory=list, repr=False, compare=False
    )


@dataclasses.dataclass(frozen=True)
class Entrypoint:
    """One build target of a package and the manifest fields describing it."""

    package: Package = dataclasses.field(repr=False)
    name: str
    directory: str
    config_source: str
    main: str | None = None
    module: str | None = None
    umd_main: str | None = None
    browser: EntryField | None = None
    react_native: EntryField | None = None
    config: typ.Mapping[str, typ.Any] = dataclasses.field(default_factory=dict)
    resolved_source: str | None = None

    @property
    def source(self) -> str:
        """Return the absolute path of the source file.

        Raises:
            SourceNotFoundError: ``config_source`` does not resolve to a file.

        """
        if self.resolved_source is not None:
            return self.resolved_source
        return resolve_source(self.directory, self.config_source)
