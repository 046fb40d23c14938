"""Canonical manifest field values derived from a package name."""

from __future__ import annotations

from .models import MappedEntries

STRING_FIELD_SUFFIXES: dict[str, str] = {
    "main": "cjs.js",
    "module": "esm.js",
    "umd:main": "umd.min.js",
}
OBJECT_FIELD_INFIXES: dict[str, str] = {
    "browser": "browser",
    "react-native": "native",
}


def dist_name(package_name: str) -> str:
    """Return the file-name-safe form of a package name (scope removed)."""
    return package_name.rpartition("/")[2]


def expected_string(kind: str, package_name: str) -> str:
    """Return the expected value of a string-shaped field.

    Args:
        kind: One of ``main``, ``module`` or ``umd:main``.
        package_name: The package's ``name`` from its manifest.

    Returns:
        The dist path a build of ``package_name`` writes for ``kind``.

    """
    try:
        suffix = STRING_FIELD_SUFFIXES[kind]
    except KeyError as error:
        message = f"{kind!r} is not a string-shaped field."
        raise ValueError(message) from error
    return f"dist/{dist_name(package_name)}.{suffix}"


def expected_object(
    kind: str,
    package_name: str,
    has_module_build: bool,  # noqa: FBT001
) -> MappedEntries:
    """Return the expected mapping of an object-shaped field.

    The CommonJS entry is always mapped; the ES module entry is mapped only
    when the entrypoint has a module build.
    """
    try:
        infix = OBJECT_FIELD_INFIXES[kind]
    except KeyError as error:
        message = f"{kind!r} is not an object-shaped field."
        raise ValueError(message) from error
    safe_name = dist_name(package_name)
    entries = {f"./dist/{safe_name}.cjs.js": f"./dist/{safe_name}.{infix}.cjs.js"}
    if has_module_build:
        entries[f"./dist/{safe_name}.esm.js"] = f"./dist/{safe_name}.{infix}.esm.js"
    return MappedEntries(entries)
