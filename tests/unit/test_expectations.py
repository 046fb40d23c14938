"""Tests for canonical field value derivation."""

from __future__ import annotations

import typing as typ

import pytest

from entrycheck.expectations import dist_name, expected_object, expected_string
from entrycheck.models import MappedEntries


@pytest.mark.parametrize(
    ("kind", "expected"),
    [
        ("main", "dist/my-pkg.cjs.js"),
        ("module", "dist/my-pkg.esm.js"),
        ("umd:main", "dist/my-pkg.umd.min.js"),
    ],
)
def test_expected_string_for_each_kind(kind: str, expected: str) -> None:
    """String-shaped fields point at the dist file for their format."""
    assert expected_string(kind, "my-pkg") == expected


def test_scope_is_dropped_from_dist_name() -> None:
    """Scoped package names keep only the part after the slash."""
    assert dist_name("@scope/widgets") == "widgets"
    assert expected_string("main", "@scope/widgets") == "dist/widgets.cjs.js"


def test_browser_without_module_build() -> None:
    """Only the CommonJS entry is mapped when there is no module build."""
    assert expected_object("browser", "my-pkg", False) == MappedEntries(
        {"./dist/my-pkg.cjs.js": "./dist/my-pkg.browser.cjs.js"}
    )


def test_module_build_adds_exactly_one_entry() -> None:
    """A module build adds the ES module mapping and nothing else."""
    without = expected_object("react-native", "my-pkg", False).entries
    with_module = expected_object("react-native", "my-pkg", True).entries
    assert len(with_module) == len(without) + 1
    assert with_module.items() >= without.items()
    assert with_module["./dist/my-pkg.esm.js"] == "./dist/my-pkg.native.esm.js"


def test_expectations_are_deterministic() -> None:
    """Repeated calls with the same inputs give equal values."""
    assert expected_string("module", "a") == expected_string("module", "a")
    first = expected_object("browser", "a", True)
    assert first == expected_object("browser", "a", True)


@pytest.mark.parametrize(
    ("function", "args"),
    [
        (expected_string, ("browser", "my-pkg")),
        (expected_object, ("main", "my-pkg", False)),
    ],
)
def test_unknown_kind_is_rejected(
    function: typ.Callable[..., object],
    args: tuple[object, ...],
) -> None:
    """Asking for the wrong shape of field is a programming error."""
    with pytest.raises(ValueError, match="not a"):
        function(*args)
