"""Project-wide validation of packages and their entrypoints."""

from __future__ import annotations

import logging
import typing as typ

from . import messages
from .checks import validate_entrypoint
from .errors import FatalError, FixableError

if typ.TYPE_CHECKING:
    from .models import Package
    from .project import Project

_logger = logging.getLogger(__name__)

BUILD_TYPE_FIELDS: tuple[tuple[str, str], ...] = (
    ("module", "module"),
    ("umd_main", "umd:main"),
    ("browser", "browser"),
    ("react_native", "react-native"),
)


def validate_package(package: Package) -> None:
    """Check rules spanning every entrypoint of ``package``.

    Entrypoints must agree on which optional builds they have, and a package
    with a UMD build may not list a dependency as both a regular and a peer
    dependency.
    """
    if not package.entrypoints:
        return
    first, *rest = package.entrypoints
    for entrypoint in rest:
        for attribute, field in BUILD_TYPE_FIELDS:
            first_has = getattr(first, attribute) is not None
            other_has = getattr(entrypoint, attribute) is not None
            if first_has == other_has:
                continue
            with_build, without = (
                (entrypoint, first) if other_has else (first, entrypoint)
            )
            raise FixableError(
                messages.INCONSISTENT_BUILD_TYPE,
                messages.error_message(
                    messages.INCONSISTENT_BUILD_TYPE,
                    with_build=with_build.name,
                    without=without.name,
                    field=field,
                ),
                package,
            )
    if first.umd_main is not None:
        clashes = sorted(set(package.dependencies) & set(package.peer_dependencies))
        if clashes:
            raise FatalError(
                messages.UMD_PEER_DEPENDENCY,
                messages.error_message(
                    messages.UMD_PEER_DEPENDENCY, dependencies=", ".join(clashes)
                ),
                package,
            )


def validate_project(
    project: Project,
    *,
    log: bool = True,
    on_fixable: typ.Callable[[FixableError], None] | None = None,
) -> bool:
    """Validate every package of ``project`` in order.

    A FixableError is raised unless ``on_fixable`` is given, in which case it
    is handed to the callback and validation moves on to the next package.
    FatalError always propagates.

    Returns:
        True when every package passed.

    """
    all_valid = True
    for package in project.packages:
        try:
            validate_package(package)
            for entrypoint in package.entrypoints:
                validate_entrypoint(entrypoint, log=log)
        except FixableError as error:
            if on_fixable is None:
                raise
            on_fixable(error)
            all_valid = False
            continue
        if log:
            _logger.info(
                "%s %s", package.name, messages.INFOS["valid-package-entrypoints"]
            )
    if log and all_valid:
        _logger.info(messages.SUCCESSES["valid-project"])
    return all_valid
