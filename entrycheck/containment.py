"""Check that an entrypoint's source file lives inside its package."""

from __future__ import annotations

import os
import typing as typ
from pathlib import PurePath

from . import messages
from .errors import FatalError, SourceNotFoundError

if typ.TYPE_CHECKING:
    from .models import Entrypoint


def is_inside(directory: str, path: str) -> bool:
    """Return whether ``path`` is ``directory`` or one of its descendants.

    Both paths are normalised first and compared segment by segment, so
    ``/repo/pkg-a`` does not contain ``/repo/pkg-ab/index.js``.
    """
    base = PurePath(os.path.normpath(directory))
    target = PurePath(os.path.normpath(path))
    return target.is_relative_to(base)


def check_containment(entrypoint: Entrypoint) -> None:
    """Raise FatalError unless the entrypoint source is inside its package."""
    try:
        inside = is_inside(entrypoint.package.directory, entrypoint.source)
    except SourceNotFoundError as error:
        raise FatalError(
            messages.NO_SOURCE,
            messages.error_message(
                messages.NO_SOURCE, config_source=entrypoint.config_source
            ),
            entrypoint,
        ) from error
    if not inside:
        raise FatalError(
            messages.INVALID_SOURCE,
            messages.error_message(
                messages.INVALID_SOURCE, config_source=entrypoint.config_source
            ),
            entrypoint,
        )
