"""Resolution of configured entrypoint sources to files on disk."""

from __future__ import annotations

import os
from pathlib import Path

from .errors import SourceNotFoundError

SOURCE_EXTENSIONS = (".js", ".jsx", ".ts", ".tsx", ".mjs", ".cjs")


def resolve_source(directory: str, config_source: str) -> str:
    """Resolve ``config_source`` relative to ``directory``.

    The configured path is tried as written, then with each supported
    extension appended, then as a directory holding an ``index`` file.
    """
    base = Path(os.path.normpath(Path(directory) / config_source))
    candidates = [base]
    # the filesystem root has no name to append an extension to
    if base.name:
        candidates.extend(
            base.with_name(base.name + extension) for extension in SOURCE_EXTENSIONS
        )
    candidates.extend(base / f"index{extension}" for extension in SOURCE_EXTENSIONS)
    for candidate in candidates:
        if candidate.is_file():
            return str(candidate)
    raise SourceNotFoundError(config_source, directory)
