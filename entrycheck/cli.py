"""Command line entry points for entrycheck."""

from __future__ import annotations

import logging
from pathlib import Path

from cyclopts import App

from .config import load_settings
from .errors import EntrycheckError, FixableError
from .project import Project
from .validate import validate_project

app = App(name="entrycheck")

LOG_FORMAT = "%(levelname)s %(message)s"


@app.command()
def validate(
    directory: Path = Path(),
    *,
    quiet: bool = False,
    keep_going: bool | None = None,
    config: Path | None = None,
) -> int:
    """Check the entrypoint fields of every package under DIRECTORY."""
    settings = load_settings(config)
    logging.basicConfig(
        level=logging.WARNING if quiet else settings.level,
        format=LOG_FORMAT,
    )
    project = Project.load(directory)
    continue_on_fixable = settings.keep_going if keep_going is None else keep_going

    failures: list[FixableError] = []

    def report(error: FixableError) -> None:
        print(f"entrycheck: {error}")
        failures.append(error)

    validate_project(
        project,
        log=not quiet,
        on_fixable=report if continue_on_fixable else None,
    )
    return 1 if failures else 0


def main(argv: list[str] | tuple[str, ...] | None = None) -> int:
    """Entry point for the entrycheck CLI."""
    try:
        result = app(argv)
    except EntrycheckError as error:
        print(f"entrycheck: {error}")
        return 1
    return int(result or 0)


if __name__ == "__main__":
    raise SystemExit(main())
