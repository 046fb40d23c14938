"""Ordered manifest field checks for a single entrypoint."""

from __future__ import annotations

import dataclasses
import logging
import typing as typ

from . import messages
from .containment import check_containment
from .equality import is_valid
from .errors import FatalError, FixableError, ValidationError
from .expectations import expected_object, expected_string

if typ.TYPE_CHECKING:
    from .models import Entrypoint

_logger = logging.getLogger(__name__)

Handler = typ.Callable[["Entrypoint"], ValidationError | None]


@dataclasses.dataclass(frozen=True)
class CheckDefinition:
    """Metadata describing one step of the entrypoint checklist."""

    name: str
    notice: str
    applies: typ.Callable[[Entrypoint], bool] = lambda _entrypoint: True


@dataclasses.dataclass(frozen=True)
class CheckFailure:
    """First violation found by the checklist."""

    check: str
    error: ValidationError

    @property
    def code(self) -> str:
        """Return the symbolic error code."""
        return self.error.code

    @property
    def fatal(self) -> bool:
        """Return whether the violation cannot be fixed by a rewrite."""
        return isinstance(self.error, FatalError)


class CheckRegistry:
    """Helper to register and run entrypoint checks in order."""

    def __init__(self) -> None:
        """Initialise an empty registry."""
        self._entries: list[tuple[CheckDefinition, Handler]] = []

    def register(self, definition: CheckDefinition, handler: Handler) -> None:
        """Append a check; checks run in registration order."""
        self._entries.append((definition, handler))

    @property
    def names(self) -> list[str]:
        """Expose the check names in evaluation order."""
        return [entry[0].name for entry in self._entries]

    def evaluate(
        self,
        entrypoint: Entrypoint,
        *,
        log: bool = False,
    ) -> CheckFailure | None:
        """Run each applicable check and stop at the first failure."""
        for definition, handler in self._entries:
            if not definition.applies(entrypoint):
                _logger.debug(
                    "%s: skipping %s check", entrypoint.name, definition.name
                )
                continue
            error = handler(entrypoint)
            if error is not None:
                return CheckFailure(check=definition.name, error=error)
            if log:
                _logger.info(
                    "%s %s", entrypoint.name, messages.INFOS[definition.notice]
                )
        return None


def build_registry() -> CheckRegistry:
    """Build the default entrypoint checklist.

    The order is significant: for an entrypoint with several problems it
    decides which single error is reported.
    """
    registry = CheckRegistry()
    registry.register(CheckDefinition("source", "valid-entrypoint"), _run_source)
    registry.register(CheckDefinition("main", "valid-main-field"), _run_main)
    registry.register(
        CheckDefinition(
            "module",
            "valid-module-field",
            applies=lambda entrypoint: entrypoint.module is not None,
        ),
        _run_module,
    )
    registry.register(
        CheckDefinition(
            "umd:main",
            "valid-umd-main-field",
            applies=lambda entrypoint: entrypoint.umd_main is not None,
        ),
        _run_umd_main,
    )
    registry.register(
        CheckDefinition(
            "browser",
            "valid-browser-field",
            applies=lambda entrypoint: entrypoint.browser is not None,
        ),
        _object_field_handler("browser", "browser", messages.INVALID_BROWSER_FIELD),
    )
    registry.register(
        CheckDefinition(
            "react-native",
            "valid-react-native-field",
            applies=lambda entrypoint: entrypoint.react_native is not None,
        ),
        _object_field_handler(
            "react-native", "react_native", messages.INVALID_REACT_NATIVE_FIELD
        ),
    )
    return registry


def run_checklist(entrypoint: Entrypoint, *, log: bool = False) -> CheckFailure | None:
    """Return the first violation for ``entrypoint``, or None when it is valid."""
    return DEFAULT_REGISTRY.evaluate(entrypoint, log=log)


def validate_entrypoint(entrypoint: Entrypoint, *, log: bool = False) -> None:
    """Raise the first FatalError or FixableError found for ``entrypoint``."""
    failure = run_checklist(entrypoint, log=log)
    if failure is not None:
        raise failure.error


def _fixable(code: str, entrypoint: Entrypoint) -> FixableError:
    return FixableError(code, messages.error_message(code), entrypoint)


def _run_source(entrypoint: Entrypoint) -> ValidationError | None:
    try:
        check_containment(entrypoint)
    except FatalError as error:
        return error
    return None


def _run_main(entrypoint: Entrypoint) -> ValidationError | None:
    expected = expected_string("main", entrypoint.package.name)
    if is_valid("main", entrypoint.main, expected):
        return None
    return _fixable(messages.INVALID_MAIN_FIELD, entrypoint)


def _run_module(entrypoint: Entrypoint) -> ValidationError | None:
    expected = expected_string("module", entrypoint.package.name)
    if is_valid("module", entrypoint.module, expected):
        return None
    return _fixable(messages.INVALID_MODULE_FIELD, entrypoint)


def _run_umd_main(entrypoint: Entrypoint) -> ValidationError | None:
    expected = expected_string("umd:main", entrypoint.package.name)
    if not is_valid("umd:main", entrypoint.umd_main, expected):
        return _fixable(messages.INVALID_UMD_MAIN_FIELD, entrypoint)
    if not isinstance(entrypoint.config.get("umdName"), str):
        return _fixable(messages.UMD_NAME_NOT_SPECIFIED, entrypoint)
    return None


def _object_field_handler(kind: str, attribute: str, code: str) -> Handler:
    def handler(entrypoint: Entrypoint) -> ValidationError | None:
        expected = expected_object(
            kind,
            entrypoint.package.name,
            entrypoint.module is not None,
        )
        if is_valid(kind, getattr(entrypoint, attribute), expected):
            return None
        return _fixable(code, entrypoint)

    return handler


DEFAULT_REGISTRY = build_registry()
