"""Message catalog for validation errors and notices."""

from __future__ import annotations

INVALID_SOURCE = "invalid-source"
NO_SOURCE = "no-source"
INVALID_MAIN_FIELD = "invalid-main-field"
INVALID_MODULE_FIELD = "invalid-module-field"
INVALID_UMD_MAIN_FIELD = "invalid-umd-main-field"
UMD_NAME_NOT_SPECIFIED = "umd-name-not-specified"
INVALID_BROWSER_FIELD = "invalid-browser-field"
INVALID_REACT_NATIVE_FIELD = "invalid-react-native-field"
INCONSISTENT_BUILD_TYPE = "inconsistent-build-type"
UMD_PEER_DEPENDENCY = "umd-peer-dependency"
MISSING_NAME = "missing-name"

ERRORS: dict[str, str] = {
    INVALID_SOURCE: (
        "entrypoint source files must be inside their respective package "
        "directory but this entrypoint has specified its source file as "
        "{config_source}"
    ),
    NO_SOURCE: (
        "no source file was provided, please create a file at {config_source} "
        "or specify a custom source file with the preconstruct source option"
    ),
    INVALID_MAIN_FIELD: "main field is invalid",
    INVALID_MODULE_FIELD: "module field is invalid",
    INVALID_UMD_MAIN_FIELD: "umd:main field is invalid",
    UMD_NAME_NOT_SPECIFIED: (
        "the umd:main field is specified but a umdName option is not specified. "
        "This is required so that UMD builds know which global variable to set"
    ),
    INVALID_BROWSER_FIELD: "browser field is invalid",
    INVALID_REACT_NATIVE_FIELD: "react-native field is invalid",
    INCONSISTENT_BUILD_TYPE: (
        "entrypoint {with_build} has a {field} build but {without} does not have "
        "a {field} build. Entrypoints in a package must either all have a "
        "particular build type or all not have a particular build type."
    ),
    UMD_PEER_DEPENDENCY: (
        "has a UMD build and lists {dependencies} in both dependencies and "
        "peerDependencies; UMD builds cannot bundle peer dependencies"
    ),
    MISSING_NAME: "package.json at {directory} does not declare a name",
}

INFOS: dict[str, str] = {
    "valid-entrypoint": "a valid entry point exists.",
    "valid-main-field": "main field is valid",
    "valid-module-field": "module field is valid",
    "valid-umd-main-field": "umd:main field is valid",
    "valid-browser-field": "browser field is valid",
    "valid-react-native-field": "react-native field is valid",
    "valid-package-entrypoints": "package entrypoints are valid",
}

SUCCESSES: dict[str, str] = {
    "valid-project": "project is valid!",
}


def error_message(code: str, **context: object) -> str:
    """Render the error message registered for ``code``."""
    return ERRORS[code].format(**context)
