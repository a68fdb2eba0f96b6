"""
Definitions for the dynamic loading of external JSON libraries.

Backends are either referenced by their registered name (see
`BACKENDS`) or by an import path of the form "package.module:Class".
"""

from importlib import import_module

from dcm_json.logging import Logging
from .interface import JSONBackend, BackendNotAvailableError
from .orjson_ import ORJSONBackend
from .simplejson_ import SimpleJSONBackend


BACKENDS: dict[str, type[JSONBackend]] = {
    ORJSONBackend.NAME: ORJSONBackend,
    SimpleJSONBackend.NAME: SimpleJSONBackend,
}


def get_backend_class(name: str) -> type[JSONBackend]:
    """
    Returns the `JSONBackend`-class referenced by `name`.

    Keyword arguments:
    name -- registered backend name or import path of the form
            "package.module:Class"
    """
    if name in BACKENDS:
        return BACKENDS[name]

    if ":" not in name:
        raise BackendNotAvailableError(
            f"Unknown JSON backend '{name}' (expected one of "
            + f"{', '.join(map(repr, BACKENDS))} or an import path like "
            + "'package.module:Class')."
        )

    module_name, class_name = name.split(":", maxsplit=1)
    if not module_name or not class_name:
        raise BackendNotAvailableError(
            f"Bad import path '{name}' for JSON backend (expected "
            + "'package.module:Class')."
        )
    try:
        module = import_module(module_name)
    except Exception as exc_info:  # pylint: disable=broad-exception-caught
        raise BackendNotAvailableError(
            f"Unable to import module '{module_name}' for JSON backend "
            + f"'{name}'."
        ) from exc_info
    try:
        backend = getattr(module, class_name)
    except AttributeError as exc_info:
        raise BackendNotAvailableError(
            f"Module '{module_name}' does not define JSON backend "
            + f"'{class_name}'."
        ) from exc_info

    if not isinstance(backend, type) or not issubclass(backend, JSONBackend):
        raise TypeError(
            f"Object '{name}' is not a subclass of 'JSONBackend'."
        )
    return backend


def load_backend(name: str) -> JSONBackend:
    """
    Loads and returns the `JSONBackend` referenced by `name`.

    Raises a `BackendNotAvailableError` if either the backend itself or
    the JSON library it wraps cannot be loaded.

    Keyword arguments:
    name -- registered backend name or import path of the form
            "package.module:Class"
    """
    backend = get_backend_class(name)()
    Logging.info(
        f"Loaded JSON backend '{backend.NAME}' "
        + f"({backend.MODULE} {backend.version})."
    )
    return backend


__all__ = [
    "JSONBackend",
    "BackendNotAvailableError",
    "ORJSONBackend",
    "SimpleJSONBackend",
    "BACKENDS",
    "get_backend_class",
    "load_backend",
]
