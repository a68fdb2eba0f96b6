"""
This module contains the interface for adapters to external JSON
libraries.
"""

from typing import Any
import abc
from importlib import import_module
from importlib.metadata import version, PackageNotFoundError
from types import ModuleType

from dcm_json.jsonable import JSONable


class BackendNotAvailableError(RuntimeError):
    """
    Raised if the JSON library required by a backend cannot be loaded.
    """


class JSONBackend(metaclass=abc.ABCMeta):
    """
    Generic interface for an adapter to an external JSON library.

    The library itself is not imported when this module is loaded but
    only when the backend is instantiated. This way, none of the
    supported libraries is a hard requirement of this package.

    Requirements for an implementation:
    NAME -- backend name identifier
    MODULE -- import name of the wrapped library
    DISTRIBUTION -- name of the wrapped library on the package index
                    (used to determine the installed version)
    dumps -- encode a `JSONable` as string
    loads -- decode string as `JSONable`
    decode_errors -- tuple of exception types raised by the library on
                     malformed input
    """

    NAME: str
    MODULE: str
    DISTRIBUTION: str
    UNKNOWN_VERSION = "-not installed-"

    @classmethod
    def __subclasshook__(cls, subclass):
        if cls is not JSONBackend:
            return NotImplemented
        return (
            hasattr(subclass, "NAME")
            and hasattr(subclass, "MODULE")
            and hasattr(subclass, "dumps")
            and hasattr(subclass, "loads")
            and callable(subclass.dumps)
            and callable(subclass.loads)
            or NotImplemented
        )

    def __init__(self) -> None:
        try:
            self._module = import_module(self.MODULE)
        except ImportError as exc_info:
            raise BackendNotAvailableError(
                f"JSON library '{self.MODULE}' required by backend "
                + f"'{self.NAME}' is not available. Install it with "
                + f"'pip install {self.distribution}'."
            ) from exc_info

    @property
    def module(self) -> ModuleType:
        """Returns the loaded library-module."""
        return self._module

    @property
    def distribution(self) -> str:
        """
        Returns the index name of the wrapped library (falls back to
        `MODULE` if `DISTRIBUTION` is not defined).
        """
        return getattr(self, "DISTRIBUTION", None) or self.MODULE

    @property
    def version(self) -> str:
        """Returns the installed version of the wrapped library."""
        try:
            return version(self.distribution)
        except PackageNotFoundError:
            return getattr(self._module, "__version__", self.UNKNOWN_VERSION)

    @property
    def json(self) -> dict[str, str]:
        """Returns self-description as {<name>: <version>}."""
        return {self.NAME: self.version}

    @property
    @abc.abstractmethod
    def decode_errors(self) -> tuple[type[Exception], ...]:
        """
        Returns the exception types raised by the library on malformed
        input.
        """
        raise NotImplementedError(
            f"Class {self.__class__.__name__} does not define property "
            + "'decode_errors'."
        )

    @abc.abstractmethod
    def dumps(self, value: JSONable, indent: bool = False) -> str:
        """
        Returns `value` encoded as JSON-string.

        Output is compact unless `indent` is `True` in which case it is
        indented by two spaces per level. Non-ASCII characters are not
        escaped and non-finite floats are written as `null`.

        Keyword arguments:
        value -- JSON-compatible value
        indent -- whether to indent output
                  (default False)
        """
        raise NotImplementedError(
            f"Class {self.__class__.__name__} does not define method 'dumps'."
        )

    @abc.abstractmethod
    def loads(self, text: str | bytes) -> Any:
        """
        Returns the value decoded from the JSON-string `text`.

        Keyword arguments:
        text -- JSON-document
        """
        raise NotImplementedError(
            f"Class {self.__class__.__name__} does not define method 'loads'."
        )

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(module={self.MODULE!r})"
