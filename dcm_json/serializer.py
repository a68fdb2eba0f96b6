"""
This module contains the definition of the `JSONSerializer`, the
configured combination of a `JSONBackend` with object conversion and
type binding.
"""

from typing import Any, Optional
from pathlib import Path
import codecs

from .backend import JSONBackend
from .converter import Converter, ReferenceLoopHandling
from .binding import bind
from .util import make_path


class JSONSerializer:
    """
    Serializer for arbitrary objects based on an external JSON library.

    Keyword arguments:
    backend -- adapter for the JSON library that is used for encoding
               and decoding
    enums_as_strings -- if `True`, `Enum`-members are serialized by name
                        and otherwise by value
                        (default True)
    reference_loop_handling -- behavior for objects that refer back to
                               one of their ancestors
                               (default ReferenceLoopHandling.IGNORE)
    """

    def __init__(
        self,
        backend: JSONBackend,
        enums_as_strings: bool = True,
        reference_loop_handling: ReferenceLoopHandling = (
            ReferenceLoopHandling.IGNORE
        ),
    ) -> None:
        self.backend = backend
        self.converter = Converter(
            enums_as_strings=enums_as_strings,
            reference_loop_handling=reference_loop_handling,
        )

    @property
    def enums_as_strings(self) -> bool:
        """Returns `True` if enums are serialized by name."""
        return self.converter.enums_as_strings

    @property
    def reference_loop_handling(self) -> ReferenceLoopHandling:
        """Returns the configured `ReferenceLoopHandling`."""
        return self.converter.reference_loop_handling

    @property
    def decode_errors(self) -> tuple[type[Exception], ...]:
        """Returns the backend's exception types for malformed input."""
        return self.backend.decode_errors

    def dumps(self, value: Any, indent: bool = False) -> str:
        """
        Returns `value` serialized as JSON-string.

        Keyword arguments:
        value -- object to be serialized
        indent -- if `True`, format output with line breaks and
                  indentation
                  (default False)
        """
        return self.backend.dumps(self.converter.convert(value), indent)

    def loads(self, text: str | bytes, type_: Any = None) -> Any:
        """
        Returns the object deserialized from the JSON-string `text`.

        Keyword arguments:
        text -- JSON-document
        type_ -- target type for the result (see `binding.bind`)
                 (default None; returns plain JSON-types)
        """
        return bind(self.backend.loads(text), type_)

    def dump(
        self,
        value: Any,
        path: str | Path,
        indent: bool = False,
        encoding: str = "utf-8",
    ) -> None:
        """
        Writes `value` serialized as JSON to the file at `path`. The
        file is created or truncated, its parent directory has to exist.

        Keyword arguments:
        value -- object to be serialized
        path -- target file
        indent -- if `True`, format output with line breaks and
                  indentation
                  (default False)
        encoding -- file encoding
                    (default "utf-8")
        """
        text = self.dumps(value, indent)
        with make_path(path).open("w", encoding=encoding) as file:
            file.write(text)

    def load(
        self,
        path: str | Path,
        type_: Any = None,
        encoding: Optional[str] = "utf-8",
    ) -> Any:
        """
        Returns the object deserialized from the JSON-file at `path`.

        A leading byte order mark is ignored for UTF-8 encoded files.

        Keyword arguments:
        path -- source file
        type_ -- target type for the result (see `binding.bind`)
                 (default None; returns plain JSON-types)
        encoding -- file encoding
                    (default "utf-8")
        """
        if encoding is not None and codecs.lookup(encoding).name == "utf-8":
            encoding = "utf-8-sig"
        return self.loads(
            make_path(path).read_text(encoding=encoding), type_
        )

    def format(self, text: str | bytes) -> str:
        """Returns the JSON-string `text` with indented formatting."""
        return self.backend.dumps(self.backend.loads(text), True)

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(backend={self.backend!r}, "
            + f"enums_as_strings={self.enums_as_strings}, "
            + f"reference_loop_handling={self.reference_loop_handling})"
        )
