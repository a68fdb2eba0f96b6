"""
Conversion of object graphs into `JSONable`s.

The external JSON libraries differ in what they accept beyond plain
JSON-types. Converting every value first ensures that all backends see
the same input and thus produce the same output.
"""

from typing import Any
from enum import Enum
from collections.abc import Mapping
from dataclasses import fields, is_dataclass
from datetime import datetime, date, time
from decimal import Decimal
from pathlib import PurePath
from uuid import UUID
from base64 import b64encode

from .jsonable import JSONable, JSONObject


class ReferenceLoopHandling(Enum):
    """
    Enum-class for the behavior on encountering an object that refers
    back to one of its ancestors during serialization.
    """

    IGNORE = "ignore"
    ERROR = "error"


class _ReferenceLoopSkipSignal(Exception):
    pass


class Converter:
    """
    Converts object graphs into `JSONable`s.

    Supported are
    * `None`, `str`, `int`, `float`, and `bool` (subclasses are reduced
      to the base type),
    * `Enum`-members (by name or by value),
    * objects whose class defines a property `json` like `DataModel`s
      (the value of that property is converted),
    * mappings (keys need to be of type `str`, `Enum`, `int`, `float`,
      `bool`, or `None`),
    * `list`, `tuple`, `set`, and `frozenset`,
    * dataclasses and plain objects (public attributes only, i.e.
      no leading underscore),
    * `datetime`, `date`, and `time` (ISO 8601-format), `UUID`,
      `Path`, `Decimal`, as well as `bytes` (base64-encoded).

    Keyword arguments:
    enums_as_strings -- if `True`, `Enum`-members are converted by name
                        and otherwise by value
                        (default True)
    reference_loop_handling -- behavior for self-referencing objects
                               (default ReferenceLoopHandling.IGNORE)
    """

    _ERR_MSG = "{msg} while serializing '{path}'."

    def __init__(
        self,
        enums_as_strings: bool = True,
        reference_loop_handling: ReferenceLoopHandling = (
            ReferenceLoopHandling.IGNORE
        ),
    ) -> None:
        self.enums_as_strings = enums_as_strings
        self.reference_loop_handling = reference_loop_handling

    def convert(self, value: Any) -> JSONable:
        """Returns `value` converted into a `JSONable`."""
        try:
            return self._convert(value, "$", set())
        except _ReferenceLoopSkipSignal:
            return None

    def _convert(
        self, value: Any, path: str, ancestors: set[int]
    ) -> JSONable:
        if isinstance(value, Enum):
            if self.enums_as_strings:
                return value.name
            return self._convert(value.value, path, ancestors)
        if value is None or type(value) in (str, int, float, bool):
            return value
        # subclasses of primitive types are reduced to their base type
        if isinstance(value, int):
            return int(value)
        if isinstance(value, float):
            return float(value)
        if isinstance(value, str):
            return str.__str__(value)
        if isinstance(value, (datetime, date, time)):
            return value.isoformat()
        if isinstance(value, (UUID, PurePath)):
            return str(value)
        if isinstance(value, Decimal):
            return float(value)
        if isinstance(value, (bytes, bytearray)):
            return b64encode(value).decode("ascii")
        if isinstance(value, type) or callable(value):
            raise TypeError(
                self._ERR_MSG.format(
                    msg=f"Encountered callable '{value!r}'",
                    path=path,
                )
            )

        self._enter(value, path, ancestors)
        ancestors.add(id(value))
        try:
            if isinstance(getattr(type(value), "json", None), property):
                return self._convert(value.json, path, ancestors)
            if isinstance(value, Mapping):
                return self._convert_mapping(value.items(), path, ancestors)
            if isinstance(value, (list, tuple, set, frozenset)):
                return self._convert_sequence(value, path, ancestors)
            if is_dataclass(value):
                return self._convert_mapping(
                    (
                        (field.name, getattr(value, field.name))
                        for field in fields(value)
                        if not field.name.startswith("_")
                    ),
                    path,
                    ancestors,
                )
            if hasattr(value, "__dict__"):
                return self._convert_mapping(
                    (
                        (key, item)
                        for key, item in vars(value).items()
                        if not key.startswith("_")
                    ),
                    path,
                    ancestors,
                )
        finally:
            ancestors.discard(id(value))

        raise TypeError(
            self._ERR_MSG.format(
                msg=f"Encountered non-supported object '{value}' "
                + f"(type '{type(value).__name__}')",
                path=path,
            )
        )

    def _enter(self, value: Any, path: str, ancestors: set[int]) -> None:
        """Handle reference loops."""
        if id(value) not in ancestors:
            return
        if self.reference_loop_handling is ReferenceLoopHandling.ERROR:
            raise ValueError(
                self._ERR_MSG.format(
                    msg="Self referencing loop detected for object of type "
                    + f"'{type(value).__name__}'",
                    path=path,
                )
            )
        raise _ReferenceLoopSkipSignal()

    def _convert_mapping(
        self, items, path: str, ancestors: set[int]
    ) -> JSONObject:
        json = {}
        for key, item in items:
            _key = self._convert_key(key, path)
            try:
                json[_key] = self._convert(item, f"{path}.{_key}", ancestors)
            except _ReferenceLoopSkipSignal:
                pass
        return json

    def _convert_sequence(
        self, values, path: str, ancestors: set[int]
    ) -> list[JSONable]:
        json = []
        for index, item in enumerate(values):
            try:
                json.append(
                    self._convert(item, f"{path}[{index}]", ancestors)
                )
            except _ReferenceLoopSkipSignal:
                pass
        return json

    def _convert_key(self, key: Any, path: str) -> str:
        if isinstance(key, Enum):
            if self.enums_as_strings:
                return key.name
            return self._convert_key(key.value, path)
        if isinstance(key, str):
            return str.__str__(key)
        if isinstance(key, bool):
            return "true" if key else "false"
        if isinstance(key, (int, float)):
            return str(key)
        if key is None:
            return "null"
        raise TypeError(
            self._ERR_MSG.format(
                msg=f"Encountered non-supported key '{key}' "
                + f"(type '{type(key).__name__}')",
                path=path,
            )
        )
