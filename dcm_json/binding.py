"""
Binding of decoded JSON-values to (annotated) types.
"""

from typing import Any, Literal, Union, get_args, get_origin, get_type_hints
from types import NoneType, UnionType
from enum import Enum
from collections import abc
from dataclasses import fields, is_dataclass
from datetime import datetime, date, time
from decimal import Decimal, InvalidOperation
from pathlib import PurePath
from uuid import UUID
from base64 import b64decode
from binascii import Error as BinasciiError

from .jsonable import (
    JSONable, JSONObject, is_jsonable_spec, is_jsonobject_spec
)
from .util import qualified_name


_ERR_MSG = "{msg} while deserializing '{path}'."
_SEQUENCES = {
    list: list,
    tuple: tuple,
    set: set,
    frozenset: frozenset,
    abc.Iterable: list,
    abc.Collection: list,
    abc.Sequence: list,
    abc.MutableSequence: list,
    abc.Set: frozenset,
    abc.MutableSet: set,
}
_MAPPINGS = (dict, abc.Mapping, abc.MutableMapping)
_LOCALNS = {"JSONable": JSONable, "JSONObject": JSONObject}


def bind(value: JSONable, type_: Any = None) -> Any:
    """
    Returns `value` converted into an instance of `type_`.

    Raises `TypeError` or `ValueError` if `value` is not compatible with
    `type_`.

    Supported are
    * `None`, `Any`, `object`, `JSONable`, and `JSONObject` (`value` is
      returned as is),
    * types with a classmethod `from_json` like `DataModel`s,
    * `Enum`-types (by name or by value),
    * `Optional`, `Union`, and `Literal`,
    * `list`, `tuple`, `set`, `frozenset` and `dict` (optionally
      parameterized),
    * dataclasses (unknown keys are ignored, missing keys take the
      field's default),
    * `str`, `int`, `float`, `bool`, `datetime`, `date`, `time`, `UUID`,
      `Path`, `Decimal`, and `bytes` (base64-encoded),
    * plain classes that can be instantiated without arguments and
      define type annotations for their attributes.

    Keyword arguments:
    value -- decoded JSON-value
    type_ -- target type
             (default None; returns `value` as is)
    """
    return _bind(value, type_, "$")


def _error(msg: str, path: str) -> str:
    return _ERR_MSG.format(msg=msg, path=path)


def _mismatch(value: Any, type_: Any, path: str) -> TypeError:
    return TypeError(
        _error(
            f"Encountered bad input value '{value}' (got type "
            + f"'{type(value).__name__}' but expected type "
            + f"'{qualified_name(type_)}')",
            path,
        )
    )


def _bind(value: JSONable, type_: Any, path: str) -> Any:
    # pylint: disable=too-many-return-statements, too-many-branches
    if type_ is None or type_ is Any or type_ is object:
        return value
    if is_jsonable_spec(type_) or is_jsonobject_spec(type_):
        return value
    if type_ is NoneType:
        if value is not None:
            raise _mismatch(value, type_, path)
        return None

    origin = get_origin(type_)
    args = get_args(type_)

    if origin in (Union, UnionType):
        return _bind_union(value, args, path)
    if origin is Literal:
        if value not in args:
            raise ValueError(
                _error(f"Value '{value}' not in {list(args)}", path)
            )
        return value
    if isinstance(type_, type) and issubclass(type_, Enum):
        return _bind_enum(value, type_, path)
    if callable(getattr(type_, "from_json", None)):
        return type_.from_json(value)
    if (origin or type_) in _SEQUENCES:
        return _bind_sequence(value, origin or type_, args, path)
    if (origin or type_) in _MAPPINGS:
        return _bind_mapping(value, args, path)
    if not isinstance(type_, type):
        raise TypeError(
            _error(f"Encountered incompatible typehint '{type_}'", path)
        )
    if is_dataclass(type_):
        return _bind_dataclass(value, type_, path)
    return _bind_scalar(value, type_, path)


def _bind_union(value: JSONable, args: tuple, path: str) -> Any:
    if value is None and NoneType in args:
        return None
    problems = []
    for arg in args:
        if arg is NoneType:
            continue
        try:
            return _bind(value, arg, path)
        except (TypeError, ValueError) as exc_info:
            problems.append(str(exc_info))
    raise TypeError(
        _error(
            f"Value '{value}' does not match any of "
            + f"{[qualified_name(arg) for arg in args]} ("
            + "; ".join(problems)
            + ")",
            path,
        )
    )


def _bind_enum(value: JSONable, type_: type[Enum], path: str) -> Enum:
    if isinstance(value, str):
        if value in type_.__members__:
            return type_.__members__[value]
        for name, member in type_.__members__.items():
            if name.lower() == value.lower():
                return member
    try:
        return type_(value)
    except (ValueError, TypeError) as exc_info:
        raise ValueError(
            _error(
                f"Value '{value}' is not a member of enum "
                + f"'{type_.__name__}'",
                path,
            )
        ) from exc_info


def _bind_sequence(
    value: JSONable, container: type, args: tuple, path: str
) -> Any:
    if not isinstance(value, list):
        raise _mismatch(value, container, path)
    container = _SEQUENCES[container]
    variadic = len(args) == 2 and args[1] is ...
    if container is tuple and args and not variadic:
        if len(args) != len(value):
            raise ValueError(
                _error(
                    f"Expected {len(args)} items but got {len(value)}", path
                )
            )
        return tuple(
            _bind(item, arg, f"{path}[{index}]")
            for index, (item, arg) in enumerate(zip(value, args))
        )
    item_type = args[0] if args else None
    return container(
        _bind(item, item_type, f"{path}[{index}]")
        for index, item in enumerate(value)
    )


def _bind_key(key: str, type_: Any, path: str) -> Any:
    if type_ is None or type_ is Any or type_ is str:
        return key
    if isinstance(type_, type) and issubclass(type_, Enum):
        return _bind_enum(key, type_, path)
    if type_ is bool:
        if key not in ("true", "false"):
            raise ValueError(_error(f"Bad boolean key '{key}'", path))
        return key == "true"
    if type_ is int:
        try:
            return int(key)
        except ValueError as exc_info:
            raise ValueError(
                _error(f"Bad integer key '{key}'", path)
            ) from exc_info
    if type_ is float:
        try:
            return float(key)
        except ValueError as exc_info:
            raise ValueError(
                _error(f"Bad number key '{key}'", path)
            ) from exc_info
    raise TypeError(
        _error(f"Encountered non-supported key type '{type_}'", path)
    )


def _bind_mapping(value: JSONable, args: tuple, path: str) -> dict:
    if not isinstance(value, abc.Mapping):
        raise _mismatch(value, dict, path)
    key_type, item_type = args if len(args) == 2 else (None, None)
    return {
        _bind_key(key, key_type, path): _bind(
            item, item_type, f"{path}.{key}"
        )
        for key, item in value.items()
    }


def _bind_dataclass(value: JSONable, type_: type, path: str) -> Any:
    if not isinstance(value, abc.Mapping):
        raise _mismatch(value, type_, path)
    hints = get_type_hints(type_, localns=_LOCALNS)
    kwargs = {
        field.name: _bind(
            value[field.name],
            hints.get(field.name, Any),
            f"{path}.{field.name}",
        )
        for field in fields(type_)
        if field.init and field.name in value
    }
    try:
        return type_(**kwargs)
    except TypeError as exc_info:
        raise TypeError(
            _error(
                f"Unable to instantiate class '{type_.__name__}' with "
                + f"kwargs '{kwargs}'",
                path,
            )
        ) from exc_info


def _bind_scalar(value: JSONable, type_: type, path: str) -> Any:
    # pylint: disable=too-many-return-statements, too-many-branches
    if type_ is bool:
        if not isinstance(value, bool):
            raise _mismatch(value, type_, path)
        return value
    if type_ is int:
        if isinstance(value, float) and value.is_integer():
            return int(value)
        if not isinstance(value, int) or isinstance(value, bool):
            raise _mismatch(value, type_, path)
        return value
    if type_ is float:
        if not isinstance(value, (int, float)) or isinstance(value, bool):
            raise _mismatch(value, type_, path)
        return float(value)
    if type_ is str:
        if not isinstance(value, str):
            raise _mismatch(value, type_, path)
        return value
    if issubclass(type_, (datetime, date, time, UUID, PurePath)):
        if not isinstance(value, str):
            raise _mismatch(value, type_, path)
        if issubclass(type_, (datetime, date, time)):
            return type_.fromisoformat(value)
        return type_(value)
    if issubclass(type_, Decimal):
        if not isinstance(value, (str, int, float)) or isinstance(value, bool):
            raise _mismatch(value, type_, path)
        try:
            return type_(str(value))
        except InvalidOperation as exc_info:
            raise ValueError(
                _error(f"Bad decimal value '{value}'", path)
            ) from exc_info
    if issubclass(type_, (bytes, bytearray)):
        if not isinstance(value, str):
            raise _mismatch(value, type_, path)
        try:
            return type_(b64decode(value, validate=True))
        except BinasciiError as exc_info:
            raise ValueError(
                _error(f"Bad base64-value '{value}'", path)
            ) from exc_info
    if isinstance(value, type_):
        return value
    if isinstance(value, abc.Mapping):
        return _bind_object(value, type_, path)
    raise _mismatch(value, type_, path)


def _bind_object(value: abc.Mapping, type_: type, path: str) -> Any:
    hints = {
        name: hint
        for name, hint in get_type_hints(type_, localns=_LOCALNS).items()
        if not name.startswith("_")
    }
    if not hints:
        raise TypeError(
            _error(
                f"Class '{type_.__name__}' does not define type annotations",
                path,
            )
        )
    try:
        instance = type_()
    except TypeError as exc_info:
        raise TypeError(
            _error(
                f"Unable to instantiate class '{type_.__name__}' without "
                + "arguments",
                path,
            )
        ) from exc_info
    for name, hint in hints.items():
        if name in value:
            setattr(instance, name, _bind(value[name], hint, f"{path}.{name}"))
    return instance
