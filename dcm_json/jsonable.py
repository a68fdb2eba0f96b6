"""
Definition of the JSONable-type and associated utility functions
"""

from typing import (
    Optional, TypeAlias, ForwardRef, get_args, get_origin
)
from collections.abc import MutableMapping


JSONable: TypeAlias = Optional[
    str | int | float | bool | list["JSONable"]
    | MutableMapping[str, "JSONable"]
]
JSONObject: TypeAlias = MutableMapping[str, JSONable]


def _is_named_alias(type_, name: str) -> bool:
    return type_ == name or (
        isinstance(type_, ForwardRef) and type_.__forward_arg__ == name
    )


def is_jsonable_spec(type_) -> bool:
    """
    Returns `True` if `type_` conforms to the `JSONable`-spec (also
    after forward references have been evaluated, e.g. by
    `typing.get_type_hints`).
    """
    if type_ == JSONable or _is_named_alias(type_, "JSONable"):
        return True
    args = get_args(type_)
    if (
        set(get_origin(arg) or arg for arg in args)
        != {str, int, float, bool, list, MutableMapping, type(None)}
    ):
        return False
    for arg in args:
        if get_origin(arg) == list and not is_jsonable_spec(get_args(arg)[0]):
            return False
        if (
            get_origin(arg) == MutableMapping
            and (
                get_args(arg)[0] != str
                or not is_jsonable_spec(get_args(arg)[1])
            )
        ):
            return False
    return True


def is_jsonobject_spec(type_) -> bool:
    """Returns `True` if `type_` conforms to the `JSONObject`-spec."""
    if type_ == JSONObject or _is_named_alias(type_, "JSONObject"):
        return True
    return (
        get_origin(type_) == MutableMapping
        and get_args(type_)[0] == str
        and is_jsonable_spec(get_args(type_)[1])
    )

