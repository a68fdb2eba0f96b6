"""Binding-tests."""

from typing import Any, Literal, Optional
from dataclasses import dataclass, field
from enum import Enum
from datetime import datetime, date, timezone
from decimal import Decimal
from pathlib import Path
from uuid import UUID

import pytest

from dcm_json import JSONable, JSONObject
from dcm_json.binding import bind


class Status(Enum):
    QUEUED = "queued"
    COMPLETED = "completed"


@dataclass
class Checksum:
    method: str
    value: str


@dataclass
class Package:
    name: str
    status: Status = Status.QUEUED
    size: int = 0
    tags: list[str] = field(default_factory=list)
    checksum: Optional[Checksum] = None
    metadata: JSONObject = field(default_factory=dict)


class Token:
    """Mimics the `DataModel`-interface."""

    def __init__(self, value):
        self.value = value

    @classmethod
    def from_json(cls, json):
        return cls(json["value"])


class Annotated:
    identifier: str
    count: int = 0


@pytest.mark.parametrize(
    "type_",
    [None, Any, object, JSONable, JSONObject],
)
def test_bind_passthrough(type_):
    """Test function `bind` for types that return input as is."""
    value = {"a": [1, None]}
    assert bind(value, type_) is value


def test_bind_dataclass():
    """Test function `bind` for nested dataclasses."""
    package = bind(
        {
            "name": "bag",
            "status": "COMPLETED",
            "tags": ["a", "b"],
            "checksum": {"method": "md5", "value": "abc"},
            "metadata": {"any": ["thing"]},
            "unknown": "ignored",
        },
        Package,
    )
    assert package == Package(
        name="bag",
        status=Status.COMPLETED,
        tags=["a", "b"],
        checksum=Checksum("md5", "abc"),
        metadata={"any": ["thing"]},
    )


def test_bind_dataclass_missing_required():
    """Test function `bind` for dataclass with missing field."""
    with pytest.raises(TypeError):
        bind({"size": 1}, Package)


def test_bind_dataclass_bad_field():
    """Test function `bind` for dataclass with bad field value."""
    with pytest.raises(TypeError) as exc_info:
        bind({"name": "bag", "size": "large"}, Package)
    assert "'$.size'" in str(exc_info.value)


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("COMPLETED", Status.COMPLETED),
        ("completed", Status.COMPLETED),
        ("Queued", Status.QUEUED),
    ],
)
def test_bind_enum(value, expected):
    """Test function `bind` for enums (by name and by value)."""
    assert bind(value, Status) is expected


def test_bind_enum_unknown():
    """Test function `bind` for enums with unknown member."""
    with pytest.raises(ValueError):
        bind("FAILED", Status)


def test_bind_from_json():
    """Test function `bind` for types with `from_json`."""
    tokens = bind([{"value": "a"}, {"value": "b"}], list[Token])
    assert [token.value for token in tokens] == ["a", "b"]


@pytest.mark.parametrize(
    ("value", "type_", "expected"),
    [
        ([1, 2], list[int], [1, 2]),
        ([1, 2], tuple[int, ...], (1, 2)),
        ([1, "a"], tuple[int, str], (1, "a")),
        ([1, 1], set[int], {1}),
        ([1], frozenset, frozenset([1])),
        ([1, "a"], list, [1, "a"]),
        ({"1": "a"}, dict[int, str], {1: "a"}),
        ({"QUEUED": 1}, dict[Status, int], {Status.QUEUED: 1}),
        ({"true": 1, "false": 0}, dict[bool, int], {True: 1, False: 0}),
        ({"a": {"b": 1.0}}, dict[str, dict[str, float]], {"a": {"b": 1.0}}),
    ],
)
def test_bind_containers(value, type_, expected):
    """Test function `bind` for container types."""
    assert bind(value, type_) == expected


def test_bind_tuple_length_mismatch():
    """Test function `bind` for fixed-length tuple."""
    with pytest.raises(ValueError):
        bind([1, 2, 3], tuple[int, int])


def test_bind_bad_bool_key():
    """Test function `bind` for a mapping with a bad boolean key."""
    with pytest.raises(ValueError):
        bind({"True": 1}, dict[bool, int])


@pytest.mark.parametrize(
    ("value", "type_", "expected"),
    [
        (None, Optional[int], None),
        (1, Optional[int], 1),
        ("a", int | str, "a"),
        ({"method": "m", "value": "v"}, Checksum | None, Checksum("m", "v")),
        ("a", Literal["a", "b"], "a"),
    ],
)
def test_bind_unions(value, type_, expected):
    """Test function `bind` for unions and literals."""
    assert bind(value, type_) == expected


def test_bind_union_mismatch():
    """Test function `bind` for union without matching type."""
    with pytest.raises(TypeError):
        bind([1], int | str)
    with pytest.raises(ValueError):
        bind("c", Literal["a", "b"])


@pytest.mark.parametrize(
    ("value", "type_", "expected"),
    [
        ("a", str, "a"),
        (1, int, 1),
        (1.0, int, 1),
        (1, float, 1.0),
        (True, bool, True),
        (
            "2024-01-02T03:04:05+00:00",
            datetime,
            datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc),
        ),
        ("2024-01-02", date, date(2024, 1, 2)),
        (
            "12345678-1234-5678-1234-567812345678",
            UUID,
            UUID("12345678-1234-5678-1234-567812345678"),
        ),
        ("a/b", Path, Path("a/b")),
        ("1.5", Decimal, Decimal("1.5")),
        ("ZGF0YQ==", bytes, b"data"),
    ],
)
def test_bind_scalars(value, type_, expected):
    """Test function `bind` for scalar types."""
    result = bind(value, type_)
    assert result == expected
    assert type(result) is type(expected)


@pytest.mark.parametrize(
    ("value", "type_"),
    [
        (True, int),
        (1, bool),
        (1.5, int),
        ("1", int),
        (1, str),
        (None, str),
        ("not-base64!", bytes),
        ("a", Decimal),
        ({"a": 1}, list[int]),
        ([1], dict[str, int]),
    ],
)
def test_bind_scalar_mismatch(value, type_):
    """Test function `bind` for incompatible values."""
    with pytest.raises((TypeError, ValueError)):
        bind(value, type_)


def test_bind_annotated_object():
    """Test function `bind` for plain annotated classes."""
    result = bind({"identifier": "a", "other": "ignored"}, Annotated)
    assert isinstance(result, Annotated)
    assert result.identifier == "a"
    assert result.count == 0
    assert not hasattr(result, "other")


def test_bind_object_without_annotations():
    """Test function `bind` for plain classes without annotations."""
    class Plain:
        pass

    with pytest.raises(TypeError):
        bind({"a": 1}, Plain)
