"""
JSON-serialization helpers for strings and files.

The helpers share a single `JSONSerializer` which is created on first
use based on `SerializationConfig`. The external JSON library is only
loaded at that point. Make sure the configured library is installed,
e.g., via
 >>> pip install "dcm-json[orjson]"

All helpers (except `format_json_string`) accept a `throw_exceptions`-
flag. If it is `False`, errors are written to the log and a neutral
result (`None` or `False`) is returned instead.
"""

from typing import Any, Optional
from pathlib import Path
from threading import Lock

from .backend import load_backend
from .config import SerializationConfig
from .logging import Logging
from .serializer import JSONSerializer


_serializer: Optional[JSONSerializer] = None
_serializer_lock = Lock()


def create_json_serializer(
    throw_exceptions: bool = True,
) -> Optional[JSONSerializer]:
    """
    Returns the shared `JSONSerializer`. On first call, the instance is
    created from the current `SerializationConfig`.

    Keyword arguments:
    throw_exceptions -- if `False`, return `None` instead of raising
                        when the JSON library cannot be loaded
                        (default True)
    """
    global _serializer  # pylint: disable=global-statement
    if _serializer is not None:
        return _serializer

    with _serializer_lock:
        if _serializer is not None:
            return _serializer
        try:
            backend = load_backend(SerializationConfig.BACKEND)
        except Exception as exc_info:  # pylint: disable=broad-exception-caught
            Logging.error(f"Unable to create JSON serializer: {exc_info}")
            if throw_exceptions:
                raise
            return None
        _serializer = JSONSerializer(
            backend,
            enums_as_strings=SerializationConfig.ENUMS_AS_STRINGS,
            reference_loop_handling=(
                SerializationConfig.REFERENCE_LOOP_HANDLING
            ),
        )

    return _serializer


def reset_json_serializer() -> None:
    """
    Drop the shared `JSONSerializer`. The next call to
    `create_json_serializer` creates a new instance from the (possibly
    changed) `SerializationConfig`.
    """
    global _serializer  # pylint: disable=global-statement
    with _serializer_lock:
        _serializer = None


def serialize(
    value: Any,
    throw_exceptions: bool = False,
    format_json_output: bool = False,
) -> Optional[str]:
    """
    Returns `value` serialized as JSON-string or `None` on error.

    If `value` is `None`, `None` is returned as well.

    Keyword arguments:
    value -- object to be serialized
    throw_exceptions -- if `True`, errors are raised instead of
                        returning `None`
                        (default False)
    format_json_output -- if `True`, pretty-format output with line
                          breaks and indentation
                          (default False)
    """
    if value is None:
        return None
    serializer = create_json_serializer(throw_exceptions)
    if serializer is None:
        return None
    try:
        return serializer.dumps(value, format_json_output)
    except Exception as exc_info:  # pylint: disable=broad-exception-caught
        Logging.error(f"JSON serialization failed: {exc_info}")
        if throw_exceptions:
            raise
        return None


def serialize_to_file(
    value: Any,
    path: str | Path,
    throw_exceptions: bool = False,
    format_json_output: bool = False,
) -> bool:
    """
    Writes `value` serialized as JSON to the file at `path` (created or
    truncated, UTF-8 encoded by default). Returns `True` on success and
    `False` otherwise.

    Keyword arguments:
    value -- object to be serialized
    path -- target file
    throw_exceptions -- if `True`, errors are raised instead of
                        returning `False`
                        (default False)
    format_json_output -- if `True`, pretty-format output with line
                          breaks and indentation
                          (default False)
    """
    serializer = create_json_serializer(throw_exceptions)
    if serializer is None:
        return False
    try:
        if value is None:
            raise ValueError(f"Refusing to serialize 'None' into '{path}'.")
        serializer.dump(
            value,
            path,
            indent=format_json_output,
            encoding=SerializationConfig.ENCODING,
        )
    except Exception as exc_info:  # pylint: disable=broad-exception-caught
        Logging.error(f"JSON serialization to file failed: {exc_info}")
        if throw_exceptions:
            raise
        return False
    return True


def deserialize(
    json_text: str | bytes,
    type_: Any = None,
    throw_exceptions: bool = False,
) -> Any:
    """
    Returns the object deserialized from `json_text` or `None` on error.

    Keyword arguments:
    json_text -- JSON-document
    type_ -- target type of the result; supports dataclasses, `Enum`s,
             `DataModel`-like types (classmethod `from_json`), and
             parameterized containers (see `binding.bind`)
             (default None; returns plain JSON-types)
    throw_exceptions -- if `True`, errors are raised instead of
                        returning `None`
                        (default False)
    """
    serializer = create_json_serializer(throw_exceptions)
    if serializer is None:
        return None
    try:
        return serializer.loads(json_text, type_)
    except Exception as exc_info:  # pylint: disable=broad-exception-caught
        Logging.error(f"JSON deserialization failed: {exc_info}")
        if throw_exceptions:
            raise
        return None


def deserialize_from_file(
    path: str | Path,
    type_: Any = None,
    throw_exceptions: bool = False,
) -> Any:
    """
    Returns the object deserialized from the file at `path` or `None` on
    error.

    Keyword arguments:
    path -- source file
    type_ -- target type of the result (see `deserialize`)
             (default None; returns plain JSON-types)
    throw_exceptions -- if `True`, errors are raised instead of
                        returning `None`
                        (default False)
    """
    serializer = create_json_serializer(throw_exceptions)
    if serializer is None:
        return None
    try:
        return serializer.load(
            path, type_, encoding=SerializationConfig.ENCODING
        )
    except Exception as exc_info:  # pylint: disable=broad-exception-caught
        Logging.error(f"JSON deserialization from file failed: {exc_info}")
        if throw_exceptions:
            raise
        return None


def format_json_string(json_text: str | bytes) -> str:
    """
    Returns a (single line) JSON-string pretty-formatted with indented
    formatting.

    Raises the backend's decode error on malformed input.

    Keyword arguments:
    json_text -- JSON-document
    """
    return create_json_serializer().format(json_text)
