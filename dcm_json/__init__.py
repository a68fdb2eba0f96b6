from .jsonable import JSONable, JSONObject
from .backend import (
    JSONBackend,
    BackendNotAvailableError,
    load_backend,
)
from .converter import ReferenceLoopHandling
from .serializer import JSONSerializer
from .config import SerializationConfig
from .serialization import (
    create_json_serializer,
    reset_json_serializer,
    serialize,
    serialize_to_file,
    deserialize,
    deserialize_from_file,
    format_json_string,
)


__all__ = [
    "JSONable", "JSONObject",
    "JSONBackend", "BackendNotAvailableError", "load_backend",
    "ReferenceLoopHandling",
    "JSONSerializer",
    "SerializationConfig",
    "create_json_serializer", "reset_json_serializer",
    "serialize", "serialize_to_file",
    "deserialize", "deserialize_from_file",
    "format_json_string",
]
