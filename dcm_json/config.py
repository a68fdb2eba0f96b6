"""Configuration of the shared `JSONSerializer`."""

import os

from .converter import ReferenceLoopHandling


# pylint: disable=invalid-name


class SerializationConfig:
    """
    Configuration class for the shared `JSONSerializer` (see
    `serialization.create_json_serializer`).

    All settings are read from the environment when this module is
    loaded. Changes made at runtime (e.g. by patching the class
    attributes) only take effect after calling
    `serialization.reset_json_serializer`.
    """

    # backend name or import path like "package.module:Class"
    BACKEND = os.environ.get("JSON_SERIALIZATION_BACKEND", "orjson")
    ENUMS_AS_STRINGS = (
        int(os.environ.get("JSON_SERIALIZATION_ENUMS_AS_STRINGS") or 1)
    ) == 1
    REFERENCE_LOOP_HANDLING = ReferenceLoopHandling(
        os.environ.get(
            "JSON_SERIALIZATION_REFERENCE_LOOP_HANDLING", "ignore"
        ).lower()
    )
    ENCODING = os.environ.get("JSON_SERIALIZATION_ENCODING", "utf-8")

    @classmethod
    def json(cls) -> dict:
        """Returns the current settings as `JSONObject`."""
        return {
            "backend": cls.BACKEND,
            "enums_as_strings": cls.ENUMS_AS_STRINGS,
            "reference_loop_handling": cls.REFERENCE_LOOP_HANDLING.value,
            "encoding": cls.ENCODING,
        }
