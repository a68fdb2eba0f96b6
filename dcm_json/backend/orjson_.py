"""`JSONBackend` for the `orjson`-library."""

from typing import Any

from dcm_json.jsonable import JSONable
from .interface import JSONBackend


class ORJSONBackend(JSONBackend):
    """
    Adapter for `orjson` (https://github.com/ijl/orjson).

    `orjson` encodes to `bytes`; results are decoded as UTF-8.
    """

    NAME = "orjson"
    MODULE = "orjson"
    DISTRIBUTION = "orjson"

    @property
    def decode_errors(self):
        return (self._module.JSONDecodeError,)

    def dumps(self, value: JSONable, indent: bool = False) -> str:
        option = self._module.OPT_INDENT_2 if indent else 0
        return self._module.dumps(value, option=option).decode("utf-8")

    def loads(self, text: str | bytes) -> Any:
        return self._module.loads(text)
