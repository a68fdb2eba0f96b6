"""`JSONBackend` for the `simplejson`-library."""

from typing import Any

from dcm_json.jsonable import JSONable
from .interface import JSONBackend


class SimpleJSONBackend(JSONBackend):
    """Adapter for `simplejson` (https://github.com/simplejson/simplejson)."""

    NAME = "simplejson"
    MODULE = "simplejson"
    DISTRIBUTION = "simplejson"

    @property
    def decode_errors(self):
        return (self._module.JSONDecodeError,)

    def dumps(self, value: JSONable, indent: bool = False) -> str:
        if indent:
            return self._module.dumps(
                value,
                indent=2,
                separators=(",", ": "),
                ensure_ascii=False,
                ignore_nan=True,
            )
        return self._module.dumps(
            value,
            separators=(",", ":"),
            ensure_ascii=False,
            ignore_nan=True,
        )

    def loads(self, text: str | bytes) -> Any:
        if isinstance(text, (bytes, bytearray)):
            return self._module.loads(text.decode("utf-8"))
        return self._module.loads(text)
