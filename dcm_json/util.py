"""Module providing helper functions for `dcm_json`."""

from pathlib import Path


def make_path(path: str | Path) -> Path:
    """
    A convenience-function returning a `Path`-object created from path.

    Keyword arguments:
    path -- filesystem path either as str or Path
    """

    if isinstance(path, str):
        return Path(path)
    return path


def qualified_name(type_) -> str:
    """Returns a readable name for the given type (or type hint)."""
    return getattr(type_, "__qualname__", None) or str(type_)
