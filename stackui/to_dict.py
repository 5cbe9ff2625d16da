"""Flatten a record into a mapping of field names to their text."""

from __future__ import annotations

import dataclasses
from typing import Any


def _text(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def to_dict(obj: Any) -> dict[str, tuple[str, str]]:
    """Map each field of a dataclass instance to its text and an empty note."""
    if not dataclasses.is_dataclass(obj) or isinstance(obj, type):
        raise TypeError("to_dict works on dataclass instances only")
    return {f.name: (_text(getattr(obj, f.name)), "") for f in dataclasses.fields(obj)}