"""Shared utilities for framekit."""

from framekit.core.utils.formatting import summarize_state
from framekit.core.utils.json import read_json, write_json
from framekit.core.utils.math import clamp, lerp

__all__ = [
    "clamp",
    "lerp",
    "read_json",
    "summarize_state",
    "write_json",
]
