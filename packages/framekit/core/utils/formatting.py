from __future__ import annotations

from collections.abc import Mapping
from typing import Any


def summarize_state(state: Mapping[str, Any]) -> str:
    """One-line summary of a dumped frame state.

    Sequence fields are reported by length, nested mappings are elided and
    floats are shown to three decimals. The ``frame`` key is skipped.
    """
    parts = []
    for key, value in state.items():
        if key == "frame":
            continue
        if isinstance(value, (list, tuple)):
            parts.append(f"{key}={len(value)}")
        elif isinstance(value, Mapping):
            parts.append(f"{key}={{...}}")
        elif isinstance(value, float):
            parts.append(f"{key}={value:.3f}")
        else:
            parts.append(f"{key}={value}")
    return ", ".join(parts)
