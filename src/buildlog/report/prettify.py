"""Compact ``key=value`` rendering for log lines."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any


def prettify(mapping: Mapping[str, Any]) -> str:
    """Render ``{"a": 1, "b": "x"}`` as ``"a=1 b=x"``, keeping mapping order."""
    return " ".join(f"{key}={value}" for key, value in mapping.items())
