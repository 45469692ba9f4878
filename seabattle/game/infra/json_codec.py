"""JSON text encoding for structured log records."""

from __future__ import annotations

from typing import Any

import orjson


def dumps_text(payload: Any) -> str:
    """Serialize payload to a single-line JSON string.

    Values orjson cannot encode natively fall back to ``str()``.
    """
    return orjson.dumps(payload, default=str).decode("utf-8")
