"""JSON codec helpers for log export paths."""

from __future__ import annotations

from typing import Any

import orjson


def dumps_bytes(payload: Any, *, pretty: bool = False, sort_keys: bool = False) -> bytes:
    """Serialize payload to UTF-8 JSON bytes."""
    options = 0
    if pretty:
        options |= orjson.OPT_INDENT_2
    if sort_keys:
        options |= orjson.OPT_SORT_KEYS
    # Non-JSON values in log extras fall back to their string form.
    return orjson.dumps(payload, default=str, option=options | orjson.OPT_NON_STR_KEYS)


def dumps_text(payload: Any, *, pretty: bool = False, sort_keys: bool = False) -> str:
    return dumps_bytes(payload, pretty=pretty, sort_keys=sort_keys).decode("utf-8")


def loads(raw: bytes | str) -> Any:
    return orjson.loads(raw)
