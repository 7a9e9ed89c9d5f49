"""Engine diagnostics helpers."""

from lunar_engine.diagnostics.json_codec import dumps_bytes, dumps_text, loads

__all__ = ["dumps_bytes", "dumps_text", "loads"]
