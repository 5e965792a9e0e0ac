"""Writing command results as JSON."""

from __future__ import annotations

import dataclasses
import json
from typing import Any, TextIO


class OutputError(Exception):
    """Raised when a result cannot be encoded or written."""


def _encode_default(obj: Any) -> Any:
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return dataclasses.asdict(obj)
    raise TypeError(f"object of type {type(obj).__name__} is not JSON serializable")


def write_json(stream: TextIO, obj: Any) -> None:
    """Write ``obj`` to ``stream`` as JSON.

    ``None`` and empty bytes write nothing; bytes are written as text
    unchanged, anything else is encoded as compact JSON.
    """
    if obj is None:
        return

    if isinstance(obj, (bytes, bytearray)):
        if not obj:
            return
        text = bytes(obj).decode("utf-8", errors="replace")
    else:
        try:
            text = json.dumps(obj, separators=(",", ":"), sort_keys=True, default=_encode_default)
        except (TypeError, ValueError) as exc:
            raise OutputError(f"failed to encode result: {exc}") from exc

    try:
        stream.write(text)
    except OSError as exc:
        raise OutputError(f"failed to output result: {exc}") from exc