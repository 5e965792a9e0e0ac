"""One-line summaries of served RPC calls and the log level each deserves."""

from __future__ import annotations

import logging
import posixpath
from datetime import datetime, timedelta, timezone
from enum import Enum
from typing import Optional

_LEVEL_BY_CODE = {
    "OK": logging.INFO,
    "Canceled": logging.INFO,
    "Unknown": logging.ERROR,
    "InvalidArgument": logging.INFO,
    "DeadlineExceeded": logging.WARNING,
    "NotFound": logging.INFO,
    "AlreadyExists": logging.INFO,
    "PermissionDenied": logging.WARNING,
    "Unauthenticated": logging.INFO,
    "ResourceExhausted": logging.WARNING,
    "FailedPrecondition": logging.WARNING,
    "Aborted": logging.WARNING,
    "OutOfRange": logging.WARNING,
    "Unimplemented": logging.ERROR,
    "Internal": logging.ERROR,
    "Unavailable": logging.WARNING,
    "DataLoss": logging.ERROR,
}


class CallKind(Enum):
    """The kind of RPC call; the value is the label used in the log line."""

    STREAM = "Stream"
    UNARY = "Unary "


def code_to_level(code: str) -> int:
    """Return the logging level for a status code name; unknown codes log as errors."""
    return _LEVEL_BY_CODE.get(code, logging.ERROR)


def _dir(full_method: str) -> str:
    slash = full_method.rfind("/")
    head = full_method[: slash + 1]
    if not head:
        return "."
    cleaned = posixpath.normpath(head)
    if cleaned.startswith("//"):
        cleaned = "/" + cleaned.lstrip("/")
    return cleaned


def _base(full_method: str) -> str:
    if full_method == "":
        return "."
    stripped = full_method.rstrip("/")
    if stripped == "":
        return "/"
    return stripped[stripped.rfind("/") + 1 :]


def _fraction(value: int, precision: int) -> str:
    scale = 10**precision
    whole, rest = divmod(value, scale)
    digits = f"{rest:0{precision}d}".rstrip("0")
    return f"{whole}.{digits}" if digits else str(whole)


def _format_duration(duration: timedelta) -> str:
    nanos = (duration // timedelta(microseconds=1)) * 1000
    if nanos == 0:
        return "0s"
    sign = "-" if nanos < 0 else ""
    nanos = abs(nanos)
    if nanos < 1_000:
        return f"{sign}{nanos}ns"
    if nanos < 1_000_000:
        return f"{sign}{_fraction(nanos, 3)}µs"
    if nanos < 1_000_000_000:
        return f"{sign}{_fraction(nanos, 6)}ms"

    seconds_part = _fraction(nanos % 60_000_000_000, 9) + "s"
    minutes = nanos // 60_000_000_000
    if minutes == 0:
        return sign + seconds_part
    hours, minutes = divmod(minutes, 60)
    prefix = f"{hours}h" if hours else ""
    return f"{sign}{prefix}{minutes}m{seconds_part}"


def _format_rfc3339(moment: datetime) -> str:
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    stamp = moment.strftime("%Y-%m-%dT%H:%M:%S")
    offset = moment.utcoffset() or timedelta(0)
    if offset == timedelta(0):
        return stamp + "Z"
    sign = "+" if offset > timedelta(0) else "-"
    minutes = abs(int(offset.total_seconds())) // 60
    return f"{stamp}{sign}{minutes // 60:02d}:{minutes % 60:02d}"


def format_call_log(
    kind: CallKind,
    full_method: str,
    duration: timedelta,
    code: str,
    message: Optional[str] = None,
    deadline: Optional[datetime] = None,
) -> str:
    """Describe a finished call in one line.

    ``message`` is the error message of a failed call and is left out when
    ``None``; a naive ``deadline`` is taken as UTC.
    """
    parts = [f"[GRPC - {kind.value}] {{ {code} }},"]
    service = _dir(full_method)[1:]
    method = _base(full_method)
    parts.append(f" {service} - {method}, cost {_format_duration(duration)}")
    if deadline is not None:
        parts.append(", request deadline " + _format_rfc3339(deadline))
    if message is not None:
        parts.append(": " + message)
    return "".join(parts)