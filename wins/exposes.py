"""Parsing port expose and publish specifications such as ``TCP:80-81``."""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass

_SIGNED_INT = re.compile(r"[+-]?[0-9]+")
_UNSIGNED_INT = re.compile(r"[0-9]+")
_MAX_PORT = 0xFFFF


class ExposeError(ValueError):
    """Raised when an expose or publish specification cannot be parsed."""


@dataclass(frozen=True)
class ProcessExpose:
    """One port exposed by a started process."""

    protocol: str
    port: int


def _atoi(text: str, expose: str) -> int:
    if not _SIGNED_INT.fullmatch(text):
        raise ExposeError(f"could not parse port {text} from expose {expose}")
    return int(text)


def _port(text: str, publish: str) -> int:
    if not _UNSIGNED_INT.fullmatch(text) or int(text) > _MAX_PORT:
        raise ExposeError(f"could not parse port {text} from expose {publish}")
    return int(text)


def parse_exposes(exposes: Iterable[str]) -> list[ProcessExpose]:
    """Parse ``PROTOCOL:PORT`` or ``PROTOCOL:LOW-HIGH`` items, expanding ranges."""
    result: list[ProcessExpose] = []
    for expose in exposes:
        parts = expose.split(":", 1)
        if len(parts) != 2:
            raise ExposeError(f"could not parse expose {expose}")
        protocol, ports = parts
        bounds = ports.split("-", 1)
        if len(bounds) == 1:
            result.append(ProcessExpose(protocol, _atoi(bounds[0], expose)))
            continue
        low = _atoi(bounds[0], expose)
        high = _atoi(bounds[1], expose)
        if low >= high:
            raise ExposeError(f"could not accept the range {low} - {high} from expose {expose}")
        result.extend(ProcessExpose(protocol, number) for number in range(low, high + 1))
    return result


def parse_publishes(publish_ports: Iterable[str]) -> list[int]:
    """Parse ``TCP:PORT`` or ``TCP:LOW-HIGH`` items into port numbers.

    Only TCP is accepted and ports must fit in 16 bits.
    """
    ports: list[int] = []
    for publish in publish_ports:
        parts = publish.split(":", 1)
        if len(parts) != 2:
            raise ExposeError(f"could not parse publish {parts}")
        protocol, spec = parts
        if protocol != "TCP":
            raise ExposeError(f"unsupported protocol {protocol}, only TCP is supported")
        bounds = spec.split("-", 1)
        if len(bounds) == 1:
            ports.append(_port(bounds[0], publish))
            continue
        low = _port(bounds[0], publish)
        high = _port(bounds[1], publish)
        if low >= high:
            raise ExposeError(f"could not accept the range {low} - {high} from expose {publish}")
        ports.extend(range(low, high + 1))
    return ports