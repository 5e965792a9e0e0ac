"""Building and validating client requests from command-line options."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Union

from wins.listvalue import ListValue


class RequestError(ValueError):
    """Raised when command-line options do not form a valid request."""


@dataclass(frozen=True)
class HnsGetNetworkRequest:
    """Look up an HNS network by name or by subnet CIDR; exactly one is set."""

    name: Optional[str] = None
    address: Optional[str] = None


@dataclass(frozen=True)
class NetworkGetRequest:
    """Look up a network adapter by name or address; at most one is set."""

    name: Optional[str] = None
    address: Optional[str] = None


@dataclass(frozen=True)
class RouteAddRequest:
    """Add routes to the given destination CIDRs."""

    addresses: list[str] = field(default_factory=list)


def build_hns_get_network_request(
    name: Optional[str], address: Optional[str]
) -> HnsGetNetworkRequest:
    """Require exactly one of ``name`` and ``address``; the address must be a CIDR."""
    name = name or ""
    address = address or ""
    if not name and not address:
        raise RequestError("specifies --name or --address")
    if name and address:
        raise RequestError("--name and --address could not use together")
    if name:
        return HnsGetNetworkRequest(name=name)
    if "/" not in address:
        raise RequestError("--address should be a CIDR format")
    return HnsGetNetworkRequest(address=address)


def build_network_get_request(name: Optional[str], address: Optional[str]) -> NetworkGetRequest:
    """Allow at most one of ``name`` and ``address``."""
    name = name or ""
    address = address or ""
    if name and address:
        raise RequestError("--name and --address could not use together")
    if name:
        return NetworkGetRequest(name=name)
    if address:
        return NetworkGetRequest(address=address)
    return NetworkGetRequest()


def build_route_add_request(addresses: Union[ListValue, str]) -> RouteAddRequest:
    """Parse the address list; bare addresses become ``/32`` routes."""
    value = addresses if isinstance(addresses, ListValue) else ListValue(addresses)
    if value.is_empty():
        raise RequestError("--addresses is required")
    try:
        items = value.get()
    except ValueError as exc:
        raise RequestError(f"failed to parse --addresses: {exc}") from exc
    return RouteAddRequest(
        addresses=[item if "/" in item else f"{item}/32" for item in items]
    )