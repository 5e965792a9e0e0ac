"""Small helpers for assembling command definitions."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any, Optional


def join_flags(flag_slices: Iterable[Any]) -> list[Any]:
    """Return the given flags collected into a new list."""
    return list(flag_slices)


def chain_funcs(*args: Optional[Callable[[Any], Any]]) -> Optional[Callable[[Any], None]]:
    """Combine hooks into one that runs them in order.

    ``None`` entries are skipped. An exception raised by any hook stops the
    chain and propagates. With no hooks at all, ``None`` is returned.
    """
    if not args:
        return None

    funcs = tuple(args)

    def chained(context: Any) -> None:
        for func in funcs:
            if func is not None:
                func(context)

    return chained