"""Restricting which host binaries the process service may start."""

from __future__ import annotations

import ntpath
from collections.abc import Callable, Iterable
from typing import Any

START_METHOD = "/wins.ProcessService/Start"


class InvalidPathError(ValueError):
    """Raised when a process start request names a path outside the whitelist."""

    code = "InvalidArgument"

    def __init__(self, message: str = "invalid path") -> None:
        super().__init__(message)


def _normalize(path: str) -> str:
    return ntpath.normpath(path).lower()


class ProcessPathWhitelist:
    """Set of allowed binary paths, compared cleaned and case-insensitively."""

    def __init__(self, whitelist: Iterable[str]) -> None:
        self._paths = frozenset(_normalize(path) for path in whitelist)

    def __contains__(self, path: object) -> bool:
        return isinstance(path, str) and _normalize(path) in self._paths

    def check(self, full_method: str, request: Any) -> None:
        """Raise InvalidPathError if a start request's path is not allowed.

        Calls to other methods, and requests carrying no path, pass.
        """
        if full_method != START_METHOD:
            return
        path = getattr(request, "path", None)
        if not isinstance(path, str):
            return
        if path not in self:
            raise InvalidPathError()


def process_path_interceptor(
    whitelist: Iterable[str],
) -> Callable[[str, Any, Callable[[Any], Any]], Any]:
    """Return an interceptor that checks requests before passing them on.

    The interceptor is called as ``intercept(full_method, request, handler)``
    and returns what ``handler(request)`` returns.
    """
    guard = ProcessPathWhitelist(whitelist)

    def intercept(full_method: str, request: Any, handler: Callable[[Any], Any]) -> Any:
        guard.check(full_method, request)
        return handler(request)

    return intercept