"""A command-line flag value holding a space separated list with quoting."""

from __future__ import annotations


class ListValue:
    """Flag value that splits on spaces, keeping quoted spans together.

    Quotes are kept in the resulting items; a single quote inside double
    quotes (or the reverse) is treated as an ordinary character.
    """

    def __init__(self, value: str = "") -> None:
        self._value = value

    def set(self, value: str) -> None:
        """Replace the raw flag text."""
        self._value = value

    def __str__(self) -> str:
        return self._value

    def __repr__(self) -> str:
        return f"ListValue({self._value!r})"

    def is_empty(self) -> bool:
        """Return True when no text has been given."""
        return self._value == ""

    def get(self) -> list[str]:
        """Split the text into items.

        Raises ValueError when a quote is left unpaired.
        """
        if self.is_empty():
            return []

        items: list[str] = []
        current: list[str] = []
        in_double = False
        in_single = False
        for char in self._value:
            if char == '"' and not in_single:
                in_double = not in_double
            if char == "'" and not in_double:
                in_single = not in_single
            if char == " " and not in_double and not in_single:
                items.append("".join(current))
                current = []
                continue
            current.append(char)

        if in_double or in_single:
            raise ValueError("malformed ListValue contains an unpaired escaped quote")
        items.append("".join(current))
        return items