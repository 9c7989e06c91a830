"""URL query parameters: keys mapped to lists of values, kept in key order."""

from __future__ import annotations

from collections.abc import Iterator, Mapping, Sequence

from thoth.encoding import decode


def _split(text: str, separator: str) -> list[str]:
    return text.split(separator) if text else []


class QueryParams:
    """Query parameters, each key holding a list of values.

    Keys are iterated in sorted order; ``params[key]`` creates an empty entry
    when the key is missing.
    """

    def __init__(self, initial: Mapping[str, Sequence[str]] | None = None):
        self._elements: dict[str, list[str]] = {
            key: list(values) for key, values in (initial or {}).items()
        }

    @classmethod
    def parse(cls, text: str) -> QueryParams:
        """Parse ``key=v1,v2&key2=v3`` as it is, without decoding."""
        params = cls()
        for raw_param in _split(text, "&"):
            key, _, raw_values = raw_param.partition("=")
            params[key] = _split(raw_values, ",")
        return params

    @classmethod
    def parse_decoded(cls, text: str) -> QueryParams:
        """Percent-decode ``text`` and parse it. Raises ValueError if decoding fails."""
        return cls.parse(decode(text))

    def __contains__(self, key: object) -> bool:
        return key in self._elements

    def value_exists(self, key: str, value: str) -> bool:
        """Whether ``value`` is among the values of ``key``."""
        return value in self._elements.get(key, ())

    def add(self, key: str, value: str) -> None:
        """Append ``value`` to ``key``, creating the key if needed."""
        self._elements.setdefault(key, []).append(value)

    def remove(self, key: str, value: str) -> bool:
        """Remove every occurrence of ``value`` from ``key``; True if any was removed."""
        values = self._elements.get(key)
        if values is None:
            return False
        kept = [v for v in values if v != value]
        removed = len(kept) != len(values)
        values[:] = kept
        return removed

    def remove_key(self, key: str) -> bool:
        """Remove ``key`` and all its values; True if it existed."""
        return self._elements.pop(key, None) is not None

    def set_if_null(self, key: str, value: str) -> bool:
        """Set ``key`` to ``[value]`` if it is absent; True if it was set."""
        if key in self._elements:
            return False
        self._elements[key] = [value]
        return True

    def get(self, key: str) -> list[str] | None:
        """The live list of values for ``key``, or None without creating it."""
        return self._elements.get(key)

    def __getitem__(self, key: str) -> list[str]:
        return self._elements.setdefault(key, [])

    def __setitem__(self, key: str, values: Sequence[str]) -> None:
        self._elements[key] = list(values)

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._elements))

    def __reversed__(self) -> Iterator[str]:
        return iter(sorted(self._elements, reverse=True))

    def items(self) -> Iterator[tuple[str, list[str]]]:
        """Yield ``(key, values)`` pairs in key order."""
        for key in self:
            yield key, self._elements[key]

    def __len__(self) -> int:
        return len(self._elements)

    def clear(self) -> None:
        """Remove all keys."""
        self._elements.clear()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, QueryParams):
            return NotImplemented
        return self._elements == other._elements

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return "&".join(f"{key}={','.join(values)}" for key, values in self.items())

    def __repr__(self) -> str:
        return f"{type(self).__name__}({dict(self.items())!r})"