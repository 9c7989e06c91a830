"""HTTP header storage: an ordered list of case-insensitive name/value pairs."""

from __future__ import annotations

import string
from collections.abc import Iterable, Iterator, Mapping

from thoth.status import HttpStatusCode, HttpStatusError

_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)
_TOKEN_CHARS = frozenset(string.ascii_letters + string.digits + "!#$%&'*+-.^_`|~")
_DELIMITER = "\r\n"
_WHITESPACE = " \t"

_SINGLE_VALUE = frozenset(
    {
        # Date/time headers
        "date",
        "expires",
        "last-modified",
        "if-modified-since",
        "if-unmodified-since",
        # Numeric headers
        "age",
        "content-length",
        "max-forwards",
        # Location/redirect headers
        "location",
        "refresh",
        # Entity headers
        "etag",
        "server",
        # Authorization
        "authorization",
        "proxy-authorization",
    }
)
_NOT_MERGEABLE = frozenset({"set-cookie", "www-authenticate", "proxy-authenticate"})

DEFAULT_MAX_LENGTH = 1 << 16


def _normalize(key: str) -> str:
    """Lower-case the ASCII letters of a header name."""
    return key.translate(_LOWER)


class HttpHeaders:
    """Headers kept in insertion order, with case-insensitive names.

    Names are stored lower-cased. The class only stores headers; it does not
    check that individual header values are well formed.
    """

    def __init__(self, pairs: Iterable[tuple[str, str]] | Mapping[str, str] | None = None):
        if isinstance(pairs, Mapping):
            pairs = pairs.items()
        self._headers: list[tuple[str, str]] = [
            (_normalize(key), value) for key, value in (pairs or ())
        ]

    @classmethod
    def parse(cls, text: str, max_length: int = DEFAULT_MAX_LENGTH) -> HttpHeaders:
        """Parse raw header lines separated by ``\\r\\n``.

        Raises HttpStatusError with CONTENT_TOO_LARGE when ``text`` is longer
        than ``max_length`` and with BAD_REQUEST when a line is malformed.
        """
        if len(text) > max_length:
            raise HttpStatusError(HttpStatusCode.CONTENT_TOO_LARGE)

        if text.endswith(_DELIMITER * 2):
            text = text[: -2 * len(_DELIMITER)]
        elif text.endswith(_DELIMITER):
            text = text[: -len(_DELIMITER)]

        headers = cls()
        for line in text.split(_DELIMITER) if text else ():
            key, separator, value = line.partition(":")
            if not separator:
                raise HttpStatusError(HttpStatusCode.BAD_REQUEST)
            if not set(key) <= _TOKEN_CHARS:
                raise HttpStatusError(HttpStatusCode.BAD_REQUEST)
            headers.add(key, value.strip(_WHITESPACE))
        return headers

    def _index(self, key: str) -> int | None:
        wanted = _normalize(key)
        return next((i for i, (name, _) in enumerate(self._headers) if name == wanted), None)

    def __contains__(self, key: object) -> bool:
        if isinstance(key, str):
            return self._index(key) is not None
        if isinstance(key, tuple) and len(key) == 2:
            return self.exists(*key)
        return False

    def exists(self, key: str, value: str) -> bool:
        """Whether a header named ``key`` holds exactly ``value``."""
        return (_normalize(key), value) in self._headers

    def add(self, key: str, value: str) -> None:
        """Add a header, merging with an existing one where HTTP allows it.

        Single-value headers replace any existing value; ``Cookie`` values are
        joined with ``"; "`` and other mergeable headers with ``", "``.
        """
        name = _normalize(key)
        if name in _SINGLE_VALUE:
            self.set(name, value)
            return
        if name not in _NOT_MERGEABLE:
            index = self._index(name)
            if index is not None:
                separator = "; " if name == "cookie" else ", "
                existing = self._headers[index][1]
                self._headers[index] = (name, f"{existing}{separator}{value}")
                return
        self._headers.append((name, value))

    def set(self, key: str, value: str) -> None:
        """Replace every header named ``key`` with a single one holding ``value``."""
        name = _normalize(key)
        self._headers = [pair for pair in self._headers if pair[0] != name]
        self._headers.append((name, value))

    def remove(self, key: str, value: str) -> bool:
        """Remove the first header named ``key`` holding ``value``; True if found."""
        try:
            self._headers.remove((_normalize(key), value))
        except ValueError:
            return False
        return True

    def set_if_null(self, key: str, value: str) -> bool:
        """Set ``key`` to ``value`` if it is absent; True if it was set."""
        if key in self:
            return False
        self.set(key, value)
        return True

    def get(self, key: str) -> str | None:
        """The value of the first header named ``key``, or None."""
        index = self._index(key)
        return None if index is None else self._headers[index][1]

    def set_cookies(self) -> list[str]:
        """All ``Set-Cookie`` values, which cannot be comma-joined."""
        return [value for name, value in self._headers if name == "set-cookie"]

    def __getitem__(self, key: str) -> str:
        index = self._index(key)
        if index is None:
            self._headers.append((_normalize(key), ""))
            return ""
        return self._headers[index][1]

    def __setitem__(self, key: str, value: str) -> None:
        name = _normalize(key)
        index = self._index(name)
        if index is None:
            self._headers.append((name, value))
        else:
            self._headers[index] = (name, value)

    def __iter__(self) -> Iterator[tuple[str, str]]:
        return iter(list(self._headers))

    def __reversed__(self) -> Iterator[tuple[str, str]]:
        return reversed(list(self._headers))

    def __len__(self) -> int:
        return len(self._headers)

    def clear(self) -> None:
        """Remove all headers."""
        self._headers.clear()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, HttpHeaders):
            return NotImplemented
        return self._headers == other._headers

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return "".join(f"{name}: {value}{_DELIMITER}" for name, value in self._headers)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._headers!r})"