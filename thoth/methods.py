"""HTTP request methods (RFC 7231 and RFC 5789)."""

from __future__ import annotations

from enum import Enum


class HttpMethod(Enum):
    """The standard request methods."""

    GET = "GET"
    HEAD = "HEAD"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"
    CONNECT = "CONNECT"
    OPTIONS = "OPTIONS"
    TRACE = "TRACE"
    PATCH = "PATCH"

    def __str__(self) -> str:
        return self.value


def parse_method(name: str) -> HttpMethod | str:
    """Return the standard method called ``name``, or ``name`` itself as a custom method.

    Method names are case-sensitive, so only exact matches become standard methods.
    """
    try:
        return HttpMethod(name)
    except ValueError:
        return name