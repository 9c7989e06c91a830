"""HTTP(S) URLs: parsing by RFC 3986 rules and formatting back to text."""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from thoth.query_params import QueryParams

_SCHEMES = ("http:", "https:")
_PORT = re.compile(r"-?[0-9]+")
_MAX_PORT = 65535


@dataclass
class HttpUrl:
    """A parsed ``http`` or ``https`` URL.

    ``port`` is 0 when the URL names none. ``fragment`` is normally ignored
    on the server side.
    """

    scheme: str = ""
    user: str = ""
    host: str = ""
    path: str = ""
    port: int = 0
    query: QueryParams = field(default_factory=QueryParams)
    fragment: str = ""

    @classmethod
    def from_url(cls, url: str) -> HttpUrl:
        """Parse ``url``. Raises ValueError when it is not a well-formed HTTP URL."""
        if not url or not url[0].isalpha():
            raise ValueError(f"not a URL: {url!r}")
        if not url.startswith(_SCHEMES):
            raise ValueError(f"scheme must be http or https: {url!r}")

        # URI = scheme ":" hier-part [ "?" query ] [ "#" fragment ]
        scheme, _, rest = url.partition(":")
        query = ""
        fragment = ""
        delimiter_at = next((i for i, char in enumerate(rest) if char in "?#"), None)
        if delimiter_at is None:
            hier_part = rest
        else:
            hier_part = rest[:delimiter_at]
            delimiter = rest[delimiter_at]
            rest = rest[delimiter_at + 1 :]
            if delimiter == "#":
                fragment = rest
            else:
                query, _, fragment = rest.partition("#")

        # In HTTP, "//" authority path-abempty is mandatory.
        if not hier_part.startswith("//"):
            raise ValueError(f"missing authority: {url!r}")
        authority = hier_part[2:]

        path = ""
        path_at = authority.find("/")
        if path_at == 0:
            raise ValueError(f"empty authority: {url!r}")
        if path_at > 0:
            authority, path = authority[:path_at], authority[path_at:]

        # authority = [ userinfo "@" ] host [ ":" port ]
        user, at, host_port = authority.partition("@")
        if not at:
            user, host_port = "", authority

        host, colon, raw_port = host_port.partition(":")
        port = 0
        if colon:
            if not _PORT.fullmatch(raw_port):
                raise ValueError(f"invalid port: {raw_port!r}")
            port = int(raw_port)
            if not 0 <= port <= _MAX_PORT:
                raise ValueError(f"port out of range: {port}")

        if not host:
            raise ValueError(f"missing host: {url!r}")

        return cls(
            scheme=scheme,
            user=user,
            host=host,
            path=path,
            port=port,
            query=QueryParams.parse(query),
            fragment=fragment,
        )

    def origin(self) -> str:
        """The scheme, host and port only, e.g. ``https://host:8080``."""
        return format(self, "o")

    def __format__(self, spec: str) -> str:
        if spec not in ("", "o", "O"):
            raise ValueError(f"invalid format specifier for HttpUrl: {spec!r}")
        origin_only = bool(spec)

        parts = [f"{self.scheme}://"]
        if not origin_only and self.user:
            parts.append(f"{self.user}@")
        parts.append(self.host)
        if self.port != 0:
            parts.append(f":{self.port}")
        if origin_only:
            return "".join(parts)

        parts.append(self.path)
        if len(self.query):
            parts.append(f"?{self.query}")
        if self.fragment:
            parts.append(f"#{self.fragment}")
        return "".join(parts)

    def __str__(self) -> str:
        return format(self, "")