"""Percent-encoding of text (RFC 3986, section 2.1)."""

from __future__ import annotations

import string

_UNRESERVED = frozenset((string.ascii_letters + string.digits + "-_.~").encode("ascii"))
_HEX_DIGITS = frozenset(string.hexdigits)


def encode(text: str) -> str:
    """Percent-encode every byte of ``text`` that is not an unreserved character."""
    return "".join(
        chr(byte) if byte in _UNRESERVED else f"%{byte:02X}"
        for byte in text.encode("utf-8", "surrogateescape")
    )


def decode(text: str) -> str:
    """Decode percent-escapes and ``+`` in ``text``.

    Raises ValueError when a ``%`` is not followed by two hexadecimal digits.
    """
    buffer = bytearray()
    chars = iter(enumerate(text))
    for index, char in chars:
        if char == "%":
            pair = text[index + 1 : index + 3]
            if len(pair) < 2 or not set(pair) <= _HEX_DIGITS:
                raise ValueError(f"malformed percent-escape at position {index}")
            buffer.append(int(pair, 16))
            next(chars)
            next(chars)
        elif char == "+":
            buffer += b" "
        else:
            buffer += char.encode("utf-8", "surrogateescape")
    return buffer.decode("utf-8", "surrogateescape")