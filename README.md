# thoth

Small, dependency-free building blocks for working with HTTP messages.

- `thoth.url.HttpUrl` parses `http` and `https` URLs into `scheme`, `user`,
  `host`, `port`, `path`, `query` and `fragment`, and formats them back to
  text. `origin()` (or `format(url, "o")`) gives only scheme, host and port.
- `thoth.query_params.QueryParams` maps each key to a list of values, iterates
  keys in sorted order, parses `a=1,2&b=3` strings with `parse` (or
  `parse_decoded`, which percent-decodes first) and renders them again with
  `str()`. It offers `add`, `remove`, `remove_key`, `set_if_null`, `get`,
  `value_exists`, `items` and `clear`; `params[key]` creates an empty entry
  when the key is missing.
- `thoth.headers.HttpHeaders` stores header fields in insertion order with
  lower-cased, case-insensitive names. `add` merges repeated fields with
  `", "` (`Cookie` with `"; "`), replaces single-value fields such as
  `Content-Length` or `Date`, and keeps `Set-Cookie`, `WWW-Authenticate` and
  `Proxy-Authenticate` as separate entries; `set_cookies()` returns all
  `Set-Cookie` values. `parse` reads raw `\r\n`-separated header lines and
  `str()` writes them back.
- `thoth.encoding` offers percent-encoding with `encode` and `decode`
  (`decode` also turns `+` into a space).
- `thoth.methods.HttpMethod` lists the standard request methods;
  `thoth.methods.parse_method` returns the matching member, or the name
  itself for a custom method.
- `thoth.status.HttpStatusCode` enumerates the status codes, each with a
  readable `phrase`; `thoth.status.HttpStatusError` carries one as `status`.

## Installation

```
pip install .
```

## Usage

```python
from thoth.url import HttpUrl
from thoth.headers import HttpHeaders
from thoth.query_params import QueryParams
from thoth.encoding import encode, decode
from thoth.status import HttpStatusCode, HttpStatusError

url = HttpUrl.from_url("https://user@example.com:8080/path?a=1,2&b=3#top")
print(url.host, url.port, url.path)      # example.com 8080 /path
print(url.query["a"])                    # ['1', '2']
print(url)                               # https://user@example.com:8080/path?a=1,2&b=3#top
print(url.origin())                      # https://example.com:8080

query = QueryParams.parse("x=1&y=2,3")
query.add("x", "4")
print(str(query))                        # x=1,4&y=2,3

print(encode("a b/c"))                   # a%20b%2Fc
print(decode("a+b%21"))                  # a b!

headers = HttpHeaders.parse("Accept: text/html\r\nAccept: application/json")
print(headers.get("accept"))             # text/html, application/json

try:
    HttpHeaders.parse("not a header")
except HttpStatusError as error:
    assert error.status is HttpStatusCode.BAD_REQUEST
```

## Errors

- `HttpUrl.from_url` raises `ValueError` when the text is not a well-formed
  `http` or `https` URL (wrong scheme, no `//` authority, no host, or a port
  that is not a number from 0 to 65535).
- `decode` and `QueryParams.parse_decoded` raise `ValueError` on a `%` not
  followed by two hexadecimal digits.
- `HttpHeaders.parse` raises `HttpStatusError` with `CONTENT_TOO_LARGE` when
  the text is longer than `max_length` (65536 by default) and with
  `BAD_REQUEST` when a line has no `:` or its name holds invalid characters.

## What it does not do

There are no request or response objects, no client and no server: the
package parses and formats the parts of an HTTP message, but it does not
read, build or send whole messages. Host names are taken as they are, without
checking IP address or reg-name syntax.

## Running the tests

```
pip install .[test]
pytest
```