"""Small helpers for URLs found in HTML attributes and HTTP headers."""

from __future__ import annotations

from typing import Iterable, Mapping
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

_WEB_USER_AGENT = (
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 11_1) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/87.0.4280.88 Safari/537.36"
)

_SRCSET_WHITESPACE = " \t\n\r\f"


def is_url(url: str) -> bool:
    """Return True if ``url`` parses and has a hostname."""
    try:
        return bool(urlsplit(url).hostname)
    except ValueError:
        return False


def parse_srcset_tag(value: str) -> list[str]:
    """Return the image URLs of a ``srcset`` attribute value, in order."""
    urls: list[str] = []
    pos = 0
    size = len(value)
    while True:
        while pos < size and (value[pos] in _SRCSET_WHITESPACE or value[pos] == ","):
            pos += 1
        if pos >= size:
            return urls
        start = pos
        while pos < size and value[pos] not in _SRCSET_WHITESPACE:
            pos += 1
        url = value[start:pos]
        if url.endswith(","):
            url = url.rstrip(",")
        else:
            depth = 0
            while pos < size:
                char = value[pos]
                pos += 1
                if char == "(":
                    depth += 1
                elif char == ")" and depth:
                    depth -= 1
                elif char == "," and not depth:
                    break
        if url:
            urls.append(url)


def parse_link_tag(value: str) -> list[str]:
    """Return the ``<...>`` URLs of a Link header value."""
    urls = []
    for chunk in value.split(","):
        for piece in chunk.split(";"):
            piece = piece.strip(" ")
            if piece.startswith("<") and piece.endswith(">"):
                urls.append(piece.strip("<>"))
    return urls


def parse_refresh_tag(value: str) -> str:
    """Return the URL of a refresh header or meta value, or an empty string."""
    chunks = value.split("url=")
    if len(chunks) < 2:
        return ""
    chunk = chunks[1]
    if chunk.endswith(";"):
        chunk = chunk[:-1]
    return chunk


def web_user_agent() -> str:
    """Return the desktop Chrome user agent used for requests."""
    return _WEB_USER_AGENT


def flatten_headers(headers: Mapping[str, Iterable[str]]) -> dict[str, str]:
    """Join multi-valued headers with ``;``."""
    return {key: ";".join(values) for key, values in headers.items()}


def replace_all_query_param(request_url: str, value: str) -> str:
    """Blank out every query parameter value of ``request_url``.

    Parameter names are kept, sorted, each with an empty value. The
    ``value`` argument is accepted for compatibility and not used. An
    unparsable URL is returned unchanged.
    """
    try:
        parts = urlsplit(request_url)
    except ValueError:
        return request_url
    keys = {
        key
        for key, _ in parse_qsl(parts.query, keep_blank_values=True)
        if key
    }
    query = urlencode([(key, "") for key in sorted(keys)])
    return urlunsplit(parts._replace(query=query))