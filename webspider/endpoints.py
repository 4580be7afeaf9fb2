"""Regex-based extraction of endpoints from page bodies and scripts."""

from __future__ import annotations

import re

_PAGE_BODY_REGEX = re.compile(
    r"(?:"
    r"("
    r"(?:[\.]{1,2}/[A-Za-z0-9\-_/\\?&@\.?=%]+)"
    r"|(https?://[A-Za-z0-9_\-\.]+([\.]{0,2})?\/[A-Za-z0-9\-_/\\?&@\.?=%]+)"
    r"|(/[A-Za-z0-9\-_/\\?&@\.%]+\.(aspx?|action|cfm|cgi|do|pl|css|x?html?|js(p|on)?|pdf|php5?|py|rss))"
    r"|([A-Za-z0-9\-_?&@\.%]+/[A-Za-z0-9/\\\-_?&@\.%]+\.(aspx?|action|cfm|cgi|do|pl|css|x?html?|js(p|on)?|pdf|php5?|py|rss))"
    r")"
    r")",
    re.ASCII,
)

_RELATIVE_ENDPOINTS_REGEX = re.compile(
    r"(?:\"|'|\s)"
    r"("
    r"((https?://[A-Za-z0-9_\-\.]+(:\d{1,5})?)+([\.]{1,2})?/[A-Za-z0-9/\-_\.\\%]+([\?|#][^\"']+)?)"
    r"|((\.{1,2}/)?[a-zA-Z0-9\-_/\\%]+\.(aspx?|js(on|p)?|html|php5?|html|action|do)([\?|#][^\"']+)?)"
    r"|((\.{0,2}/)[a-zA-Z0-9\-_/\\%]+(/|\\)[a-zA-Z0-9\-_]{3,}([\?|#][^\"|']+)?)"
    r"|((\.{0,2})[a-zA-Z0-9\-_/\\%]{3,}/)"
    r")"
    r"(?:\"|'|\s)",
    re.ASCII,
)


def _unique_matches(pattern: re.Pattern[str], data: str) -> list[str]:
    return list(dict.fromkeys(match.group(1) for match in pattern.finditer(data)))


def extract_body_endpoints(data: str) -> list[str]:
    """Return the distinct endpoints found in a page body, in order of appearance."""
    return _unique_matches(_PAGE_BODY_REGEX, data)


def extract_relative_endpoints(data: str) -> list[str]:
    """Return the distinct quoted endpoints found in script code, in order of appearance."""
    return _unique_matches(_RELATIVE_ENDPOINTS_REGEX, data)