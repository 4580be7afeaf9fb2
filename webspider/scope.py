"""Crawl scope rules based on hostnames and URL regexes."""

from __future__ import annotations

import ipaddress
import re
from enum import Enum
from typing import Iterable
from urllib.parse import SplitResult, urlsplit

from webspider.domains import domain_rdn_and_dn


class _DnsScopeField(Enum):
    DN = "dn"
    RDN = "rdn"
    FQDN = "fqdn"


def _compile_all(patterns: Iterable[str] | None) -> list[re.Pattern[str]]:
    compiled = []
    for pattern in patterns or ():
        try:
            compiled.append(re.compile(pattern))
        except re.error as exc:
            raise ValueError(f"could not compile regex {pattern}: {exc}") from exc
    return compiled


def _hostname(netloc: str) -> str:
    host = netloc.rpartition("@")[2]
    if host.startswith("["):
        return host[1:].partition("]")[0]
    return host.partition(":")[0]


def _is_ip(hostname: str) -> bool:
    try:
        ipaddress.ip_address(hostname)
    except ValueError:
        return False
    return True


class ScopeManager:
    """Decides whether a URL is in scope for a crawl rooted at a hostname."""

    def __init__(
        self,
        in_scope: Iterable[str] | None,
        out_of_scope: Iterable[str] | None,
        field_scope: str,
        no_scope: bool,
    ) -> None:
        try:
            self.field_scope = _DnsScopeField(field_scope)
        except ValueError:
            raise ValueError(f"invalid dns scope field specified: {field_scope}") from None
        self.no_scope = no_scope
        self.in_scope = _compile_all(in_scope)
        self.out_of_scope = _compile_all(out_of_scope)

    def validate(self, url: str | SplitResult, root_hostname: str) -> bool:
        """Return True if ``url`` matches the host and URL scope rules."""
        if self.no_scope:
            return True
        parsed = url if isinstance(url, SplitResult) else urlsplit(url)
        text = parsed.geturl() if isinstance(url, SplitResult) else url

        dns_validated = self._validate_dns(_hostname(parsed.netloc), root_hostname)
        if self.in_scope or self.out_of_scope:
            return self._validate_url(text) and dns_validated
        return dns_validated

    def _validate_url(self, url: str) -> bool:
        if any(pattern.search(url) for pattern in self.out_of_scope):
            return False
        if not self.in_scope:
            return True
        return any(pattern.search(url) for pattern in self.in_scope)

    def _validate_dns(self, hostname: str, root_hostname: str) -> bool:
        if self.field_scope is _DnsScopeField.FQDN or _is_ip(hostname):
            return hostname.casefold() == root_hostname.casefold()
        rdn, dn = domain_rdn_and_dn(root_hostname)
        if self.field_scope is _DnsScopeField.DN:
            return dn in hostname
        return hostname.endswith(rdn)