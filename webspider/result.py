"""Crawl results and error records."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Iterable


def _compact(items: Iterable[tuple[str, Any]]) -> dict[str, Any]:
    return {key: value for key, value in items if value not in (None, "", 0, [], {})}


@dataclass
class Request:
    """A request made or discovered during a crawl."""

    method: str = ""
    url: str = ""
    body: str = ""
    tag: str = ""
    source: str = ""
    depth: int = 0
    headers: dict[str, str] = field(default_factory=dict)
    raw: str = ""
    custom_fields: dict[str, list[str]] = field(default_factory=dict)


@dataclass
class Response:
    """The response received for a request.

    ``status`` is the HTTP status line; it stays ``None`` when no HTTP
    response was actually received.
    """

    status_code: int = 0
    status: str | None = None
    url: str = ""
    headers: dict[str, str] = field(default_factory=dict)
    body: str = ""
    raw: str = ""


def _request_dict(request: Request) -> dict[str, Any]:
    return _compact(
        [
            ("method", request.method),
            ("endpoint", request.url),
            ("body", request.body),
            ("tag", request.tag),
            ("source", request.source),
            ("depth", request.depth),
            ("headers", dict(request.headers)),
            ("raw", request.raw),
            ("custom_fields", {k: list(v) for k, v in request.custom_fields.items()}),
        ]
    )


def _response_dict(response: Response) -> dict[str, Any]:
    return _compact(
        [
            ("status_code", response.status_code),
            ("headers", dict(response.headers)),
            ("body", response.body),
            ("raw", response.raw),
        ]
    )


@dataclass
class Result:
    """One crawled item."""

    timestamp: datetime | None = None
    request: Request = field(default_factory=Request)
    response: Response | None = None
    error: str = ""

    def has_response(self) -> bool:
        """Return True if an HTTP response was received."""
        return self.response is not None and self.response.status is not None

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-ready mapping with empty members left out."""
        data: dict[str, Any] = {}
        if self.timestamp is not None:
            data["timestamp"] = self.timestamp.isoformat()
        if self.request is not None:
            data["request"] = _request_dict(self.request)
        if self.response is not None:
            data["response"] = _response_dict(self.response)
        if self.error:
            data["error"] = self.error
        return data


@dataclass
class ErrorRecord:
    """A failed request, as written to the error log."""

    timestamp: datetime | None = None
    endpoint: str = ""
    source: str = ""
    error: str = ""

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-ready mapping with empty members left out."""
        return _compact(
            [
                ("timestamp", self.timestamp.isoformat() if self.timestamp else None),
                ("endpoint", self.endpoint),
                ("source", self.source),
                ("error", self.error),
            ]
        )