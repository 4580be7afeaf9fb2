"""Selection of URL parts and custom values for output."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Container, Iterable
from urllib.parse import parse_qsl, unquote, urlencode, urlsplit, urlunsplit

from webspider.domains import effective_tld_plus_one
from webspider.result import Result

logger = logging.getLogger(__name__)

FIELD_NAMES = (
    "url",
    "path",
    "fqdn",
    "rdn",
    "rurl",
    "qurl",
    "qpath",
    "file",
    "ufile",
    "key",
    "value",
    "kv",
    "dir",
    "udir",
)

DEFAULT_STORE_FIELDS_DIRECTORY = "webspider_field"

_ALWAYS_SHOWN = frozenset({"url", "fqdn", "rdn", "rurl"})
_QUERY_FIELDS = frozenset({"key", "value", "kv"})


@dataclass(frozen=True)
class FieldOutput:
    """One named value selected for output."""

    field: str
    value: str


class FieldError(ValueError):
    """An unknown field name was requested."""


@dataclass(frozen=True)
class _ParsedURL:
    scheme: str
    host: str
    hostname: str
    path: str
    text: str
    query: dict[str, list[str]]

    @property
    def root_url(self) -> str:
        return f"{self.scheme}://{self.host}"

    @property
    def rdn(self) -> str:
        try:
            return effective_tld_plus_one(self.hostname)
        except ValueError:
            return ""

    @property
    def encoded_query(self) -> str:
        return urlencode([(key, value) for key in sorted(self.query) for value in self.query[key]])

    @property
    def file_name(self) -> str:
        if not self.path or self.path == "/":
            return ""
        stripped = self.path.rstrip("/")
        base = stripped.rsplit("/", 1)[-1] if stripped else "/"
        return base if "." in base else ""

    @property
    def directory(self) -> str:
        if not self.path or self.path == "/" or "/" not in self.path[1:]:
            return ""
        return self.path[: self.path[1:].rfind("/") + 2]


def _parse(url: str) -> _ParsedURL | None:
    try:
        parts = urlsplit(url)
        pairs = parse_qsl(parts.query, keep_blank_values=True)
    except ValueError:
        return None
    host = parts.netloc.rpartition("@")[2]
    if host.startswith("["):
        hostname = host[1:].partition("]")[0]
    else:
        hostname = host.partition(":")[0]
    query: dict[str, list[str]] = {}
    for key, value in pairs:
        query.setdefault(key, []).append(value)
    return _ParsedURL(
        scheme=parts.scheme,
        host=host,
        hostname=hostname,
        path=unquote(parts.path),
        text=urlunsplit(parts),
        query=query,
    )


def _query_items(parsed: _ParsedURL, name: str) -> list[str]:
    if name == "key":
        return list(parsed.query)
    if name == "value":
        return [value for values in parsed.query.values() for value in values]
    return [f"{key}={value}" for key, values in parsed.query.items() for value in values]


def _field_value(parsed: _ParsedURL, result: Result, name: str) -> str:
    if name == "url":
        return result.request.url
    if name == "path":
        return parsed.path
    if name == "fqdn":
        return parsed.hostname
    if name == "rdn":
        return parsed.rdn
    if name == "rurl":
        return parsed.root_url
    if name == "ufile":
        return parsed.text if parsed.file_name else ""
    if name == "file":
        return parsed.file_name
    if name == "dir":
        return parsed.directory
    if name == "udir":
        directory = parsed.directory
        return parsed.root_url + directory if directory else ""
    if name == "qpath":
        return f"{parsed.path}?{parsed.encoded_query}" if parsed.query else ""
    if name == "qurl":
        return parsed.text if parsed.query else ""
    if name in _QUERY_FIELDS:
        return "\n".join(_query_items(parsed, name))
    return ""


def validate_field_names(names: str, custom_fields: Iterable[str] | None = None) -> None:
    """Raise FieldError unless every comma separated name is a known field."""
    known = set(FIELD_NAMES)
    known.update(custom_fields or ())
    for part in names.split(","):
        if part not in known:
            raise FieldError(f"invalid field {part} specified: {names}")


def custom_field_values(result: Result) -> list[FieldOutput]:
    """Return every custom field value extracted for the result's request."""
    return [
        FieldOutput(name, value)
        for name, values in result.request.custom_fields.items()
        for value in values
    ]


def format_field(result: Result, fields: str) -> list[FieldOutput]:
    """Return the values of the comma separated ``fields`` for a result."""
    parsed = _parse(result.request.url)
    if parsed is None:
        return []
    output: list[FieldOutput] = []
    for name in (item for item in fields.split(",") if item):
        if name in _QUERY_FIELDS:
            output.extend(FieldOutput(name, value) for value in _query_items(parsed, name))
        elif name == "qurl":
            if parsed.query:
                output.append(FieldOutput(name, result.request.url))
        elif name in _ALWAYS_SHOWN:
            output.append(FieldOutput(name, _field_value(parsed, result, name)))
        elif name in FIELD_NAMES:
            value = _field_value(parsed, result, name)
            if value:
                output.append(FieldOutput(name, value))
        else:
            output.extend(custom_field_values(result))
    return output


def value_for_field(result: Result, field: str) -> str:
    """Return the value of one field for a result, values joined by newlines."""
    parsed = _parse(result.request.url)
    if parsed is None:
        return ""
    return _field_value(parsed, result, field)


def _append_to_field_file(directory: Path, parsed: _ParsedURL, field: str, data: str) -> None:
    target = directory / f"{parsed.scheme}_{parsed.hostname}_{field}.txt"
    try:
        with open(target, "a", encoding="utf-8") as handle:
            handle.write(data)
            handle.write("\n")
    except OSError:
        return


def store_fields(
    result: Result,
    fields: Iterable[str],
    custom_fields: Container[str] = (),
    directory: str | Path = DEFAULT_STORE_FIELDS_DIRECTORY,
) -> None:
    """Append field values of a result to per-host, per-field files."""
    parsed = _parse(result.request.url)
    if parsed is None:
        logger.warning("store_fields: failed to parse url %s", result.request.url)
        return
    directory = Path(directory)
    for field in fields:
        value = _field_value(parsed, result, field)
        if value:
            _append_to_field_file(directory, parsed, field, value)
        if field in custom_fields:
            for item in custom_field_values(result):
                _append_to_field_file(directory, parsed, item.field, item.value)