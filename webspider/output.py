"""Writing crawl results to the screen, output files and response stores."""

from __future__ import annotations

import hashlib
import json
import re
import shutil
import threading
from dataclasses import dataclass, field
from pathlib import Path
from typing import IO, Any
from urllib.parse import urlsplit

from webspider.custom_fields import (
    CustomFieldConfig,
    init_custom_field_config_file,
    load_custom_fields,
    validate_custom_field_names,
)
from webspider.fields import (
    DEFAULT_STORE_FIELDS_DIRECTORY,
    FieldError,
    format_field,
    store_fields,
    validate_field_names,
)
from webspider.result import ErrorRecord, Result

DEFAULT_RESPONSE_DIR = "webspider_response"
INDEX_FILE = "index.txt"

_DECOLORIZER = re.compile(r"\x1B\[[0-9;]*[a-zA-Z]")
_BLUE = "\x1b[34m"
_GREEN = "\x1b[32m"
_RESET = "\x1b[0m"


class OutputError(Exception):
    """Output could not be set up or written."""


@dataclass
class OutputOptions:
    """Configuration of the output writer."""

    colors: bool = False
    json: bool = False
    verbose: bool = False
    store_response: bool = False
    omit_raw: bool = False
    omit_body: bool = False
    output_file: str = ""
    fields: str = ""
    store_fields: str = ""
    store_response_dir: str = ""
    field_config: str = ""
    error_log_file: str = ""
    match_regex: list[re.Pattern[str]] = field(default_factory=list)
    filter_regex: list[re.Pattern[str]] = field(default_factory=list)
    store_fields_directory: str = DEFAULT_STORE_FIELDS_DIRECTORY


class _FileWriter:
    """Buffered text file that terminates every record with a newline."""

    def __init__(self, path: str | Path) -> None:
        self._handle: IO[str] | None = open(path, "w", encoding="utf-8")

    def write(self, data: str) -> None:
        if self._handle is None:
            raise OutputError("write to closed file")
        self._handle.write(data)
        self._handle.write("\n")

    def close(self) -> None:
        if self._handle is not None:
            self._handle.flush()
            self._handle.close()
            self._handle = None


def response_hash(url: str) -> str:
    """Return the SHA-1 hex digest used to name a stored response."""
    return hashlib.sha1(url.encode("utf-8")).hexdigest()


def format_response(result: Result) -> str:
    """Return the stored form of a request/response exchange."""
    raw_response = result.response.raw if result.response is not None else ""
    return f"{result.request.url}\n\n\n{result.request.raw}\n\n{raw_response}"


def _response_host(url: str) -> str:
    try:
        return urlsplit(url).netloc
    except ValueError as exc:
        raise OutputError(f"could not parse url {url}: {exc}") from exc


def _response_file_name(directory: Path, host: str, url: str) -> Path:
    folder = directory / host
    folder.mkdir(parents=True, exist_ok=True)
    return folder / f"{response_hash(url)}.txt"


class StandardWriter:
    """Writes results to stdout and optional files; usable as a context manager."""

    def __init__(self, options: OutputOptions) -> None:
        self._fields = options.fields
        self._json = options.json
        self._verbose = options.verbose
        self._colors = options.colors
        self._omit_raw = options.omit_raw
        self._omit_body = options.omit_body
        self._match_regex = list(options.match_regex or ())
        self._filter_regex = list(options.filter_regex or ())
        self._store_response = options.store_response
        self._store_response_dir = Path(options.store_response_dir or DEFAULT_RESPONSE_DIR)
        self._store_fields: list[str] = []
        self._store_fields_directory = Path(options.store_fields_directory)
        self._output_file: _FileWriter | None = None
        self._error_file: _FileWriter | None = None
        self._lock = threading.Lock()

        config = options.field_config or str(init_custom_field_config_file())
        validate_custom_field_names(config)
        self._custom_fields: dict[str, CustomFieldConfig] = load_custom_fields(
            config, f"{options.fields},{options.store_fields}"
        )

        if options.fields:
            try:
                validate_field_names(options.fields, self._custom_fields)
            except FieldError as exc:
                raise OutputError(f"could not validate fields: {exc}") from exc
        if options.store_fields:
            self._store_fields_directory.mkdir(parents=True, exist_ok=True)
            try:
                validate_field_names(options.store_fields, self._custom_fields)
            except FieldError as exc:
                raise OutputError(f"could not validate store fields: {exc}") from exc
            self._store_fields = options.store_fields.split(",")

        if options.output_file:
            self._output_file = self._open(options.output_file, "could not create output file")
        if options.store_response:
            shutil.rmtree(self._store_response_dir, ignore_errors=True)
            self._store_response_dir.mkdir(parents=True, exist_ok=True)
            self._open(self._store_response_dir / INDEX_FILE, "could not create index file").close()
        if options.error_log_file:
            self._error_file = self._open(options.error_log_file, "could not create error file")

    @staticmethod
    def _open(path: str | Path, message: str) -> _FileWriter:
        try:
            return _FileWriter(path)
        except OSError as exc:
            raise OutputError(f"{message}: {exc}") from exc

    def _paint(self, text: str, color: str) -> str:
        return f"{color}{text}{_RESET}" if self._colors else text

    def _format_screen(self, result: Result) -> str:
        if self._fields:
            lines = []
            for item in format_field(result, self._fields):
                prefix = f"[{self._paint(item.field, _BLUE)}] " if self._verbose else ""
                lines.append(prefix + item.value)
            return "\n".join(lines)

        request = result.request
        parts = []
        if self._verbose and request.tag:
            parts.append(f"[{self._paint(request.tag, _BLUE)}] ")
        if self._verbose and request.method:
            parts.append(f"[{self._paint(request.method, _GREEN)}] ")
        parts.append(request.url)
        if self._verbose and request.body:
            parts.append(f" [{request.body}]")
        return "".join(parts)

    def _format_json(self, result: Result) -> str:
        if result.request.custom_fields:
            return ""
        return json.dumps(result.to_dict())

    def _matches(self, result: Result) -> bool:
        if not self._match_regex:
            return True
        return any(pattern.search(result.request.url) for pattern in self._match_regex)

    def _filtered(self, result: Result) -> bool:
        return any(pattern.search(result.request.url) for pattern in self._filter_regex)

    def write(self, result: Result | None) -> None:
        """Show a result and record it in the configured files."""
        if result is None:
            return
        if self._store_fields:
            store_fields(
                result, self._store_fields, self._custom_fields, self._store_fields_directory
            )
        if not self._matches(result) or self._filtered(result):
            return

        if self._omit_raw:
            result.request.raw = ""
            if result.response is not None:
                result.response.raw = ""
        if self._omit_body and result.has_response():
            result.response.body = ""

        data = self._format_json(result) if self._json else self._format_screen(result)
        if not data:
            return

        with self._lock:
            print(data)
            if self._output_file is not None:
                text = data if self._json else _DECOLORIZER.sub("", data)
                try:
                    self._output_file.write(text)
                except OSError as exc:
                    raise OutputError(f"could not write to output: {exc}") from exc

        if self._store_response and result.has_response():
            self._write_response(result)

    def _write_response(self, result: Result) -> None:
        url = result.response.url or result.request.url
        try:
            target = _response_file_name(self._store_response_dir, _response_host(url), url)
            response_file = _FileWriter(target)
        except (OSError, OutputError):
            return
        try:
            self._update_index(result)
            response_file.write(format_response(result))
        except (OSError, OutputError) as exc:
            raise OutputError(f"could not store response: {exc}") from exc
        finally:
            response_file.close()

    def _update_index(self, result: Result) -> None:
        url = result.request.url
        name = _response_file_name(self._store_response_dir, _response_host(url), url)
        line = f"{name} {url} ({result.response.status})\n"
        with open(self._store_response_dir / INDEX_FILE, "a", encoding="utf-8") as index:
            index.write(line)

    def write_error(self, error: ErrorRecord) -> None:
        """Append an error record as JSON to the error log, if one is set."""
        data = json.dumps(error.to_dict())
        with self._lock:
            if self._error_file is not None:
                try:
                    self._error_file.write(data)
                except OSError as exc:
                    raise OutputError(f"write to error file: {exc}") from exc

    def close(self) -> None:
        """Flush and close the output and error files."""
        if self._output_file is not None:
            self._output_file.close()
        if self._error_file is not None:
            self._error_file.close()

    def __enter__(self) -> "StandardWriter":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()