"""User-facing crawler configuration."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any, Callable, Optional


@dataclass
class Options:
    """Options that control a crawl."""

    urls: list[str] = field(default_factory=list)
    scope: list[str] = field(default_factory=list)
    out_of_scope: list[str] = field(default_factory=list)
    no_scope: bool = False
    display_out_scope: bool = False
    extensions_match: list[str] = field(default_factory=list)
    extension_filter: list[str] = field(default_factory=list)
    max_depth: int = 0
    body_read_size: int = 0
    timeout: int = 0
    crawl_duration: int = 0
    delay: int = 0
    rate_limit: int = 0
    retries: int = 0
    rate_limit_minute: int = 0
    concurrency: int = 0
    parallelism: int = 0
    form_config: str = ""
    proxy: str = ""
    strategy: str = ""
    field_scope: str = ""
    output_file: str = ""
    known_files: str = ""
    fields: str = ""
    store_fields: str = ""
    field_config: str = ""
    no_colors: bool = False
    json: bool = False
    silent: bool = False
    verbose: bool = False
    version: bool = False
    scrape_js_responses: bool = False
    custom_headers: list[str] = field(default_factory=list)
    headless: bool = False
    automatic_form_fill: bool = False
    form_extraction: bool = False
    use_installed_chrome: bool = False
    show_browser: bool = False
    headless_optional_arguments: list[str] = field(default_factory=list)
    headless_no_sandbox: bool = False
    system_chrome_path: str = ""
    on_result: Optional[Callable[[Any], None]] = None
    store_response: bool = False
    store_response_dir: str = ""
    omit_raw: bool = False
    omit_body: bool = False
    chrome_data_dir: str = ""
    headless_no_incognito: bool = False
    xhr_extraction: bool = False
    health_check: bool = False
    error_log_file: str = ""
    resolvers: list[str] = field(default_factory=list)
    output_match_regex: list[str] = field(default_factory=list)
    output_filter_regex: list[str] = field(default_factory=list)
    filter_regex: list[re.Pattern[str]] = field(default_factory=list)
    match_regex: list[re.Pattern[str]] = field(default_factory=list)
    disable_update_check: bool = False
    ignore_query_params: bool = False
    debug: bool = False

    def parse_custom_headers(self) -> dict[str, str]:
        """Return ``name: value`` custom headers as a dict."""
        headers = {}
        for entry in self.custom_headers:
            name, sep, value = entry.partition(":")
            if sep:
                headers[name.strip(" ")] = value.strip(" ")
        return headers

    def parse_headless_optional_arguments(self) -> dict[str, str]:
        """Return ``key=value`` browser arguments, skipping blank keys or values."""
        arguments = {}
        for entry in self.headless_optional_arguments:
            key, sep, value = entry.partition("=")
            key, value = key.strip(), value.strip()
            if sep and key and value:
                arguments[key] = value
        return arguments