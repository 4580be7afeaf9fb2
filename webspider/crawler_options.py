"""Shared crawler helpers built from user options."""

from __future__ import annotations

import threading
import time
from dataclasses import dataclass
from urllib.parse import urlsplit

from webspider.extensions import Validator
from webspider.filters import Filter, SimpleFilter
from webspider.options import Options
from webspider.output import OutputOptions, StandardWriter
from webspider.scope import ScopeManager


class RateLimiter:
    """Allows at most ``max_count`` calls to :meth:`take` per ``period`` seconds."""

    def __init__(self, max_count: int, period: float) -> None:
        if max_count <= 0:
            raise ValueError("rate limit count must be positive")
        if period <= 0:
            raise ValueError("rate limit period must be positive")
        self.max_count = int(max_count)
        self.period = float(period)
        self._lock = threading.Lock()
        self._window_start = time.monotonic()
        self._taken = 0

    def take(self) -> None:
        """Block until another call is allowed within the current window."""
        with self._lock:
            while True:
                now = time.monotonic()
                if now - self._window_start >= self.period:
                    self._window_start = now
                    self._taken = 0
                if self._taken < self.max_count:
                    self._taken += 1
                    return
                time.sleep(max(self._window_start + self.period - now, 0.0))


@dataclass
class CrawlerOptions:
    """Helpers shared by a crawl: output, limits, validators and filters."""

    options: Options
    output_writer: StandardWriter
    extensions_validator: Validator | None
    unique_filter: Filter
    scope_manager: ScopeManager | None
    rate_limit: RateLimiter | None = None

    def close(self) -> None:
        """Release the filter and close the output writer."""
        self.unique_filter.close()
        self.output_writer.close()

    def validate_path(self, path: str) -> bool:
        """Return True if the path's extension is allowed."""
        if self.extensions_validator is not None:
            return self.extensions_validator.validate_path(path)
        return True

    def validate_scope(self, abs_url: str, root_hostname: str) -> bool:
        """Return True if ``abs_url`` is in scope for the crawl of ``root_hostname``.

        Raises ValueError if the URL cannot be parsed.
        """
        parsed = urlsplit(abs_url)
        if self.scope_manager is not None:
            return self.scope_manager.validate(parsed, root_hostname)
        return True


def create_crawler_options(options: Options) -> CrawlerOptions:
    """Build the crawler helpers described by ``options``."""
    extensions_validator = Validator(options.extensions_match, options.extension_filter)
    try:
        scope_manager = ScopeManager(
            options.scope, options.out_of_scope, options.field_scope, options.no_scope
        )
    except ValueError as exc:
        raise ValueError(f"could not create scope manager: {exc}") from exc

    output_writer = StandardWriter(
        OutputOptions(
            colors=not options.no_colors,
            json=options.json,
            verbose=options.verbose,
            store_response=options.store_response,
            output_file=options.output_file,
            fields=options.fields,
            store_fields=options.store_fields,
            store_response_dir=options.store_response_dir,
            omit_raw=options.omit_raw,
            omit_body=options.omit_body,
            field_config=options.field_config,
            error_log_file=options.error_log_file,
            match_regex=list(options.match_regex),
            filter_regex=list(options.filter_regex),
        )
    )

    rate_limit = None
    if options.rate_limit > 0:
        rate_limit = RateLimiter(options.rate_limit, 1.0)
    elif options.rate_limit_minute > 0:
        rate_limit = RateLimiter(options.rate_limit_minute, 60.0)

    return CrawlerOptions(
        options=options,
        output_writer=output_writer,
        extensions_validator=extensions_validator,
        unique_filter=SimpleFilter(),
        scope_manager=scope_manager,
        rate_limit=rate_limit,
    )