"""Deduplication and cycle detection for crawled URLs and content."""

from __future__ import annotations

import hashlib
import threading
from abc import ABC, abstractmethod
from dataclasses import dataclass

MAX_CHROME_URL_LENGTH = 2097152
MIN_SEQUENCE_LENGTH = 10
MAX_SEQUENCE_COUNT = 10


class Filter(ABC):
    """Deduplication mechanism for the crawler."""

    @abstractmethod
    def close(self) -> None:
        """Release the filter's resources."""

    @abstractmethod
    def unique_url(self, url: str) -> bool:
        """Return True the first time a URL is seen."""

    @abstractmethod
    def unique_content(self, content: bytes | str) -> bool:
        """Return True the first time a piece of content is seen."""

    @abstractmethod
    def is_cycle(self, url: str) -> bool:
        """Return True if the URL looks like a crawl loop."""


@dataclass(frozen=True)
class RepeatingSequence:
    sequence: str
    count: int


def longest_repeating_sequence(text: str) -> RepeatingSequence:
    """Find the longest substring that occurs twice without overlapping.

    The count is the number of non-overlapping occurrences in ``text``.
    """
    size = len(text)
    previous = [0] * (size + 1)
    best_length = 0
    best_end = 0
    for i in range(1, size + 1):
        current = [0] * (size + 1)
        char = text[i - 1]
        for j in range(i + 1, size + 1):
            if char == text[j - 1] and previous[j - 1] < j - i:
                current[j] = previous[j - 1] + 1
                if current[j] > best_length:
                    best_length = current[j]
                    best_end = i
        previous = current
    sequence = text[best_end - best_length:best_end]
    return RepeatingSequence(sequence, text.count(sequence))


class SimpleFilter(Filter):
    """In-memory filter keyed on raw URLs and MD5 digests of content."""

    def __init__(self) -> None:
        self._seen: set[str] = set()
        self._lock = threading.Lock()

    def _first_time(self, key: str) -> bool:
        with self._lock:
            if key in self._seen:
                return False
            self._seen.add(key)
            return True

    def unique_url(self, url: str) -> bool:
        return self._first_time(url)

    def unique_content(self, content: bytes | str) -> bool:
        if isinstance(content, str):
            content = content.encode()
        return self._first_time(hashlib.md5(content).hexdigest())

    def is_cycle(self, url: str) -> bool:
        if len(url) > MAX_CHROME_URL_LENGTH:
            return True
        found = longest_repeating_sequence(url)
        return found.count >= MAX_SEQUENCE_COUNT and len(found.sequence) > MIN_SEQUENCE_LENGTH

    def close(self) -> None:
        with self._lock:
            self._seen.clear()