"""Building blocks for a web crawler: queues, scope, deduplication, extraction and output."""

__version__ = "0.1.0"