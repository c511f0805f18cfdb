"""Provider implementations for sending queries.

Each provider module exports a `Provider` class alias for the main provider class.

Available providers:
- http: MediaWiki API over HTTP via httpx
"""

from wikiquery.providers import http

__all__ = [
    "http",
]
