"""Parameter types for endpoint and transport configuration.

Params define where queries are sent and how the transport behaves, while
continuation contexts (see `wikiquery.responses.contexts`) carry the runtime
state needed to fetch the next page.
"""

from pydantic import BaseModel, Field

DEFAULT_USER_AGENT = "wikiquery/0.1 (https://www.mediawiki.org/wiki/API:Query)"


class WikiParams(BaseModel, frozen=True):
    """Endpoint parameters for a MediaWiki installation."""

    scheme: str = "https"
    """URL scheme used for requests."""

    host: str = "en.wikipedia.org"
    """Authority (host and optional port) of the wiki."""

    api_path: str = "/w/api.php"
    """Path of the API entry point."""

    user_agent: str = DEFAULT_USER_AGENT
    """User-Agent header sent with every request."""

    timeout: float = Field(default=30.0, gt=0)
    """Per-request timeout in seconds."""

    @property
    def base_url(self) -> str:
        """Scheme and authority, without a trailing slash."""
        return f"{self.scheme}://{self.host}"
