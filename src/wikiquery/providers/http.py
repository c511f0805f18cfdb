"""MediaWiki API provider using httpx."""

import logging
from collections.abc import AsyncIterator
from typing import ClassVar, Self

import httpx

from wikiquery.errors import ErrorKind, QueryError
from wikiquery.params import WikiParams
from wikiquery.queries.query import Query
from wikiquery.responses.contexts import ContinueBlock
from wikiquery.responses.decode import decode_query
from wikiquery.responses.envelopes import QueryResponse

logger = logging.getLogger(__name__)


class WikiProvider:
    """Sends queries to a MediaWiki API and pages through the results.

    Implements Provider[WikiParams], Transport and
    DataInput[Query, QueryResponse, ContinueBlock]. No request is retried;
    retry and backoff policy belongs to the caller.
    """

    __slots__: ClassVar[tuple[str, str]] = ("_client", "_params")

    _client: httpx.AsyncClient
    _params: WikiParams

    def __init__(self, client: httpx.AsyncClient, params: WikiParams) -> None:
        self._client = client
        self._params = params

    @classmethod
    async def connect(cls, params: WikiParams | None = None) -> Self:
        """Create the HTTP client for `params`."""
        params = params or WikiParams()
        client = httpx.AsyncClient(
            base_url=params.base_url,
            headers={"User-Agent": params.user_agent},
            timeout=params.timeout,
        )
        return cls(client, params)

    async def disconnect(self) -> None:
        """Close the HTTP client."""
        await self._client.aclose()

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.disconnect()

    def query(self) -> Query:
        """Create an empty query against this provider's wiki."""
        return Query(self._params)

    async def get(self, target: str) -> bytes:
        """Send a GET for a request target and return the raw body."""
        try:
            request = self._client.build_request("GET", target)
        except httpx.InvalidURL as e:
            msg = f"Invalid request target {target!r}: {e}"
            raise QueryError(msg, kind=ErrorKind.BUILD, source=e) from e
        return await self._fetch(request)

    async def send(self, query: Query) -> QueryResponse:
        """Run a single round of `query`.

        Raises `QueryError` for build, transport, decode and server errors.
        """
        built = query.build()
        # Rebuild through the client so its default headers apply.
        body = await self._fetch(self._client.build_request("GET", built.url))
        return decode_query(body)

    async def read(
        self, query: Query, max_rounds: int | None = None
    ) -> AsyncIterator[tuple[QueryResponse, ContinueBlock | None]]:
        """Send `query` and follow continuations until the results are complete.

        Yields tuples of (response, context) for each round. The context is
        the continuation block of that round, already merged into `query`
        before the next round is sent; it is None on the final round.
        `max_rounds` stops early even if more data is available.
        """
        rounds = 0
        while True:
            response = await self.send(query)
            rounds += 1
            context = response.continue_block
            logger.debug("Fetched round %d (complete=%s)", rounds, context is None)
            yield (response, context)

            if context is None:
                break
            if max_rounds is not None and rounds >= max_rounds:
                logger.debug("Stopping after %d rounds with more data available", rounds)
                break
            _ = query.continue_query(context)

    async def _fetch(self, request: httpx.Request) -> bytes:
        try:
            response = await self._client.send(request)
            _ = response.raise_for_status()
        except httpx.HTTPError as e:
            msg = f"Failed to fetch {request.url}: {e}"
            raise QueryError(msg, kind=ErrorKind.TRANSPORT, source=e) from e
        return response.content


Provider = WikiProvider
