from __future__ import annotations

import asyncio
import json

import httpx
import pytest
from helpers import ALL_CATEGORIES_RESPONSE, ERROR_RESPONSE, make_provider

from wikiquery.errors import ErrorKind, QueryError
from wikiquery.params import WikiParams
from wikiquery.protocols import DataInput, Provider, Transport
from wikiquery.providers.http import WikiProvider
from wikiquery.responses import ContinueBlock, QueryResponse

FINAL_PAGE = json.dumps({
    "batchcomplete": True,
    "query": {"allcategories": [{"category": "Lists_and_galleries_of_flags"}]},
})


def _paginated_handler(seen: list[httpx.Request]):
    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        if "accontinue" in request.url.params:
            return httpx.Response(200, text=FINAL_PAGE)
        return httpx.Response(200, text=ALL_CATEGORIES_RESPONSE)

    return handler


async def _collect(
    provider: WikiProvider, max_rounds: int | None = None
) -> list[tuple[QueryResponse, ContinueBlock | None]]:
    query = provider.query()
    query.all_categories().ac_limit("4")
    try:
        return [item async for item in provider.read(query, max_rounds=max_rounds)]
    finally:
        await provider.disconnect()


def test_provider_satisfies_protocols() -> None:
    provider = make_provider(lambda request: httpx.Response(200, text=FINAL_PAGE))
    assert isinstance(provider, Transport)
    assert isinstance(provider, DataInput)
    assert isinstance(provider, Provider)
    asyncio.run(provider.disconnect())


def test_read_follows_continuation_until_complete() -> None:
    seen: list[httpx.Request] = []
    provider = make_provider(_paginated_handler(seen))

    rounds = asyncio.run(_collect(provider))

    assert len(rounds) == 2
    first, first_ctx = rounds[0]
    last, last_ctx = rounds[1]
    assert first_ctx is not None
    assert first_ctx.ac_continue == "Lists_and_galleries_of_flags"
    assert first.query.all_categories is not None
    assert last_ctx is None
    assert last.is_complete

    assert len(seen) == 2
    assert "continue" not in seen[0].url.params
    assert seen[1].url.params["continue"] == "-||"
    assert seen[1].url.params["accontinue"] == "Lists_and_galleries_of_flags"
    assert seen[1].url.params["list"] == "allcategories"
    assert seen[1].url.params["action"] == "query"


def test_read_stops_at_max_rounds() -> None:
    seen: list[httpx.Request] = []
    provider = make_provider(_paginated_handler(seen))

    rounds = asyncio.run(_collect(provider, max_rounds=1))

    assert len(rounds) == 1
    assert rounds[0][1] is not None
    assert len(seen) == 1


def test_requests_carry_user_agent() -> None:
    seen: list[httpx.Request] = []
    provider = make_provider(_paginated_handler(seen))

    _ = asyncio.run(_collect(provider))

    assert seen[0].headers["User-Agent"] == WikiParams().user_agent


def test_send_raises_server_error() -> None:
    provider = make_provider(lambda request: httpx.Response(200, text=ERROR_RESPONSE))

    async def run() -> None:
        query = provider.query()
        query.all_categories()
        try:
            _ = await provider.send(query)
        finally:
            await provider.disconnect()

    with pytest.raises(QueryError) as excinfo:
        asyncio.run(run())

    assert excinfo.value.kind is ErrorKind.SERVER
    assert excinfo.value.response is not None
    assert excinfo.value.response.served_by == "mw1234"


def test_http_status_is_transport_error() -> None:
    provider = make_provider(lambda request: httpx.Response(503, text="unavailable"))

    async def run() -> bytes:
        try:
            return await provider.get("/w/api.php?action=query")
        finally:
            await provider.disconnect()

    with pytest.raises(QueryError) as excinfo:
        _ = asyncio.run(run())

    assert excinfo.value.kind is ErrorKind.TRANSPORT
    assert isinstance(excinfo.value.source, httpx.HTTPStatusError)


def test_connection_failure_is_transport_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    provider = make_provider(handler)

    async def run() -> QueryResponse:
        query = provider.query()
        query.pages().titles("Death").description()
        try:
            return await provider.send(query)
        finally:
            await provider.disconnect()

    with pytest.raises(QueryError) as excinfo:
        _ = asyncio.run(run())

    assert excinfo.value.kind is ErrorKind.TRANSPORT


def test_get_returns_raw_body() -> None:
    provider = make_provider(lambda request: httpx.Response(200, content=b"raw"))

    async def run() -> bytes:
        try:
            return await provider.get("/w/api.php?action=query&format=json")
        finally:
            await provider.disconnect()

    assert asyncio.run(run()) == b"raw"


def test_connect_and_disconnect() -> None:
    async def run() -> WikiProvider:
        async with await WikiProvider.connect(WikiParams(host="www.mediawiki.org")) as provider:
            assert provider.query().wiki.host == "www.mediawiki.org"
        return provider

    _ = asyncio.run(run())
