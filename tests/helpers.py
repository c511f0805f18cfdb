"""Shared helpers and recorded API payloads for the test suite."""

from __future__ import annotations

from collections.abc import Callable

import httpx

from wikiquery.params import WikiParams
from wikiquery.providers.http import WikiProvider
from wikiquery.queries import Query


def query_string(query: Query) -> str:
    target = query.request_target()
    _, _, qs = target.partition("?")
    return qs


def assert_query_contains(query: Query, contains: list[str]) -> None:
    qs = query_string(query)
    pairs = qs.split("&")
    for expected in contains:
        assert expected in pairs, f"{expected!r} not in {qs!r}"


def make_provider(handler: Callable[[httpx.Request], httpx.Response]) -> WikiProvider:
    params = WikiParams()
    client = httpx.AsyncClient(
        transport=httpx.MockTransport(handler),
        base_url=params.base_url,
        headers={"User-Agent": params.user_agent},
    )
    return WikiProvider(client, params)


ALL_CATEGORIES_RESPONSE = """{"batchcomplete":true,"continue":{"accontinue":"Lists_and_galleries_of_flags","continue":"-||"},"query":{"allcategories":[{"category":"Lists","size":29,"pages":1,"files":0,"subcats":28},{"category":"Lists American animated television series episode","size":1,"pages":1,"files":0,"subcats":0},{"category":"Lists about Wikipedia","size":6,"pages":6,"files":0,"subcats":0},{"category":"Lists about role-playing games","size":38,"pages":37,"files":0,"subcats":1}]}}"""

CATEGORY_MEMBERS_RESPONSE = """{"batchcomplete":true,"query":{"categorymembers":[{"pageid":37703894,"ns":0,"title":"Lists of colors","sortkey":"0403063f394d4f4d044533042d453f454b4d011501c4dc12","sortkeyprefix":" ","type":"page","timestamp":"2019-01-30T18:32:56Z"},{"pageid":16009151,"ns":0,"title":"List of colors (compact)","sortkey":"082d454147292d4f03063f394d4f044533042d453f454b4d04098c2d454147292d4f098e012501bddc1b","sortkeyprefix":".compact","type":"page","timestamp":"2016-11-03T04:30:16Z"}]}}"""

WARNINGS_RESPONSE = """{"batchcomplete":true,"warnings":{"categorymembers":{"warnings":"Unrecognized value for parameter \\"cmprop\\": I_am_bad_prop.\\nUnrecognized value for parameter \\"cmtype\\": I_am_bad_type."}},"query":{"categorymembers":[]}}"""

ERROR_RESPONSE = """{"error":{"code":"badvalue","info":"Unrecognized value for parameter \\"list\\": nope.","docref":"See https://en.wikipedia.org/w/api.php for API usage."},"servedby":"mw1234"}"""
