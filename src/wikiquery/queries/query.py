"""The query builder owning a request's parameter table."""

import logging
from typing import ClassVar, Self

import httpx

from wikiquery.errors import ErrorKind, QueryError
from wikiquery.params import WikiParams
from wikiquery.queries.all_categories import AllCategoriesQuery
from wikiquery.queries.category_members import CategoryMembersQuery
from wikiquery.queries.pages import PagesQuery
from wikiquery.queries.table import ParamTable
from wikiquery.responses.contexts import ContinueBlock

logger = logging.getLogger(__name__)

ACTION = "query"
DEFAULT_FORMAT = "json"
DEFAULT_FORMAT_VERSION = "2"


class Query:
    """Builds one `action=query` request from any number of sub-queries.

    Sub-queries are views bound to this query's table; attach them one at a
    time and finish each chain before starting the next. Their `list` and
    `prop` identities combine through the pipe merge rule::

        query = Query()
        query.all_categories().ac_min("1").ac_from("Lists_of_colors")
        query.category_members().cm_title("Category:Lists_of_colors")
        query.request_target()  # ...list=allcategories|categorymembers...

    Parameter values are not percent-encoded; pass pre-encoded values.
    """

    __slots__: ClassVar[tuple[str, str]] = ("_params", "_wiki")

    _params: ParamTable
    _wiki: WikiParams

    def __init__(self, wiki: WikiParams | None = None) -> None:
        self._params = ParamTable()
        self._wiki = wiki or WikiParams()

    @property
    def params(self) -> ParamTable:
        return self._params

    @property
    def wiki(self) -> WikiParams:
        return self._wiki

    def all_categories(self) -> AllCategoriesQuery:
        """Attach an allcategories list."""
        return AllCategoriesQuery(self._params)

    def category_members(self) -> CategoryMembersQuery:
        """Attach a categorymembers list."""
        return CategoryMembersQuery(self._params)

    def pages(self) -> PagesQuery:
        """Attach a page set; add prop areas on the returned view."""
        return PagesQuery(self._params)

    def format(self, value: str) -> Self:
        """Set the output format.

        If never called, `request_target` falls back to `format=json`.
        """
        self._params.set("format", value)
        return self

    def request_target(self) -> str:
        """Finalize defaults and serialize the table into path and query.

        `format` and `formatversion` are defaulted only when unset;
        `action` is always forced to `query`.
        """
        _ = self._params.set_default("format", DEFAULT_FORMAT)
        _ = self._params.set_default("formatversion", DEFAULT_FORMAT_VERSION)
        self._params.set("action", ACTION)
        return f"{self._wiki.api_path}?{self._params.to_query_string()}"

    def uri(self) -> str:
        """Absolute URL of the finalized request."""
        return f"{self._wiki.base_url}{self.request_target()}"

    def build(self) -> httpx.Request:
        """Assemble a GET request.

        Raises `QueryError` with `ErrorKind.BUILD` when the assembled URL is
        not well-formed.
        """
        uri = self.uri()
        try:
            request = httpx.Request("GET", uri)
        except httpx.InvalidURL as e:
            msg = f"Invalid request target {uri!r}: {e}"
            raise QueryError(msg, kind=ErrorKind.BUILD, source=e) from e

        logger.debug("Built request %s", uri)
        return request

    def continue_query(self, continue_block: ContinueBlock | None) -> Self:
        """Thread continuation tokens into the next round.

        Writes `continue` and every present per-module token, overwriting
        earlier tokens. A None block is a no-op: the result set is complete
        and this query should not be sent again.
        """
        if continue_block is None:
            return self

        tokens = continue_block.tokens()
        for key, value in tokens.items():
            self._params.set(key, value)

        logger.debug("Merged continuation tokens %s", tokens)
        return self
