"""Error types for query building, transport and decoding."""

from enum import StrEnum
from typing import TYPE_CHECKING, final

if TYPE_CHECKING:
    from wikiquery.responses.envelopes import ErrorResponse


class ErrorKind(StrEnum):
    """Classification of query errors."""

    BUILD = "build"
    TRANSPORT = "transport"
    DECODE = "decode"
    SERVER = "server"


@final
class QueryError(Exception):
    """Base error for all query operations.

    Server-reported errors carry the decoded `ErrorResponse` in `response`.
    """

    __slots__ = ("kind", "message", "response", "source")

    def __init__(
        self,
        message: str,
        kind: ErrorKind = ErrorKind.DECODE,
        source: BaseException | None = None,
        response: "ErrorResponse | None" = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.kind = kind
        self.source = source
        self.response = response

    def __repr__(self) -> str:
        return f"QueryError({self.message!r}, kind={self.kind!r})"
