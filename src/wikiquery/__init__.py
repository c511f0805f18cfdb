"""Query builder and response decoder for the MediaWiki Query API."""

from wikiquery.errors import ErrorKind, QueryError
from wikiquery.params import WikiParams
from wikiquery.protocols import DataInput, Provider, Transport
from wikiquery.queries import ParamTable, Query
from wikiquery.responses import ContinueBlock, ErrorResponse, QueryResponse, decode_response

__all__ = [
    "ContinueBlock",
    "DataInput",
    "ErrorKind",
    "ErrorResponse",
    "ParamTable",
    "Provider",
    "Query",
    "QueryError",
    "QueryResponse",
    "Transport",
    "WikiParams",
    "decode_response",
]
