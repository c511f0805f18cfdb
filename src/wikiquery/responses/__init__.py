"""Typed response models and decoding.

See https://www.mediawiki.org/wiki/API:Query for the response layout.
"""

from wikiquery.responses.contexts import ContinueBlock
from wikiquery.responses.datatypes import (
    ActionPermission,
    ActionResult,
    Category,
    CategoryMember,
    DetailedAction,
    Page,
    Protection,
)
from wikiquery.responses.decode import decode_action_permission, decode_query, decode_response
from wikiquery.responses.envelopes import (
    ErrorInfo,
    ErrorResponse,
    QueryBlock,
    QueryResponse,
    WarningBlock,
    Warnings,
)

__all__ = [
    # Contexts (runtime state)
    "ContinueBlock",
    # Records
    "ActionPermission",
    "ActionResult",
    "Category",
    "CategoryMember",
    "DetailedAction",
    "Page",
    "Protection",
    # Envelopes
    "ErrorInfo",
    "ErrorResponse",
    "QueryBlock",
    "QueryResponse",
    "WarningBlock",
    "Warnings",
    # Decoding
    "decode_action_permission",
    "decode_query",
    "decode_response",
]
