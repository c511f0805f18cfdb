"""Decoding of raw response bodies into typed results.

Decoding is purely structural: a payload either matches the expected shape
or fails with `ErrorKind.DECODE`. Nothing is retried or partially recovered.
"""

import logging

from pydantic import JsonValue, TypeAdapter, ValidationError

from wikiquery.errors import ErrorKind, QueryError
from wikiquery.responses.datatypes import ActionPermission, DetailedAction
from wikiquery.responses.envelopes import ErrorResponse, QueryResponse

logger = logging.getLogger(__name__)

_PAYLOAD = TypeAdapter(dict[str, JsonValue])
_ACTION_PERMISSION: TypeAdapter[bool | DetailedAction] = TypeAdapter(ActionPermission)


def decode_response(raw: bytes | str) -> QueryResponse | ErrorResponse:
    """Decode a response body.

    Returns an `ErrorResponse` when the body carries a top-level `error`
    object, otherwise a `QueryResponse`.
    """
    try:
        payload = _PAYLOAD.validate_json(raw)
    except ValidationError as e:
        msg = f"Response is not a JSON object: {e}"
        raise QueryError(msg, kind=ErrorKind.DECODE, source=e) from e

    model = ErrorResponse if "error" in payload else QueryResponse
    try:
        decoded = model.model_validate(payload)
    except ValidationError as e:
        msg = f"Failed to decode {model.__name__}: {e}"
        raise QueryError(msg, kind=ErrorKind.DECODE, source=e) from e

    if isinstance(decoded, QueryResponse) and decoded.warnings is not None:
        for module, text in decoded.warnings.messages().items():
            logger.warning("Server warning for %s: %s", module, text)
    return decoded


def decode_query(raw: bytes | str) -> QueryResponse:
    """Decode a response body, raising on server-reported errors."""
    decoded = decode_response(raw)
    if isinstance(decoded, ErrorResponse):
        msg = f"Server error {decoded.error.code}: {decoded.error.info}"
        raise QueryError(msg, kind=ErrorKind.SERVER, response=decoded)
    return decoded


def decode_action_permission(value: object) -> bool | DetailedAction:
    """Decode one tested-action value.

    Tries a strict boolean, then a `DetailedAction`; fails otherwise.
    """
    try:
        return _ACTION_PERMISSION.validate_python(value)
    except ValidationError as e:
        msg = f"Action permission is neither a boolean nor a code/text record: {value!r}"
        raise QueryError(msg, kind=ErrorKind.DECODE, source=e) from e
