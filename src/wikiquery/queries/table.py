"""Flat parameter table serialized into a request's query string."""

from collections.abc import Iterator

PIPE = "|"
"""Separator used by the API for multi-value parameters."""


class ParamTable:
    """Mapping of parameter name to value string.

    Keys are unique and insertion order carries no meaning. `set` overwrites
    a value; `append` merges into an existing value with `PIPE`, so repeated
    calls accumulate a multi-value parameter (e.g. `cmprop=ids|title`) and
    independently attached sub-queries combine into one `list=` value.
    """

    __slots__ = ("_params",)

    def __init__(self, params: dict[str, str] | None = None) -> None:
        self._params: dict[str, str] = dict(params) if params else {}

    def set(self, key: str, value: str) -> None:
        """Store `value` under `key`, replacing any previous value."""
        self._params[key] = value

    def set_default(self, key: str, value: str) -> str:
        """Store `value` only if `key` is unset; return the effective value."""
        return self._params.setdefault(key, value)

    def append(self, key: str, value: str) -> None:
        """Insert `value`, or join it to the existing value with `PIPE`."""
        existing = self._params.get(key)
        if existing is None:
            self._params[key] = value
        else:
            self._params[key] = f"{existing}{PIPE}{value}"

    def get(self, key: str) -> str | None:
        return self._params.get(key)

    def to_query_string(self) -> str:
        """Join all pairs as `key=value` with `&`.

        Values are emitted verbatim; callers pass pre-encoded values.
        """
        return "&".join(f"{key}={value}" for key, value in self._params.items())

    def as_dict(self) -> dict[str, str]:
        return dict(self._params)

    def __contains__(self, key: object) -> bool:
        return key in self._params

    def __len__(self) -> int:
        return len(self._params)

    def __iter__(self) -> Iterator[tuple[str, str]]:
        return iter(self._params.items())

    def __repr__(self) -> str:
        return f"ParamTable({self._params!r})"
