"""Shared behavior for sub-queries writing into a `ParamTable`."""

from typing import ClassVar, Self

from wikiquery.queries.table import ParamTable


class SubQuery:
    """A view over a query's parameter table.

    Subclasses set `module_key`/`module_name` to the identity written on
    construction (e.g. `list=allcategories`). Every builder method appends
    one value under a fixed parameter name and returns `self` for chaining.
    Values are passed through unchecked; the server reports bad values as
    warnings.
    """

    __slots__: ClassVar[tuple[str, ...]] = ("_params",)

    module_key: ClassVar[str | None] = None
    module_name: ClassVar[str | None] = None

    _params: ParamTable

    def __init__(self, params: ParamTable) -> None:
        self._params = params
        if self.module_key is not None and self.module_name is not None:
            _ = self.add_param_value(self.module_key, self.module_name)

    @property
    def params(self) -> ParamTable:
        """The table this view writes into."""
        return self._params

    def add_param_value(self, key: str, value: str) -> Self:
        """Append `value` under `key` using the pipe merge rule."""
        self._params.append(key, str(value))
        return self

    def add_flag(self, key: str) -> Self:
        """Append the literal `true` under `key`."""
        return self.add_param_value(key, "true")
