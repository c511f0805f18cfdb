"""Top-level response shapes: a query result or a server error."""

from pydantic import AliasChoices, BaseModel, Field

from wikiquery.responses.contexts import ContinueBlock
from wikiquery.responses.datatypes import Category, CategoryMember, Page


class QueryBlock(BaseModel, frozen=True, populate_by_name=True):
    """The `query` object, keyed by list/prop module."""

    pages: list[Page] | None = None
    all_categories: list[Category] | None = Field(default=None, alias="allcategories")
    category_members: list[CategoryMember] | None = Field(
        default=None, alias="categorymembers"
    )


class Warnings(BaseModel, frozen=True):
    """Warning text for one module.

    `formatversion=2` uses a `warnings` key; the legacy format uses `*`.
    """

    warnings: str = Field(validation_alias=AliasChoices("warnings", "*"))


class WarningBlock(BaseModel, frozen=True, populate_by_name=True):
    """The `warnings` object; only the modules that warned are present."""

    main: Warnings | None = None
    all_categories: Warnings | None = Field(default=None, alias="allcategories")
    category_members: Warnings | None = Field(default=None, alias="categorymembers")
    info: Warnings | None = None
    pages: Warnings | None = None
    description: Warnings | None = None
    extracts: Warnings | None = None

    def messages(self) -> dict[str, str]:
        """Warning texts keyed by module name."""
        return {
            key: value["warnings"]
            for key, value in self.model_dump(by_alias=True, exclude_none=True).items()
        }


class QueryResponse(BaseModel, frozen=True, populate_by_name=True):
    """A successful query round."""

    batch_complete: bool = Field(default=False, alias="batchcomplete")
    """Whether all data for the current batch of pages was returned."""

    query: QueryBlock = Field(default_factory=QueryBlock)

    continue_block: ContinueBlock | None = Field(default=None, alias="continue")
    """Tokens for the next round; None when the result set is complete."""

    warnings: WarningBlock | None = None

    @property
    def is_complete(self) -> bool:
        return self.continue_block is None


class ErrorInfo(BaseModel, frozen=True):
    """The `error` object of a failed request."""

    code: str
    info: str
    docref: str | None = None


class ErrorResponse(BaseModel, frozen=True, populate_by_name=True):
    """A server-reported error, returned in place of a query block."""

    error: ErrorInfo
    served_by: str = Field(alias="servedby")
    """Identifier of the host that served the request."""
