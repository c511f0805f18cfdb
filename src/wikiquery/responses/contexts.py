"""Continuation context returned with truncated results.

A context only tracks *where* the next round resumes; what to fetch stays in
the query's parameter table. Its absence from a response means the result
set is complete.
"""

from pydantic import BaseModel, Field


class ContinueBlock(
    BaseModel, frozen=True, populate_by_name=True, extra="allow", coerce_numbers_to_str=True
):
    """Continuation tokens from the `continue` object of a response.

    Tokens for modules without a named field are kept as extra fields so
    they are echoed back as well. Numeric offsets (`incontinue`,
    `excontinue`) are kept as strings.
    """

    continue_: str = Field(alias="continue")
    """Top-level continuation marker (e.g. `-||`); always present."""

    ac_continue: str | None = Field(default=None, alias="accontinue")
    """Resume point of the allcategories list."""

    cm_continue: str | None = Field(default=None, alias="cmcontinue")
    """Resume point of the categorymembers list."""

    in_continue: str | None = Field(default=None, alias="incontinue")
    """Resume point of the info prop."""

    desc_continue: str | None = Field(default=None, alias="desccontinue")
    """Resume point of the description prop."""

    ex_continue: str | None = Field(default=None, alias="excontinue")
    """Resume point of the extracts prop."""

    def tokens(self) -> dict[str, str]:
        """Present tokens keyed by their request parameter name."""
        dumped = self.model_dump(by_alias=True, exclude_none=True)
        return {key: str(value) for key, value in dumped.items()}
