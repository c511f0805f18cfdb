"""Record types decoded from the `query` block of a response.

These types represent the items each sub-query produces:
- `Category` for the allcategories list
- `CategoryMember` for the categorymembers list
- `Page` for page-set queries, with optional per-prop fields
"""

from typing import Annotated

from pydantic import BaseModel, Field, StrictBool


class Category(BaseModel, frozen=True, populate_by_name=True):
    """An entry of the allcategories list."""

    category: str
    """Category name without the namespace prefix."""

    size: int | None = None
    """Total number of members (requires `acprop=size`)."""

    pages: int | None = None
    files: int | None = None
    subcats: int | None = None

    hidden: bool = False
    """Whether the category is hidden (requires `acprop=hidden`)."""


class CategoryMember(BaseModel, frozen=True, populate_by_name=True):
    """An entry of the categorymembers list.

    Every field depends on `cmprop`, so all of them are optional.
    """

    page_id: int | None = Field(default=None, alias="pageid")
    ns: int | None = None
    title: str | None = None
    sort_key: str | None = Field(default=None, alias="sortkey")
    sort_key_prefix: str | None = Field(default=None, alias="sortkeyprefix")
    type_: str | None = Field(default=None, alias="type")
    """Member type: `page`, `subcat` or `file`."""
    timestamp: str | None = None


class DetailedAction(BaseModel, frozen=True):
    """Reason an action is not permitted, as returned by `intestactionsdetail=full|quick`."""

    code: str
    text: str


ActionPermission = Annotated[StrictBool | DetailedAction, Field(union_mode="left_to_right")]
"""A tested action: a plain boolean, or a detailed code/text record.

Decoding tries a strict boolean first, then `DetailedAction`; any other
shape is rejected.
"""

ActionResult = Annotated[
    ActionPermission | list[ActionPermission], Field(union_mode="left_to_right")
]
"""Value of one `actions` entry: a single permission or a list of them."""


class Protection(BaseModel, frozen=True, populate_by_name=True):
    """One protection entry of a page (requires `inprop=protection`)."""

    type_: str = Field(alias="type")
    """Protected action, e.g. `edit` or `move`."""

    level: str
    expiry: str


class Page(BaseModel, frozen=True, populate_by_name=True):
    """One requested page.

    `title` is always present. Missing pages carry no page ID; invalid
    titles carry neither a namespace nor a page ID. Everything else is
    populated only when the matching prop area was requested.
    """

    title: str
    ns: int | None = None
    page_id: int | None = Field(default=None, alias="pageid")
    missing: bool = False
    invalid: bool = False
    invalid_reason: str | None = Field(default=None, alias="invalidreason")

    # -----
    # description prop
    # -----
    description: str | None = None
    description_source: str | None = Field(default=None, alias="descriptionsource")

    # -----
    # extracts prop
    # -----
    extract: str | None = None

    # -----
    # info prop
    # -----
    content_model: str | None = Field(default=None, alias="contentmodel")
    page_language: str | None = Field(default=None, alias="pagelanguage")
    page_language_html_code: str | None = Field(default=None, alias="pagelanguagehtmlcode")
    page_language_dir: str | None = Field(default=None, alias="pagelanguagedir")
    touched: str | None = None
    last_rev_id: int | None = Field(default=None, alias="lastrevid")
    length: int | None = None
    redirect: bool = False
    new: bool = False
    talk_id: int | None = Field(default=None, alias="talkid")
    subject_id: int | None = Field(default=None, alias="subjectid")
    protection: list[Protection] | None = None
    restriction_types: list[str] | None = Field(default=None, alias="restrictiontypes")
    full_url: str | None = Field(default=None, alias="fullurl")
    edit_url: str | None = Field(default=None, alias="editurl")
    canonical_url: str | None = Field(default=None, alias="canonicalurl")
    display_title: str | None = Field(default=None, alias="displaytitle")
    variant_titles: dict[str, str] | None = Field(default=None, alias="varianttitles")
    actions: dict[str, ActionResult] | None = None
