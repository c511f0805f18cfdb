"""Builder for the *categorymembers* list module.

See https://www.mediawiki.org/wiki/API:Categorymembers
"""

from typing import ClassVar, Self

from wikiquery.queries.base import SubQuery


class CategoryMembersQuery(SubQuery):
    """Lists the pages in a category.

    Either `cm_title` or `cm_page_id` selects the category. Sort-key bounds
    only apply when `cm_sort` is `sortkey`; timestamp bounds when it is
    `timestamp`.
    """

    __slots__: ClassVar[tuple[str, ...]] = ()

    module_key: ClassVar[str | None] = "list"
    module_name: ClassVar[str | None] = "categorymembers"

    def cm_title(self, value: str) -> Self:
        """Category to enumerate, including the `Category:` prefix."""
        return self.add_param_value("cmtitle", value)

    def cm_page_id(self, value: str) -> Self:
        """Page ID of the category to enumerate."""
        return self.add_param_value("cmpageid", value)

    def cm_prop(self, value: str) -> Self:
        return self.add_param_value("cmprop", value)

    def cm_namespace(self, value: str) -> Self:
        return self.add_param_value("cmnamespace", value)

    def cm_type(self, value: str) -> Self:
        return self.add_param_value("cmtype", value)

    def cm_limit(self, value: str) -> Self:
        return self.add_param_value("cmlimit", value)

    def cm_sort(self, value: str) -> Self:
        return self.add_param_value("cmsort", value)

    def cm_dir(self, value: str) -> Self:
        return self.add_param_value("cmdir", value)

    def cm_start(self, value: str) -> Self:
        return self.add_param_value("cmstart", value)

    def cm_end(self, value: str) -> Self:
        return self.add_param_value("cmend", value)

    def cm_start_hex_sort_key(self, value: str) -> Self:
        return self.add_param_value("cmstarthexsortkey", value)

    def cm_end_hex_sort_key(self, value: str) -> Self:
        return self.add_param_value("cmendhexsortkey", value)

    def cm_start_sort_key_prefix(self, value: str) -> Self:
        return self.add_param_value("cmstartsortkeyprefix", value)

    def cm_end_sort_key_prefix(self, value: str) -> Self:
        return self.add_param_value("cmendsortkeyprefix", value)

    def cm_continue(self, value: str) -> Self:
        return self.add_param_value("cmcontinue", value)
