"""Builder for the *allcategories* list module.

See https://www.mediawiki.org/wiki/API:Allcategories
"""

from typing import ClassVar, Self

from wikiquery.queries.base import SubQuery


class AllCategoriesQuery(SubQuery):
    """Enumerates all categories.

    Example::

        query = Query()
        query.all_categories().ac_from("Lists_of_colors").ac_prop("size").ac_limit("5")
    """

    __slots__: ClassVar[tuple[str, ...]] = ()

    module_key: ClassVar[str | None] = "list"
    module_name: ClassVar[str | None] = "allcategories"

    def ac_from(self, value: str) -> Self:
        """Category to start enumerating from."""
        return self.add_param_value("acfrom", value)

    def ac_to(self, value: str) -> Self:
        """Category to stop enumerating at."""
        return self.add_param_value("acto", value)

    def ac_prop(self, value: str) -> Self:
        """Property to include; repeat to request several (`size`, `hidden`)."""
        return self.add_param_value("acprop", value)

    def ac_min(self, value: str) -> Self:
        return self.add_param_value("acmin", value)

    def ac_max(self, value: str) -> Self:
        return self.add_param_value("acmax", value)

    def ac_limit(self, value: str) -> Self:
        return self.add_param_value("aclimit", value)

    def ac_prefix(self, value: str) -> Self:
        return self.add_param_value("acprefix", value)

    def ac_dir(self, value: str) -> Self:
        return self.add_param_value("acdir", value)

    def ac_continue(self, value: str) -> Self:
        return self.add_param_value("accontinue", value)
