"""Builder for page-set queries with `prop` modules.

Select pages with `titles` or `page_ids`, then attach one or more prop
areas. Each area adds its name to `prop` and owns a parameter prefix, so
areas can be combined on one page set:

- info (`in*`): https://www.mediawiki.org/wiki/API:Info
- description (`desc*`): https://www.mediawiki.org/wiki/API:Description
- extracts (`ex*`): https://www.mediawiki.org/wiki/Extension:TextExtracts#API
"""

from typing import ClassVar, Self

from wikiquery.queries.base import SubQuery

PROP_KEY = "prop"


class PagesQuery(SubQuery):
    """Queries properties of a set of pages."""

    __slots__: ClassVar[tuple[str, ...]] = ()

    def titles(self, value: str) -> Self:
        """Page title to include; repeat for several pages."""
        return self.add_param_value("titles", value)

    def page_ids(self, value: str) -> Self:
        return self.add_param_value("pageids", value)

    # -----
    # info
    # -----

    def info(self) -> Self:
        """Attach the info prop area.

        Example::

            query.pages().titles("United%20States").info().in_prop("url").in_prop("displaytitle")
        """
        return self.add_param_value(PROP_KEY, "info")

    def in_prop(self, value: str) -> Self:
        return self.add_param_value("inprop", value)

    def in_test_actions(self, value: str) -> Self:
        """Action to test the current user's permission for (e.g. `read`, `edit`)."""
        return self.add_param_value("intestactions", value)

    def in_test_actions_detail(self, value: str) -> Self:
        """Detail level of tested actions: `boolean`, `full` or `quick`."""
        return self.add_param_value("intestactionsdetail", value)

    def in_continue(self, value: str) -> Self:
        return self.add_param_value("incontinue", value)

    # -----
    # description
    # -----

    def description(self) -> Self:
        """Attach the description prop area."""
        return self.add_param_value(PROP_KEY, "description")

    def desc_prefer_source(self, value: str) -> Self:
        """Preferred description source: `local` or `central`."""
        return self.add_param_value("descprefersource", value)

    def desc_continue(self, value: str) -> Self:
        return self.add_param_value("desccontinue", value)

    # -----
    # extracts
    # -----

    def extracts(self) -> Self:
        """Attach the extracts prop area."""
        return self.add_param_value(PROP_KEY, "extracts")

    def ex_chars(self, value: str) -> Self:
        return self.add_param_value("exchars", value)

    def ex_sentences(self, value: str) -> Self:
        return self.add_param_value("exsentences", value)

    def ex_limit(self, value: str) -> Self:
        return self.add_param_value("exlimit", value)

    def ex_intro(self) -> Self:
        """Return only the content before the first section."""
        return self.add_flag("exintro")

    def ex_plain_text(self) -> Self:
        """Return plain text instead of limited HTML."""
        return self.add_flag("explaintext")

    def ex_section_format(self, value: str) -> Self:
        return self.add_param_value("exsectionformat", value)

    def ex_continue(self, value: str) -> Self:
        return self.add_param_value("excontinue", value)
