"""Request builders for MediaWiki `action=query` requests.

Current sub-queries:
- `AllCategoriesQuery` (list=allcategories)
- `CategoryMembersQuery` (list=categorymembers)
- `PagesQuery` (prop=info|description|extracts)
"""

from wikiquery.queries.all_categories import AllCategoriesQuery
from wikiquery.queries.base import SubQuery
from wikiquery.queries.category_members import CategoryMembersQuery
from wikiquery.queries.pages import PagesQuery
from wikiquery.queries.query import DEFAULT_FORMAT, DEFAULT_FORMAT_VERSION, Query
from wikiquery.queries.table import PIPE, ParamTable

__all__ = [
    "DEFAULT_FORMAT",
    "DEFAULT_FORMAT_VERSION",
    "PIPE",
    "AllCategoriesQuery",
    "CategoryMembersQuery",
    "PagesQuery",
    "ParamTable",
    "Query",
    "SubQuery",
]
