from __future__ import annotations

import pytest

from wikiquery.queries import Query


@pytest.fixture
def query() -> Query:
    return Query()
