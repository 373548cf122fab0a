from types import SimpleNamespace

import pytest

from zancommon.support import Config


@pytest.fixture(autouse=True)
def _clean_config():
    Config.clear_runtime_overrides()
    yield
    Config.clear_runtime_overrides()


class FakeConnection:
    """Stands in for a Tortoise client: records queries and returns canned rows"""

    def __init__(self, rows=None, dialect='sqlite'):
        self.rows = rows if rows is not None else []
        self.capabilities = SimpleNamespace(dialect=dialect)
        self.queries = []

    async def execute_query_dict(self, query, values=None):
        self.queries.append((query, values))
        return self.rows


@pytest.fixture()
def make_connection():
    return FakeConnection


@pytest.fixture()
def make_request():
    def _make(query_string=''):
        return SimpleNamespace(query_string=query_string, ctx=SimpleNamespace())
    return _make
