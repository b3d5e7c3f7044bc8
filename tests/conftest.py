# tests/conftest.py
import pytest
from sinorm.units.registry import DEFAULT_TABLE as _table
from sinorm.units.registry import _bootstrap_default_table


@pytest.fixture(scope="session")
def table():
    return _table


@pytest.fixture
def fresh_table():
    return _bootstrap_default_table()


@pytest.fixture(autouse=True)
def clear_parse_cache():
    from sinorm.units.normalizer import _parse
    _parse.cache_clear()
    yield
    _parse.cache_clear()
