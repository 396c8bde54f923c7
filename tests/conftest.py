import pytest

from searchplan.core import Settings
from searchplan.data import ExprValueFactory
from searchplan.request import RequestBuilder


@pytest.fixture
def settings() -> Settings:
    return Settings(query_size_limit=200)


@pytest.fixture
def value_factory() -> ExprValueFactory:
    return ExprValueFactory()


@pytest.fixture
def builder(settings, value_factory) -> RequestBuilder:
    return RequestBuilder(
        index_name="accounts",
        max_result_window=10000,
        settings=settings,
        value_factory=value_factory,
    )
