from __future__ import annotations

from datetime import date
from typing import Any

import pytest

from tourbook.integrations.mock_catalog import MockCatalog
from tourbook.schemas.tour import Destination, Tour


def make_tour(**overrides: Any) -> Tour:
    data: dict[str, Any] = dict(
        id="t",
        title="Sample Tour",
        price=1000,
        duration=5,
        max_group_size=10,
        difficulty="easy",
        category="nature",
        destination=Destination(id="d", name="Lisbon", country="Portugal"),
        rating=4.0,
        review_count=10,
    )
    data.update(overrides)
    return Tour.model_validate(data)


@pytest.fixture
def catalog() -> MockCatalog:
    return MockCatalog()


@pytest.fixture
def tours(catalog: MockCatalog) -> list[Tour]:
    return catalog.list_tours()


@pytest.fixture
def today() -> date:
    return date(2026, 6, 15)
