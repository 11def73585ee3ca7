# tests/integration/services/query_service/test_reference_prices_api.py
from decimal import Decimal
from unittest.mock import AsyncMock

import httpx
import pytest
import pytest_asyncio

from price_resolution_engine import PriceRecord
from src.services.query_service.app.main import app
from src.services.query_service.app.repositories.price_repository import PriceRepository
from src.services.query_service.app.routers.prices import get_price_service
from src.services.query_service.app.services.price_service import PriceService

pytestmark = pytest.mark.asyncio


class InMemoryPriceRepository(PriceRepository):
    """Serves the seeded price lists filtered by ids only, leaving the window to the resolver."""

    def __init__(self, records: list[PriceRecord]):
        super().__init__(AsyncMock())
        self.records = records

    async def find_candidates(self, instant, product_id, brand_id):
        return [r for r in self.records if r.product_id == product_id and r.brand_id == brand_id]


@pytest_asyncio.fixture
async def async_test_client(reference_prices):
    def _service() -> PriceService:
        service = PriceService(AsyncMock())
        service.repo = InMemoryPriceRepository(reference_prices)
        return service

    app.dependency_overrides[get_price_service] = _service
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
    app.dependency_overrides.pop(get_price_service, None)


@pytest.mark.parametrize(
    "application_date, price_list, price, start_date, end_date",
    [
        ("2020-06-14-10:00:00", 1, Decimal("35.50"), "2020-06-14-00.00.00", "2020-12-31-23.59.59"),
        ("2020-06-14-16:00:00", 2, Decimal("25.45"), "2020-06-14-15.00.00", "2020-06-14-18.30.00"),
        ("2020-06-14-21:00:00", 1, Decimal("35.50"), "2020-06-14-00.00.00", "2020-12-31-23.59.59"),
        ("2020-06-15-10:00:00", 3, Decimal("30.50"), "2020-06-15-00.00.00", "2020-06-15-11.00.00"),
        ("2020-06-16-21:00:00", 4, Decimal("38.95"), "2020-06-15-16.00.00", "2020-12-31-23.59.59"),
    ],
)
async def test_reference_price_requests(
    async_test_client, application_date, price_list, price, start_date, end_date
):
    response = await async_test_client.get(
        "/api/prices",
        params={"applicationDate": application_date, "productId": 35455, "brandId": 1},
    )

    assert response.status_code == 200
    assert response.json(parse_float=Decimal) == {
        "productId": 35455,
        "brandId": 1,
        "priceList": price_list,
        "startDate": start_date,
        "endDate": end_date,
        "price": price,
    }
    assert f'"price":{price}' in response.text


async def test_unknown_brand_returns_404(async_test_client):
    response = await async_test_client.get(
        "/api/prices",
        params={"applicationDate": "2020-06-14-16:00:00", "productId": 35455, "brandId": 2},
    )
    assert response.status_code == 404


async def test_zero_product_id_is_rejected_by_real_service(async_test_client):
    response = await async_test_client.get(
        "/api/prices",
        params={"applicationDate": "2020-06-14-16:00:00", "productId": 0, "brandId": 1},
    )

    assert response.status_code == 400
    body = response.json()
    assert body["field"] == "productId"
    assert body["message"] == "Invalid price query - productId: 0 (Product ID must be positive)"


async def test_window_boundary_is_applicable(async_test_client):
    response = await async_test_client.get(
        "/api/prices",
        params={"applicationDate": "2020-06-14-18:30:00", "productId": 35455, "brandId": 1},
    )

    assert response.status_code == 200
    assert response.json()["priceList"] == 2
