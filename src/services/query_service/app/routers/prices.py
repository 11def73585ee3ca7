# src/services/query_service/app/routers/prices.py
import logging
from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from price_common.db import get_async_db_session
from price_resolution_engine import Found, PriceQuery
from ..dtos.price_dto import PriceResponse
from ..request_parsing import API_DATE_TIME_FORMAT, parse_application_date
from ..responses import DecimalJSONResponse
from ..services.price_service import PriceService

logger = logging.getLogger(__name__)

# Ids are stored as signed 64-bit integers.
MAX_ID = 2**63 - 1

router = APIRouter(prefix="/api/prices", tags=["Prices"])


def get_price_service(db: AsyncSession = Depends(get_async_db_session)) -> PriceService:
    """Dependency injector for the PriceService."""
    return PriceService(db)


@router.get(
    "",
    response_model=PriceResponse,
    summary="Get the Applicable Price for a Product",
    description=(
        "Returns the applicable price for a product of a brand at a given date. "
        "When several prices are valid at that date, the one with the highest priority wins."
    ),
    responses={
        status.HTTP_400_BAD_REQUEST: {"description": "Invalid request parameters (e.g. invalid date format)."},
        status.HTTP_404_NOT_FOUND: {"description": "No applicable price found for the given criteria."},
    },
)
async def get_price(
    application_date: str = Query(
        ...,
        alias="applicationDate",
        description=f"Date and time for price application in format {API_DATE_TIME_FORMAT}",
        examples=["2020-06-14-16:00:00"],
    ),
    product_id: int = Query(..., alias="productId", le=MAX_ID, description="Product identifier", examples=[35455]),
    brand_id: int = Query(..., alias="brandId", le=MAX_ID, description="Brand identifier (1 = ZARA)", examples=[1]),
    service: PriceService = Depends(get_price_service),
):
    logger.info(
        f"Received price request - date: {application_date}, productId: {product_id}, brandId: {brand_id}"
    )
    query = PriceQuery(
        instant=parse_application_date(application_date),
        product_id=product_id,
        brand_id=brand_id,
    )
    resolution = await service.get_applicable_price(query)

    if isinstance(resolution, Found):
        response = PriceResponse.from_result(resolution.value)
        logger.info(f"Price request successful - returning price: {response.price}")
        return DecimalJSONResponse(content=response.model_dump(by_alias=True))

    logger.info("Price request completed - no price found for given criteria")
    return Response(status_code=status.HTTP_404_NOT_FOUND)
