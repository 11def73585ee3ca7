# src/services/query_service/app/repositories/price_repository.py
import logging
from datetime import datetime
from typing import List

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from price_common.database_models import Price
from price_common.utils import async_timed
from price_resolution_engine import PriceRecord, PriceSourceUnavailableError

logger = logging.getLogger(__name__)


def to_price_record(row: Price) -> PriceRecord:
    return PriceRecord(
        product_id=row.product_id,
        brand_id=row.brand_id,
        valid_from=row.start_date,
        valid_to=row.end_date,
        price_list_id=row.price_list,
        priority=row.priority,
        amount=row.price,
        currency=row.currency,
    )


class PriceRepository:
    """
    Handles read-only database queries for price records.
    """

    def __init__(self, db: AsyncSession):
        self.db = db

    @async_timed(repository="PriceRepository")
    async def find_candidates(
        self, instant: datetime, product_id: int, brand_id: int
    ) -> List[PriceRecord]:
        """
        Retrieves the price records of a product/brand whose validity window
        contains the instant, highest priority first.
        """
        stmt = (
            select(Price)
            .filter_by(product_id=product_id, brand_id=brand_id)
            .filter(Price.start_date <= instant, Price.end_date >= instant)
            .order_by(Price.priority.desc(), Price.id.asc())
        )

        try:
            results = await self.db.execute(stmt)
            rows = results.scalars().all()
        except SQLAlchemyError as e:
            logger.error(
                f"Failed to load candidate prices for product {product_id}, brand {brand_id}.",
                exc_info=True,
            )
            raise PriceSourceUnavailableError(
                "Price records could not be loaded from the database."
            ) from e

        logger.info(
            f"Found {len(rows)} candidate prices for product {product_id}, brand {brand_id} at {instant.isoformat()}."
        )
        return [to_price_record(row) for row in rows]
