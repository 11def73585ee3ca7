# src/services/query_service/app/services/price_service.py
import logging
from typing import Optional
from sqlalchemy.ext.asyncio import AsyncSession

from price_common.monitoring import observe_price_resolution
from price_resolution_engine import (
    NOT_FOUND,
    Found,
    PriceQuery,
    PriceResolver,
    PriceResult,
    Resolution,
    validate_price_query,
)
from ..repositories.price_repository import PriceRepository

logger = logging.getLogger(__name__)


class PriceService:
    """
    Handles the business logic for finding the applicable price of a product.
    """

    def __init__(self, db: AsyncSession, resolver: Optional[PriceResolver] = None):
        self.db = db
        self.repo = PriceRepository(db)
        self.resolver = resolver or PriceResolver()

    async def get_applicable_price(self, query: PriceQuery) -> Resolution[PriceResult]:
        """
        Validates the query, loads the candidates and picks the applicable one.

        Returns:
            Found(PriceResult) or NOT_FOUND. Invalid queries raise
            InvalidPriceQueryError before the repository is touched.
        """
        validate_price_query(query)
        logger.info(
            f"Executing price lookup for productId={query.product_id}, "
            f"brandId={query.brand_id}, date={query.instant.isoformat()}"
        )

        candidates = await self.repo.find_candidates(
            instant=query.instant, product_id=query.product_id, brand_id=query.brand_id
        )
        resolution = self.resolver.resolve(candidates, query.instant)

        if isinstance(resolution, Found):
            result = PriceResult.from_record(resolution.value)
            observe_price_resolution("found")
            logger.info(
                f"Price lookup successful: found price={result.amount} for priceList={result.price_list_id}"
            )
            return Found(result)

        observe_price_resolution("not_found")
        logger.warning(
            f"Price lookup failed: no applicable price found for productId={query.product_id}, "
            f"brandId={query.brand_id}"
        )
        return NOT_FOUND
