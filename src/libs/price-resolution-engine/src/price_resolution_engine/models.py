# src/libs/price-resolution-engine/src/price_resolution_engine/models.py
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal


@dataclass(frozen=True)
class PriceRecord:
    """
    One price tier for a product of a brand. The validity window
    [valid_from, valid_to] is closed on both ends; keeping
    valid_from <= valid_to is the caller's job.
    """

    product_id: int
    brand_id: int
    valid_from: datetime
    valid_to: datetime
    price_list_id: int
    priority: int
    amount: Decimal
    currency: str

    def contains(self, instant: datetime) -> bool:
        return self.valid_from <= instant <= self.valid_to


@dataclass(frozen=True)
class PriceQuery:
    instant: datetime
    product_id: int
    brand_id: int


@dataclass(frozen=True)
class PriceResult:
    """Response projection of a matched PriceRecord. Currency is not carried."""

    product_id: int
    brand_id: int
    price_list_id: int
    valid_from: datetime
    valid_to: datetime
    amount: Decimal

    @classmethod
    def from_record(cls, record: PriceRecord) -> "PriceResult":
        return cls(
            product_id=record.product_id,
            brand_id=record.brand_id,
            price_list_id=record.price_list_id,
            valid_from=record.valid_from,
            valid_to=record.valid_to,
            amount=record.amount,
        )
