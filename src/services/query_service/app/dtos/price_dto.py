# src/services/query_service/app/dtos/price_dto.py
from datetime import datetime
from decimal import Decimal
from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, Field, field_serializer

from price_resolution_engine import PriceResult
from ..request_parsing import format_response_date


class PriceResponse(BaseModel):
    """
    Represents the applicable price of a product for an API response.
    """

    model_config = ConfigDict(populate_by_name=True)

    product_id: int = Field(..., alias="productId", description="Product identifier", examples=[35455])
    brand_id: int = Field(..., alias="brandId", description="Brand identifier", examples=[1])
    price_list: int = Field(..., alias="priceList", description="Price list identifier", examples=[2])
    start_date: datetime = Field(
        ..., alias="startDate", description="Start of price validity (yyyy-MM-dd-HH.mm.ss)"
    )
    end_date: datetime = Field(
        ..., alias="endDate", description="End of price validity (yyyy-MM-dd-HH.mm.ss)"
    )
    price: Decimal = Field(..., description="Final sale price, with its stored scale", examples=[25.45])

    @field_serializer("start_date", "end_date")
    def _serialize_window_bound(self, value: datetime) -> str:
        return format_response_date(value)

    @classmethod
    def from_result(cls, result: PriceResult) -> "PriceResponse":
        return cls(
            product_id=result.product_id,
            brand_id=result.brand_id,
            price_list=result.price_list_id,
            start_date=result.valid_from,
            end_date=result.valid_to,
            price=result.amount,
        )


def build_error_body(status_code: int, error: str, message: str, **extras: Any) -> Dict[str, Any]:
    """Standard error payload: timestamp, status, error, message, then extras."""
    body: Dict[str, Any] = {
        "timestamp": datetime.now().isoformat(),
        "status": status_code,
        "error": error,
        "message": message,
    }
    body.update(extras)
    return body
