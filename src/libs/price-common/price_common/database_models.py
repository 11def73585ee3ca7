# src/libs/price-common/price_common/database_models.py
from sqlalchemy import (
    Column, Integer, BigInteger,
    String, Numeric, DateTime,
    func, Index
)

from .db_base import Base

class Price(Base):
    __tablename__ = 'prices'

    id = Column(Integer, primary_key=True, autoincrement=True)
    brand_id = Column(BigInteger, nullable=False)
    # Naive timestamps: the validity window is expressed in store-local time.
    start_date = Column(DateTime(timezone=False), nullable=False)
    end_date = Column(DateTime(timezone=False), nullable=False)
    price_list = Column(Integer, nullable=False)
    product_id = Column(BigInteger, nullable=False)
    priority = Column(Integer, nullable=False, default=0)
    # Unconstrained numeric keeps the scale each price was stored with.
    price = Column(Numeric(asdecimal=True), nullable=False)
    currency = Column(String(3), nullable=False)
    created_at = Column(DateTime(timezone=True), default=func.now())
    updated_at = Column(DateTime(timezone=True), default=func.now(), onupdate=func.now())

    __table_args__ = (
        Index('ix_prices_product_brand_window', 'product_id', 'brand_id', 'start_date', 'end_date'),
    )
