"""feat: create prices table and seed the reference price lists

Revision ID: 0001
Revises:
Create Date: 2026-10-18 10:00:00
"""

from datetime import datetime
from decimal import Decimal
from typing import Sequence, Union

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "0001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

REFERENCE_PRICES = [
    (1, datetime(2020, 6, 14, 0, 0, 0), datetime(2020, 12, 31, 23, 59, 59), 1, 35455, 0, Decimal("35.50"), "EUR"),
    (1, datetime(2020, 6, 14, 15, 0, 0), datetime(2020, 6, 14, 18, 30, 0), 2, 35455, 1, Decimal("25.45"), "EUR"),
    (1, datetime(2020, 6, 15, 0, 0, 0), datetime(2020, 6, 15, 11, 0, 0), 3, 35455, 1, Decimal("30.50"), "EUR"),
    (1, datetime(2020, 6, 15, 16, 0, 0), datetime(2020, 12, 31, 23, 59, 59), 4, 35455, 1, Decimal("38.95"), "EUR"),
]


def upgrade() -> None:
    prices = op.create_table(
        "prices",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("brand_id", sa.BigInteger(), nullable=False),
        sa.Column("start_date", sa.DateTime(timezone=False), nullable=False),
        sa.Column("end_date", sa.DateTime(timezone=False), nullable=False),
        sa.Column("price_list", sa.Integer(), nullable=False),
        sa.Column("product_id", sa.BigInteger(), nullable=False),
        sa.Column("priority", sa.Integer(), nullable=False),
        sa.Column("price", sa.Numeric(), nullable=False),
        sa.Column("currency", sa.String(length=3), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "ix_prices_product_brand_window",
        "prices",
        ["product_id", "brand_id", "start_date", "end_date"],
        unique=False,
    )
    op.bulk_insert(
        prices,
        [
            {
                "brand_id": brand_id,
                "start_date": start_date,
                "end_date": end_date,
                "price_list": price_list,
                "product_id": product_id,
                "priority": priority,
                "price": price,
                "currency": currency,
            }
            for brand_id, start_date, end_date, price_list, product_id, priority, price, currency in REFERENCE_PRICES
        ],
    )


def downgrade() -> None:
    op.drop_index("ix_prices_product_brand_window", table_name="prices")
    op.drop_table("prices")
