"""create clients, products, orders, lines

Revision ID: 5b1c0e9a7f21
Revises:
Create Date: 2026-10-19
"""

from __future__ import annotations

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision: str = "5b1c0e9a7f21"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "clients",
        sa.Column("code", sa.String(5), primary_key=True),
        sa.Column("company", sa.String(40), nullable=False),
        sa.Column("contact", sa.String(30)),
        sa.Column("address", sa.String(60)),
        sa.Column("city", sa.String(15)),
        sa.Column("country", sa.String(15)),
    )
    op.create_table(
        "products",
        sa.Column("ref", sa.Integer, primary_key=True),
        sa.Column("name", sa.String(40), nullable=False, unique=True),
        sa.Column("unit_price", sa.Numeric(10, 2), nullable=False, server_default="0"),
        sa.Column("units_in_stock", sa.Integer, nullable=False, server_default="0"),
        sa.Column("units_on_order", sa.Integer, nullable=False, server_default="0"),
        sa.Column("discontinued", sa.Boolean, nullable=False, server_default=sa.false()),
        sa.CheckConstraint("unit_price >= 0", name="ck_product_unit_price_nonneg"),
        sa.CheckConstraint("units_on_order >= 0", name="ck_product_on_order_nonneg"),
    )
    op.create_table(
        "orders",
        sa.Column("num", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column(
            "client_code",
            sa.String(5),
            sa.ForeignKey("clients.code", ondelete="RESTRICT"),
            nullable=False,
        ),
        sa.Column("created_on", sa.Date, nullable=False),
        sa.Column("shipped_on", sa.Date),
        sa.Column("delivery_address", sa.String(60)),
        sa.Column("freight", sa.Numeric(10, 2), nullable=False, server_default="0"),
        sa.Column("discount", sa.Numeric(3, 2), nullable=False, server_default="0"),
        sa.CheckConstraint("discount >= 0 AND discount <= 1", name="ck_order_discount_0_1"),
        sa.CheckConstraint("freight >= 0", name="ck_order_freight_nonneg"),
    )
    op.create_index("ix_orders_client_code", "orders", ["client_code"])
    op.create_table(
        "lines",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column(
            "order_num",
            sa.Integer,
            sa.ForeignKey("orders.num", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column(
            "product_ref",
            sa.Integer,
            sa.ForeignKey("products.ref", ondelete="RESTRICT"),
            nullable=False,
        ),
        sa.Column("quantity", sa.Integer, nullable=False),
        sa.CheckConstraint("quantity > 0", name="ck_line_qty_pos"),
    )
    op.create_index("ix_lines_order_product", "lines", ["order_num", "product_ref"])


def downgrade() -> None:
    op.drop_index("ix_lines_order_product", table_name="lines")
    op.drop_table("lines")
    op.drop_index("ix_orders_client_code", table_name="orders")
    op.drop_table("orders")
    op.drop_table("products")
    op.drop_table("clients")
