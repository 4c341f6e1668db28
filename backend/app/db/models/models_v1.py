from __future__ import annotations

from datetime import date
from decimal import Decimal

from sqlalchemy import (
    String,
    Integer,
    Date,
    Boolean,
    ForeignKey,
    Numeric,
    Index,
    CheckConstraint,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from backend.app.db.base import Base
from backend.app.db.models.core_types import OrderState


# ---------- MASTER DATA ----------
class Client(Base):
    __tablename__ = "clients"
    code: Mapped[str] = mapped_column(String(5), primary_key=True)
    company: Mapped[str] = mapped_column(String(40), nullable=False)
    contact: Mapped[str | None] = mapped_column(String(30))
    address: Mapped[str | None] = mapped_column(String(60))
    city: Mapped[str | None] = mapped_column(String(15))
    country: Mapped[str | None] = mapped_column(String(15))

    orders: Mapped[list["Order"]] = relationship(back_populates="client")


class Product(Base):
    __tablename__ = "products"
    ref: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String(40), unique=True, nullable=False)
    unit_price: Mapped[Decimal] = mapped_column(Numeric(10, 2), default=0, nullable=False)
    # pas de CHECK >= 0 : l'expédition décrémente sans plancher
    units_in_stock: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    units_on_order: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    discontinued: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)

    __table_args__ = (
        CheckConstraint("unit_price >= 0", name="ck_product_unit_price_nonneg"),
        CheckConstraint("units_on_order >= 0", name="ck_product_on_order_nonneg"),
    )


# ---------- SALES ----------
class Order(Base):
    __tablename__ = "orders"
    num: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    client_code: Mapped[str] = mapped_column(
        ForeignKey("clients.code", ondelete="RESTRICT"),
        nullable=False,
        index=True,
    )
    created_on: Mapped[date] = mapped_column(Date, default=date.today, nullable=False)
    shipped_on: Mapped[date | None] = mapped_column(Date)  # NULL tant que non expédiée
    delivery_address: Mapped[str | None] = mapped_column(String(60))
    freight: Mapped[Decimal] = mapped_column(Numeric(10, 2), default=0, nullable=False)
    discount: Mapped[Decimal] = mapped_column(Numeric(3, 2), default=Decimal("0"), nullable=False)

    client: Mapped[Client] = relationship(back_populates="orders")
    lines: Mapped[list["Line"]] = relationship(
        back_populates="order",
        cascade="all, delete-orphan",
        order_by="Line.id",
    )

    __table_args__ = (
        CheckConstraint("discount >= 0 AND discount <= 1", name="ck_order_discount_0_1"),
        CheckConstraint("freight >= 0", name="ck_order_freight_nonneg"),
    )

    @property
    def state(self) -> OrderState:
        return OrderState.open if self.shipped_on is None else OrderState.shipped


class Line(Base):
    __tablename__ = "lines"
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    order_num: Mapped[int] = mapped_column(ForeignKey("orders.num", ondelete="CASCADE"), nullable=False)
    product_ref: Mapped[int] = mapped_column(ForeignKey("products.ref", ondelete="RESTRICT"), nullable=False)
    quantity: Mapped[int] = mapped_column(Integer, nullable=False)

    order: Mapped[Order] = relationship(back_populates="lines")
    product: Mapped[Product] = relationship()

    __table_args__ = (
        CheckConstraint("quantity > 0", name="ck_line_qty_pos"),
        Index("ix_lines_order_product", "order_num", "product_ref"),
    )
