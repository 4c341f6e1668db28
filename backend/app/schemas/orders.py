from __future__ import annotations

from datetime import date

from pydantic import BaseModel, Field

from backend.app.db.models.core_types import OrderState


class OrderCreate(BaseModel):
    client_code: str = Field(min_length=1, max_length=5)


class LineCreate(BaseModel):
    product_ref: int
    quantity: int = Field(gt=0)


class LineRead(BaseModel):
    id: int
    order_num: int
    product_ref: int
    quantity: int

    class Config:
        from_attributes = True


class OrderRead(BaseModel):
    num: int
    client_code: str
    created_on: date
    shipped_on: date | None
    delivery_address: str | None
    discount: float
    state: OrderState
    lines: list[LineRead] = Field(default_factory=list)

    class Config:
        from_attributes = True


class ProductRead(BaseModel):
    ref: int
    name: str
    unit_price: float
    units_in_stock: int
    units_on_order: int  # READ ONLY — alimenté par l'ajout de lignes
    discontinued: bool

    class Config:
        from_attributes = True


class ClientRead(BaseModel):
    code: str
    company: str
    contact: str | None
    address: str | None
    city: str | None
    country: str | None
    ordered_articles: int
