from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy import select
from sqlalchemy.orm import Session

from backend.app.api.deps import get_db
from backend.app.db.models.models_v1 import Product
from backend.app.schemas.orders import ProductRead

router = APIRouter(prefix="/products")


@router.get("", response_model=list[ProductRead])
def list_products(
    available_only: bool = False,
    db: Session = Depends(get_db),
):
    stmt = select(Product).order_by(Product.ref)
    if available_only:
        stmt = stmt.where(Product.units_in_stock > 0).where(Product.discontinued.is_(False))

    return db.execute(stmt).scalars().all()


@router.get("/{ref}", response_model=ProductRead)
def get_product(ref: int, db: Session = Depends(get_db)):
    p = db.get(Product, ref)
    if not p:
        raise HTTPException(status_code=404, detail="Product not found")
    return p
