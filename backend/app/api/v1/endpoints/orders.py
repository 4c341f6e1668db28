from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from backend.app.api.deps import get_db, get_lifecycle_manager, get_line_manager
from backend.app.db.models.models_v1 import Order
from backend.app.schemas.orders import LineCreate, LineRead, OrderCreate, OrderRead
from backend.services.order_lines import OrderLineManager
from backend.services.orders import OrderLifecycleManager

router = APIRouter(prefix="/orders")


@router.get("/{order_num}", response_model=OrderRead)
def get_order(order_num: int, db: Session = Depends(get_db)):
    order = db.get(Order, order_num)
    if not order:
        raise HTTPException(status_code=404, detail="Order not found")
    return order


@router.post("", response_model=OrderRead, status_code=201)
def create_order(
    payload: OrderCreate,
    db: Session = Depends(get_db),
    manager: OrderLifecycleManager = Depends(get_lifecycle_manager),
):
    order = manager.create_order(payload.client_code)
    db.commit()
    db.refresh(order)
    return order


@router.post("/{order_num}/shipment", response_model=OrderRead)
def record_shipment(
    order_num: int,
    db: Session = Depends(get_db),
    manager: OrderLifecycleManager = Depends(get_lifecycle_manager),
):
    order = manager.record_shipment(order_num)
    db.commit()
    db.refresh(order)
    return order


@router.post("/{order_num}/lines", response_model=LineRead, status_code=201)
def add_line(
    order_num: int,
    payload: LineCreate,
    db: Session = Depends(get_db),
    manager: OrderLineManager = Depends(get_line_manager),
):
    line = manager.add_line(order_num, payload.product_ref, payload.quantity)
    db.commit()
    db.refresh(line)
    return line
