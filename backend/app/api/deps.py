from __future__ import annotations

from typing import Generator

from fastapi import Depends
from sqlalchemy.orm import Session

from backend.app.db.session import SessionLocal
from backend.services.order_lines import OrderLineManager
from backend.services.orders import OrderLifecycleManager
from backend.services.stores import SqlClientStore, SqlOrderStore, SqlProductStore


def get_db() -> Generator:
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_lifecycle_manager(db: Session = Depends(get_db)) -> OrderLifecycleManager:
    return OrderLifecycleManager(SqlClientStore(db), SqlOrderStore(db), SqlProductStore(db))


def get_line_manager(db: Session = Depends(get_db)) -> OrderLineManager:
    return OrderLineManager(SqlOrderStore(db), SqlProductStore(db))
