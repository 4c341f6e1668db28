from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from backend.app.api.deps import get_db
from backend.app.db.models.models_v1 import Client
from backend.app.schemas.orders import ClientRead
from backend.services.stores import SqlClientStore

router = APIRouter(prefix="/clients")


@router.get("/{code}", response_model=ClientRead)
def get_client(code: str, db: Session = Depends(get_db)):
    client = db.get(Client, code)
    if not client:
        raise HTTPException(status_code=404, detail="Client not found")

    return ClientRead(
        code=client.code,
        company=client.company,
        contact=client.contact,
        address=client.address,
        city=client.city,
        country=client.country,
        ordered_articles=SqlClientStore(db).ordered_article_count(code),
    )
