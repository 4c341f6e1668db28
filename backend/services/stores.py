"""
Accès aux données utilisé par les services.

Les services ne connaissent que les Protocols ci-dessous ; les implémentations
SQLAlchemy partagent une même Session (donc une même transaction).
Une clé absente renvoie None : c'est au service de lever NotFound.
"""

from __future__ import annotations

from typing import Protocol

from sqlalchemy import Select, select, func
from sqlalchemy.orm import Session

from backend.app.db.models.models_v1 import Client, Order, Product, Line


class ClientStore(Protocol):
    def find_by_id(self, code: str) -> Client | None: ...

    def ordered_article_count(self, code: str) -> int: ...


class OrderStore(Protocol):
    def find_by_id(self, num: int) -> Order | None: ...

    def save(self, order: Order) -> Order: ...


class ProductStore(Protocol):
    def find_by_id(self, ref: int) -> Product | None: ...


def order_for_update(num: int) -> Select:
    # verrou ligne : deux opérations sur la même commande sont sérialisées
    return select(Order).where(Order.num == num).with_for_update()


def product_for_update(ref: int) -> Select:
    # populate_existing : le stock lu sous verrou écrase une lecture antérieure
    # (lazy load de line.product par exemple), sinon on réécrirait une valeur périmée
    return (
        select(Product)
        .where(Product.ref == ref)
        .with_for_update()
        .execution_options(populate_existing=True)
    )


class SqlClientStore:
    def __init__(self, db: Session) -> None:
        self.db = db

    def find_by_id(self, code: str) -> Client | None:
        return self.db.get(Client, code)

    def ordered_article_count(self, code: str) -> int:
        """Nombre total d'articles commandés par le client, toutes commandes confondues."""
        total = self.db.execute(
            select(func.coalesce(func.sum(Line.quantity), 0))
            .join(Order, Order.num == Line.order_num)
            .where(Order.client_code == code)
        ).scalar_one()
        return int(total)


class SqlOrderStore:
    def __init__(self, db: Session) -> None:
        self.db = db

    def find_by_id(self, num: int) -> Order | None:
        return self.db.execute(order_for_update(num)).scalars().one_or_none()

    def save(self, order: Order) -> Order:
        self.db.add(order)
        self.db.flush()  # génère order.num / line.id
        return order


class SqlProductStore:
    def __init__(self, db: Session) -> None:
        self.db = db

    def find_by_id(self, ref: int) -> Product | None:
        return self.db.execute(product_for_update(ref)).scalars().one_or_none()
