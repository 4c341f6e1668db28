"""
Deux sessions (deux requêtes) sur la même base fichier.

SQLite n'a pas de FOR UPDATE : ces tests vérifient que le stock relu sous
verrou est bien celui de la base au moment du verrou, et pas une valeur
chargée plus tôt dans la session.
"""

from datetime import date

import pytest
from sqlalchemy import create_engine, select
from sqlalchemy.dialects import postgresql
from sqlalchemy.orm import sessionmaker

from backend.app.db.base import Base
from backend.app.db.models.models_v1 import Client, Line, Order, Product
from backend.services.errors import InvalidState
from backend.services.order_lines import OrderLineManager
from backend.services.orders import OrderLifecycleManager
from backend.services.stores import (
    SqlClientStore,
    SqlOrderStore,
    SqlProductStore,
    order_for_update,
    product_for_update,
)


@pytest.fixture
def sessions(tmp_path):
    engine = create_engine(f"sqlite+pysqlite:///{tmp_path / 'comptoir.db'}")
    Base.metadata.create_all(bind=engine)
    factory = sessionmaker(bind=engine, autoflush=False, autocommit=False)

    opened = []

    def _open():
        s = factory()
        opened.append(s)
        return s

    try:
        yield _open
    finally:
        for s in opened:
            s.close()
        engine.dispose()


@pytest.fixture
def shared_stock(sessions):
    """Produit 93 (stock 50), commande A avec 3 x 93, commande B vide."""
    db = sessions()
    client = Client(code="ALFKI", company="Alfreds Futterkiste", address="Obere Str. 57")
    product = Product(ref=93, name="Chai", units_in_stock=50, units_on_order=0)
    order_a = Order(client=client, created_on=date(2026, 2, 1), delivery_address=client.address)
    order_a.lines.append(Line(product=product, quantity=3))
    order_b = Order(client=client, created_on=date(2026, 2, 2), delivery_address=client.address)
    db.add_all([client, product, order_a, order_b])
    db.commit()
    return order_a.num, order_b.num


def _stock(sessions, ref):
    return sessions().execute(select(Product.units_in_stock).where(Product.ref == ref)).scalar_one()


def test_store_lookups_lock_rows_on_postgres():
    for stmt in (order_for_update(1), product_for_update(93)):
        sql = str(stmt.compile(dialect=postgresql.dialect()))
        assert "FOR UPDATE" in sql


def test_shipment_keeps_a_reservation_committed_meanwhile(sessions, shared_stock):
    order_a, order_b = shared_stock

    # session A a déjà lu le produit 93 (stock 50)
    db_a = sessions()
    assert db_a.get(Order, order_a).lines[0].product.units_in_stock == 50

    # session B réserve 10 unités et commit entre-temps
    db_b = sessions()
    OrderLineManager(SqlOrderStore(db_b), SqlProductStore(db_b)).add_line(order_b, 93, 10)
    db_b.commit()

    lifecycle = OrderLifecycleManager(SqlClientStore(db_a), SqlOrderStore(db_a), SqlProductStore(db_a))
    lifecycle.record_shipment(order_a)
    db_a.commit()

    # 50 - 10 (réservation B) - 3 (expédition A)
    assert _stock(sessions, 93) == 37


def test_two_reservations_cannot_oversell(sessions, shared_stock):
    order_a, order_b = shared_stock

    db_a = sessions()
    assert db_a.get(Product, 93).units_in_stock == 50

    db_b = sessions()
    OrderLineManager(SqlOrderStore(db_b), SqlProductStore(db_b)).add_line(order_b, 93, 45)
    db_b.commit()

    # A a lu 50 mais il ne reste que 5 unités
    with pytest.raises(InvalidState, match="Insufficient stock"):
        OrderLineManager(SqlOrderStore(db_a), SqlProductStore(db_a)).add_line(order_a, 93, 10)
    db_a.rollback()

    assert _stock(sessions, 93) == 5
