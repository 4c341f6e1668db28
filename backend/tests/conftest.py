import os

# Les tests ne touchent jamais la base Postgres locale
os.environ.setdefault("DATABASE_URL", "sqlite+pysqlite:///:memory:")

from datetime import date
from decimal import Decimal
from types import SimpleNamespace

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from backend.app.db.base import Base
from backend.app.db.models.models_v1 import Client, Product, Order, Line


@pytest.fixture(scope="function")
def db_session() -> Session:
    """
    Session DB isolée par test.

    Base SQLite en mémoire créée pour le test puis jetée :
    rien ne survit d'un test à l'autre, même après commit().
    """
    engine = create_engine(
        "sqlite+pysqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)

    session = sessionmaker(bind=engine, autoflush=False, autocommit=False)()
    try:
        yield session
    finally:
        session.close()
        engine.dispose()


@pytest.fixture
def comptoir(db_session):
    """
    Jeu de données de référence :
    - ALFKI a déjà commandé 150 articles (commande historique expédiée)
    - BONAP n'a jamais commandé
    - produits 93..97, le 97 sans stock
    - une commande ouverte et une commande déjà expédiée pour ALFKI
    """
    alfki = Client(
        code="ALFKI",
        company="Alfreds Futterkiste",
        contact="Maria Anders",
        address="Obere Str. 57",
        city="Berlin",
        country="Germany",
    )
    bonap = Client(
        code="BONAP",
        company="Bon app'",
        address="12, rue des Bouchers",
        city="Marseille",
        country="France",
    )
    db_session.add_all([alfki, bonap])

    products = {
        93: Product(ref=93, name="Chai", unit_price=Decimal("18.00"), units_in_stock=50, units_on_order=0),
        94: Product(ref=94, name="Chang", unit_price=Decimal("19.00"), units_in_stock=17, units_on_order=0),
        95: Product(ref=95, name="Aniseed Syrup", unit_price=Decimal("10.00"), units_in_stock=13, units_on_order=0),
        96: Product(ref=96, name="Cajun Seasoning", unit_price=Decimal("22.00"), units_in_stock=53, units_on_order=0),
        97: Product(ref=97, name="Gumbo Mix", unit_price=Decimal("21.35"), units_in_stock=0, units_on_order=0),
    }
    db_session.add_all(products.values())
    db_session.flush()

    history = Order(
        client=alfki,
        created_on=date(2025, 3, 1),
        shipped_on=date(2025, 3, 4),
        delivery_address=alfki.address,
        discount=Decimal("0"),
    )
    history.lines.append(Line(product=products[96], quantity=150))

    shipped = Order(
        client=alfki,
        created_on=date(2026, 1, 5),
        shipped_on=date(2026, 1, 8),
        delivery_address=alfki.address,
        discount=Decimal("0"),
    )
    open_order = Order(
        client=alfki,
        created_on=date(2026, 2, 1),
        delivery_address=alfki.address,
        discount=Decimal("0"),
    )
    db_session.add_all([history, shipped, open_order])
    db_session.commit()

    return SimpleNamespace(
        alfki=alfki,
        bonap=bonap,
        products=products,
        shipped_order_num=shipped.num,
        open_order_num=open_order.num,
    )
