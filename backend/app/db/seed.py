from __future__ import annotations

from datetime import date
from decimal import Decimal

from sqlalchemy import select

from backend.app.db.session import SessionLocal
from backend.app.db.models.models_v1 import Client, Product, Order


PRODUCTS = [
    # ref, name, unit_price, units_in_stock, discontinued
    (93, "Chai", Decimal("18.00"), 50, False),
    (94, "Chang", Decimal("19.00"), 17, False),
    (95, "Aniseed Syrup", Decimal("10.00"), 13, False),
    (96, "Chef Anton's Cajun Seasoning", Decimal("22.00"), 53, False),
    (97, "Chef Anton's Gumbo Mix", Decimal("21.35"), 0, True),
]


def run_seed():
    db = SessionLocal()
    try:
        # 1) Client "ALFKI"
        client = db.get(Client, "ALFKI")
        if not client:
            client = Client(
                code="ALFKI",
                company="Alfreds Futterkiste",
                contact="Maria Anders",
                address="Obere Str. 57",
                city="Berlin",
                country="Germany",
            )
            db.add(client)
            db.commit()

        # 2) Produits
        for ref, name, price, stock, discontinued in PRODUCTS:
            if not db.get(Product, ref):
                db.add(
                    Product(
                        ref=ref,
                        name=name,
                        unit_price=price,
                        units_in_stock=stock,
                        units_on_order=0,
                        discontinued=discontinued,
                    )
                )
        db.commit()

        # 3) Une commande déjà expédiée + une commande ouverte
        existing = db.scalar(select(Order).where(Order.client_code == client.code))
        if not existing:
            db.add(
                Order(
                    client_code=client.code,
                    created_on=date(2026, 1, 5),
                    shipped_on=date(2026, 1, 8),
                    delivery_address=client.address,
                    discount=Decimal("0"),
                )
            )
            db.add(
                Order(
                    client_code=client.code,
                    created_on=date.today(),
                    delivery_address=client.address,
                    discount=Decimal("0"),
                )
            )
            db.commit()

        print("SEED OK: client=ALFKI, products=93..97")
    finally:
        db.close()


if __name__ == "__main__":
    run_seed()
