"""
Ajout de lignes sur une commande non expédiée.

Le stock est réservé à l'ajout : units_in_stock diminue et units_on_order
augmente de la quantité commandée. Toutes les vérifications précèdent
toutes les mutations.
"""

from __future__ import annotations

import logging

from pydantic import PositiveInt, validate_call

from backend.app.db.models.models_v1 import Line
from backend.services.errors import InvalidState, NotFound
from backend.services.stores import OrderStore, ProductStore

logger = logging.getLogger(__name__)


class OrderLineManager:
    def __init__(self, orders: OrderStore, products: ProductStore) -> None:
        self.orders = orders
        self.products = products

    @validate_call
    def add_line(self, order_num: int, product_ref: int, quantity: PositiveInt) -> Line:
        """
        Enregistre une nouvelle ligne pour une commande connue par sa clé.

        Règles métier :
        - le produit référencé doit exister
        - la commande doit exister
        - la commande ne doit pas être déjà expédiée
        - la quantité doit être positive (refusée dès l'appel : ValidationError)
        - le stock du produit doit être suffisant
        """
        product = self.products.find_by_id(product_ref)
        if product is None:
            raise NotFound("Product", product_ref)

        order = self.orders.find_by_id(order_num)
        if order is None:
            raise NotFound("Order", order_num)

        if order.shipped_on is not None:
            raise InvalidState(f"Order {order_num} already shipped on {order.shipped_on}")
        if quantity < 0:
            raise InvalidState("Quantity must be positive")
        if quantity > product.units_in_stock:
            raise InvalidState(
                f"Insufficient stock for product {product_ref} "
                f"(requested={quantity}, in_stock={product.units_in_stock})"
            )

        product.units_in_stock -= quantity
        line = Line(product=product, quantity=quantity)
        product.units_on_order += line.quantity
        order.lines.append(line)

        self.orders.save(order)
        logger.info(
            "line %s added to order %s: product %s x %d",
            line.id,
            order_num,
            product_ref,
            quantity,
        )
        return line
