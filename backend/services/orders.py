"""
Cycle de vie des commandes : création (avec remise fidélité) et expédition.

Les méthodes ne font jamais commit : l'appelant possède la transaction
(commit si tout passe, rollback sur n'importe quelle exception).
"""

from __future__ import annotations

import logging
from datetime import date
from decimal import Decimal

from backend.app.db.models.models_v1 import Order
from backend.services.errors import InvalidState, NotFound
from backend.services.stores import ClientStore, OrderStore, ProductStore

logger = logging.getLogger(__name__)

# Au-delà de ce nombre d'articles déjà commandés, le client a droit à la remise
DISCOUNT_THRESHOLD = 100
LOYALTY_DISCOUNT = Decimal("0.15")


class OrderLifecycleManager:
    def __init__(self, clients: ClientStore, orders: OrderStore, products: ProductStore) -> None:
        self.clients = clients
        self.orders = orders
        self.products = products

    def create_order(self, client_code: str) -> Order:
        """
        Enregistre une nouvelle commande pour un client connu par sa clé.

        Règles métier :
        - le client doit exister
        - l'adresse de livraison est initialisée avec l'adresse du client
        - si le client a déjà commandé plus de 100 articles, remise de 15%
        """
        client = self.clients.find_by_id(client_code)
        if client is None:
            raise NotFound("Client", client_code)

        order = Order(
            client=client,
            created_on=date.today(),
            delivery_address=client.address,
            discount=Decimal("0"),
        )

        ordered_articles = self.clients.ordered_article_count(client_code)
        if ordered_articles > DISCOUNT_THRESHOLD:
            order.discount = LOYALTY_DISCOUNT

        self.orders.save(order)
        logger.info(
            "order %s created for client %s (ordered_articles=%d, discount=%s)",
            order.num,
            client_code,
            ordered_articles,
            order.discount,
        )
        return order

    def record_shipment(self, order_num: int) -> Order:
        """
        Enregistre l'expédition d'une commande connue par sa clé.

        Règles métier :
        - la commande doit exister
        - la commande ne doit pas être déjà expédiée (shipped_on doit être NULL)
        - shipped_on reçoit la date du jour
        - pour chaque ligne, units_in_stock du produit est décrémenté de la quantité
        """
        order = self.orders.find_by_id(order_num)
        if order is None:
            raise NotFound("Order", order_num)
        if order.shipped_on is not None:
            raise InvalidState(f"Order {order_num} already shipped on {order.shipped_on}")

        # Une ligne à 0 ne devrait jamais exister (refusée à l'ajout).
        # Vérifié avant toute mutation.
        for line in order.lines:
            if line.quantity == 0:
                raise InvalidState(f"Product {line.product_ref} out of stock")

        # verrous produits pris par ref croissante, avant toute décrémentation
        products = {}
        for ref in sorted({line.product_ref for line in order.lines}):
            product = self.products.find_by_id(ref)
            if product is None:
                raise NotFound("Product", ref)
            products[ref] = product

        order.shipped_on = date.today()
        for line in order.lines:
            # pas de plancher à 0, cf. DESIGN.md
            products[line.product_ref].units_in_stock -= line.quantity

        self.orders.save(order)
        logger.info("order %s shipped (%d lines)", order.num, len(order.lines))
        return order
