"""
Erreurs métier du service commandes.

NotFound      : une référence (client, commande, produit) n'existe pas.
InvalidState  : une règle métier est violée (commande déjà expédiée,
                quantité non positive, stock insuffisant...).

Aucune de ces erreurs n'est transitoire : l'opération en cours est abandonnée
et l'appelant doit annuler la transaction.
"""

from __future__ import annotations


class OrderServiceError(Exception):
    """Base class for every business error raised by the services."""


class NotFound(OrderServiceError):
    def __init__(self, entity: str, key: object) -> None:
        self.entity = entity
        self.key = key
        super().__init__(f"{entity} {key!r} not found")


class InvalidState(OrderServiceError):
    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(reason)
