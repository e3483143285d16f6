from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

from usinagem.orders.models import Order


class AbstractOrderRepository(ABC):
    """Interface abstraite pour le repository des commandes."""

    @abstractmethod
    async def get_by_id(self, order_id: str) -> Optional[Order]:
        """Récupère une commande par son ID."""
        pass

    @abstractmethod
    async def find_active_for_item(self, *, item_id: str, terminal_statuses: List[str]) -> Optional[Order]:
        """Retourne une commande de l'item dont le statut n'est pas terminal, s'il y en a une."""
        pass

    @abstractmethod
    async def find_latest_for_item(self, *, item_id: str) -> Optional[Order]:
        """Retourne la commande la plus récente de l'item."""
        pass

    @abstractmethod
    async def create(self, *, order_data: Dict[str, Any]) -> Order:
        """Crée une commande."""
        pass

    @abstractmethod
    async def update_status(self, *, order: Order, status: str) -> Order:
        """Met à jour le statut d'une commande existante."""
        pass

    @abstractmethod
    async def delete(self, *, order: Order) -> None:
        """Supprime une commande existante."""
        pass
