from abc import ABC, abstractmethod
from typing import Any, Dict, Optional, Tuple

from usinagem.orders.models import Order
from usinagem.quotes.models import Quote


class AbstractQuoteRepository(ABC):
    """Interface abstraite pour le repository des devis."""

    @abstractmethod
    async def get_by_id(self, quote_id: str) -> Optional[Quote]:
        """Récupère un devis par son ID."""
        pass

    @abstractmethod
    async def create(self, *, quote_data: Dict[str, Any]) -> Quote:
        """Crée un nouveau devis."""
        pass

    @abstractmethod
    async def update(self, *, quote: Quote, changes: Dict[str, Any]) -> Quote:
        """Applique une mise à jour partielle à un devis existant."""
        pass

    @abstractmethod
    async def convert_to_order(
        self, *, quote: Quote, order_data: Dict[str, Any], quote_status: str
    ) -> Tuple[Quote, Order]:
        """Crée la commande et marque le devis converti dans une seule transaction."""
        pass
