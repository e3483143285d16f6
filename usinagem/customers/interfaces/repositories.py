from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

from usinagem.customers.models import Customer


class AbstractCustomerRepository(ABC):
    """Interface abstraite pour le repository des clients."""

    @abstractmethod
    async def get_by_id(self, customer_id: str) -> Optional[Customer]:
        pass

    @abstractmethod
    async def get_by_email(self, email: str) -> Optional[Customer]:
        pass

    @abstractmethod
    async def create(self, *, customer_data: Dict[str, Any]) -> Customer:
        """Crée un client à partir de données déjà hachées."""
        pass

    @abstractmethod
    async def delete(self, *, customer: Customer) -> None:
        pass
