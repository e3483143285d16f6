from abc import ABC, abstractmethod
from typing import Any, Dict, List, Tuple

from usinagem.history.models import HistoryEntryCreate, HistoryRead


class AbstractHistoryRepository(ABC):
    """Interface abstraite pour le repository de l'historique (append-only)."""

    @abstractmethod
    async def add(self, entry_data: HistoryEntryCreate) -> None:
        """Ajoute une entrée d'historique."""
        pass

    @abstractmethod
    async def list_paginated(
        self, *, filters: Dict[str, Any], offset: int, limit: int
    ) -> Tuple[List[HistoryRead], int]:
        """Liste les entrées filtrées, les plus récentes d'abord, avec le total."""
        pass

    @abstractmethod
    async def list_for_entity(self, *, entity: str, entity_id: str, limit: int) -> List[HistoryRead]:
        """Liste les entrées les plus récentes d'une entité donnée."""
        pass
