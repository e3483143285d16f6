import logging
from typing import Any, Dict, List, Tuple

from fastcrud import FastCRUD
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from usinagem.history.exceptions import HistoryRecordingException
from usinagem.history.interfaces.repositories import AbstractHistoryRepository
from usinagem.history.models import HistoryEntry, HistoryEntryCreate, HistoryRead

logger = logging.getLogger(__name__)

# Les plus récentes d'abord; l'id départage les entrées créées dans la même microseconde
SORT_COLUMNS = ["created_at", "id"]
SORT_ORDERS = ["desc", "desc"]


class SQLAlchemyHistoryRepository(AbstractHistoryRepository):
    """Implémentation SQLAlchemy/FastCRUD du repository de l'historique."""

    def __init__(self, db_session: AsyncSession):
        self.db = db_session
        self.crud = FastCRUD(HistoryEntry)

    async def add(self, entry_data: HistoryEntryCreate) -> None:
        logger.debug(f"[HistoryRepository] Ajout entrée {entry_data.acao} pour {entry_data.entidade_id}")
        try:
            await self.crud.create(db=self.db, object=entry_data)
        except SQLAlchemyError as e:
            await self.db.rollback()
            raise HistoryRecordingException(detail=f"Database error while recording history: {e}")

    async def list_paginated(
        self, *, filters: Dict[str, Any], offset: int, limit: int
    ) -> Tuple[List[HistoryRead], int]:
        logger.debug(f"[HistoryRepository] Listage filtres={filters}, offset={offset}, limit={limit}")
        result = await self.crud.get_multi(
            db=self.db,
            offset=offset,
            limit=limit,
            sort_columns=SORT_COLUMNS,
            sort_orders=SORT_ORDERS,
            **filters,
        )
        entries = [HistoryRead.model_validate(row) for row in result.get("data", [])]
        return entries, result.get("total_count", 0)

    async def list_for_entity(self, *, entity: str, entity_id: str, limit: int) -> List[HistoryRead]:
        entries, _ = await self.list_paginated(
            filters={"entidade": entity, "entidade_id": entity_id},
            offset=0,
            limit=limit,
        )
        return entries
