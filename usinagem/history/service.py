import json
import logging
import math
from typing import Any, List, Optional

from pydantic import BaseModel

from usinagem.auth.models import Actor
from usinagem.config import settings
from usinagem.history.constants import HISTORY_ENTITIES, HistoryAction, HistoryEntity, compose_action
from usinagem.history.exceptions import InvalidHistoryEntityException
from usinagem.history.interfaces.repositories import AbstractHistoryRepository
from usinagem.history.models import HistoryEntryCreate, HistoryPagination, HistoryRead, PaginatedHistoryRead

logger = logging.getLogger(__name__)


def _to_snapshot(value: Any) -> Any:
    """Convertit un schéma Pydantic en dict JSON (camelCase), laisse le reste intact."""
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json", by_alias=True)
    return value


def serialize_snapshots(before: Any, after: Any) -> str:
    return json.dumps(
        {"antigos": _to_snapshot(before), "novos": _to_snapshot(after)},
        default=str,
        ensure_ascii=False,
    )


class HistoryService:
    """Service d'audit: enregistrement best-effort et consultation de l'historique."""

    def __init__(self, history_repo: AbstractHistoryRepository):
        self.history_repo = history_repo

    def _normalize_entity(self, entity: str) -> str:
        normalized = entity.upper()
        if normalized not in HISTORY_ENTITIES:
            raise InvalidHistoryEntityException(entity=entity, allowed=HISTORY_ENTITIES)
        return normalized

    async def record(
        self,
        action: HistoryAction,
        entity: HistoryEntity,
        entity_id: str,
        actor: Optional[Actor] = None,
        before: Any = None,
        after: Any = None,
    ) -> None:
        """
        Enregistre une entrée d'historique.

        Ne lève jamais: un échec d'audit est journalisé mais ne doit pas
        faire échouer l'opération principale.
        """
        acao = compose_action(action, entity)
        try:
            entry = HistoryEntryCreate(
                acao=acao,
                entidade=entity.value,
                entidade_id=str(entity_id),
                dados=serialize_snapshots(before, after),
                usuario_id=actor.id if actor else None,
                usuario_nome=actor.name if actor else None,
            )
            await self.history_repo.add(entry)
            logger.debug(f"[HistoryService] {acao} enregistré pour {entity.value} {entity_id}.")
        except Exception as e:
            logger.error(f"[HistoryService] Erreur enregistrement historique {acao} ({entity_id}): {e}", exc_info=True)

    async def list_history(
        self,
        *,
        entity: Optional[str] = None,
        entity_id: Optional[str] = None,
        action: Optional[str] = None,
        page: int = 1,
        page_size: int = settings.DEFAULT_PAGE_SIZE,
    ) -> PaginatedHistoryRead:
        """Liste l'historique filtré (entité exacte, id exact, action par sous-chaîne), paginé."""
        filters = {}
        if entity:
            filters["entidade"] = self._normalize_entity(entity)
        if entity_id:
            filters["entidade_id"] = entity_id
        if action:
            filters["acao__contains"] = action.upper()

        logger.debug(f"[HistoryService] Listage historique page={page}, page_size={page_size}, filtres={filters}")
        entries, total = await self.history_repo.list_paginated(
            filters=filters,
            offset=(page - 1) * page_size,
            limit=page_size,
        )
        return PaginatedHistoryRead(
            dados=entries,
            paginacao=HistoryPagination(
                pagina=page,
                por_pagina=page_size,
                total=total,
                total_paginas=math.ceil(total / page_size),
            ),
        )

    async def list_for_entity(self, entity: str, entity_id: str, limit: int) -> List[HistoryRead]:
        """Retourne les `limit` entrées les plus récentes d'une entité."""
        normalized = self._normalize_entity(entity)
        return await self.history_repo.list_for_entity(entity=normalized, entity_id=entity_id, limit=limit)
