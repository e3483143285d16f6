import logging
from typing import List, Optional

from fastapi import APIRouter, HTTPException, Path, Query, status

from usinagem.config import settings
from usinagem.core.errors import internal_error
from usinagem.history.dependencies import HistoryServiceDep
from usinagem.history.exceptions import InvalidHistoryEntityException
from usinagem.history.models import HistoryRead, PaginatedHistoryRead

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/historico",
    tags=["Historico"],
)


@router.get("", response_model=PaginatedHistoryRead)
async def list_history(
    history_service: HistoryServiceDep,
    entidade: Optional[str] = Query(None, description="Entité (ITEM, PEDIDO, ORCAMENTO...)"),
    entidade_id: Optional[str] = Query(None, alias="entidadeId"),
    acao: Optional[str] = Query(None, description="Filtre par sous-chaîne sur l'action"),
    pagina: int = Query(1, ge=1),
    por_pagina: int = Query(settings.DEFAULT_PAGE_SIZE, ge=1, le=settings.MAX_PAGE_SIZE, alias="porPagina"),
):
    """Liste paginée de l'historique, les entrées les plus récentes d'abord."""
    logger.info(f"API list_history: entidade={entidade}, entidadeId={entidade_id}, acao={acao}, pagina={pagina}")
    try:
        return await history_service.list_history(
            entity=entidade,
            entity_id=entidade_id,
            action=acao,
            page=pagina,
            page_size=por_pagina,
        )
    except InvalidHistoryEntityException as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except Exception as e:
        logger.error(f"Erreur API list_history: {e}", exc_info=True)
        raise internal_error("Erro ao buscar histórico", e)


@router.get("/{entidade}/{entidade_id}", response_model=List[HistoryRead])
async def list_entity_history(
    history_service: HistoryServiceDep,
    entidade: str = Path(..., title="Entité"),
    entidade_id: str = Path(..., title="ID de l'entité"),
):
    """Retourne les entrées les plus récentes d'une entité donnée."""
    logger.info(f"API list_entity_history: {entidade}/{entidade_id}")
    try:
        return await history_service.list_for_entity(
            entidade, entidade_id, limit=settings.HISTORY_ENTITY_LIMIT
        )
    except InvalidHistoryEntityException as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except Exception as e:
        logger.error(f"Erreur API list_entity_history {entidade}/{entidade_id}: {e}", exc_info=True)
        raise internal_error("Erro ao buscar histórico", e)
