import logging
from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from usinagem.database import get_db_session
from usinagem.history.interfaces.repositories import AbstractHistoryRepository
from usinagem.history.repositories import SQLAlchemyHistoryRepository
from usinagem.history.service import HistoryService

logger = logging.getLogger(__name__)


def get_history_repository(
    session: Annotated[AsyncSession, Depends(get_db_session)]
) -> AbstractHistoryRepository:
    """Fournit une instance du repository d'historique (implémentation SQLAlchemy)."""
    logger.debug("Fourniture de SQLAlchemyHistoryRepository")
    return SQLAlchemyHistoryRepository(db_session=session)


HistoryRepositoryDep = Annotated[AbstractHistoryRepository, Depends(get_history_repository)]


def get_history_service(history_repo: HistoryRepositoryDep) -> HistoryService:
    """Fournit une instance du service d'historique."""
    return HistoryService(history_repo=history_repo)


HistoryServiceDep = Annotated[HistoryService, Depends(get_history_service)]
