import logging
from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from usinagem.database import get_db_session
from usinagem.history.dependencies import HistoryServiceDep
from usinagem.orders.interfaces.repositories import AbstractOrderRepository
from usinagem.orders.repositories import SQLAlchemyOrderRepository
from usinagem.orders.service import OrderService
from usinagem.quotes.repositories import SQLAlchemyQuoteRepository

logger = logging.getLogger(__name__)

SessionDep = Annotated[AsyncSession, Depends(get_db_session)]


def get_order_repository(session: SessionDep) -> AbstractOrderRepository:
    """Fournit une instance du repository de commandes."""
    logger.debug("Fourniture de SQLAlchemyOrderRepository")
    return SQLAlchemyOrderRepository(db_session=session)


OrderRepositoryDep = Annotated[AbstractOrderRepository, Depends(get_order_repository)]


def get_order_service(
    session: SessionDep,
    order_repo: OrderRepositoryDep,
    history_service: HistoryServiceDep,
) -> OrderService:
    # Le devis est lu sur la même session (une session par requête)
    return OrderService(
        order_repository=order_repo,
        quote_repository=SQLAlchemyQuoteRepository(db_session=session),
        history_service=history_service,
    )


OrderServiceDep = Annotated[OrderService, Depends(get_order_service)]
