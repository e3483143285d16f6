import logging
from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from usinagem.database import get_db_session
from usinagem.history.dependencies import HistoryServiceDep
from usinagem.orders.dependencies import OrderRepositoryDep
from usinagem.quotes.config import ConversionPolicy
from usinagem.quotes.interfaces.repositories import AbstractQuoteRepository
from usinagem.quotes.repositories import SQLAlchemyQuoteRepository
from usinagem.quotes.service import QuoteService

logger = logging.getLogger(__name__)


def get_quote_repository(
    session: Annotated[AsyncSession, Depends(get_db_session)]
) -> AbstractQuoteRepository:
    """Fournit une instance du repository de devis."""
    logger.debug("Fourniture de SQLAlchemyQuoteRepository")
    return SQLAlchemyQuoteRepository(db_session=session)


QuoteRepositoryDep = Annotated[AbstractQuoteRepository, Depends(get_quote_repository)]


def get_conversion_policy() -> ConversionPolicy:
    """Paramètres de conversion lus depuis les settings."""
    return ConversionPolicy.from_settings()


ConversionPolicyDep = Annotated[ConversionPolicy, Depends(get_conversion_policy)]


def get_quote_service(
    quote_repo: QuoteRepositoryDep,
    order_repo: OrderRepositoryDep,
    history_service: HistoryServiceDep,
    policy: ConversionPolicyDep,
) -> QuoteService:
    return QuoteService(
        quote_repository=quote_repo,
        order_repository=order_repo,
        history_service=history_service,
        policy=policy,
    )


QuoteServiceDep = Annotated[QuoteService, Depends(get_quote_service)]
