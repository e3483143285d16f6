import logging
from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from usinagem.customers.interfaces.repositories import AbstractCustomerRepository
from usinagem.customers.repositories import SQLAlchemyCustomerRepository
from usinagem.customers.service import CustomerService
from usinagem.database import get_db_session
from usinagem.history.dependencies import HistoryServiceDep

logger = logging.getLogger(__name__)


def get_customer_repository(
    session: Annotated[AsyncSession, Depends(get_db_session)]
) -> AbstractCustomerRepository:
    logger.debug("Fourniture de SQLAlchemyCustomerRepository")
    return SQLAlchemyCustomerRepository(db_session=session)


CustomerRepositoryDep = Annotated[AbstractCustomerRepository, Depends(get_customer_repository)]


def get_customer_service(
    customer_repo: CustomerRepositoryDep,
    history_service: HistoryServiceDep,
) -> CustomerService:
    return CustomerService(customer_repository=customer_repo, history_service=history_service)


CustomerServiceDep = Annotated[CustomerService, Depends(get_customer_service)]
