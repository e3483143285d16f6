import logging
from typing import Optional

from usinagem.auth.models import Actor
from usinagem.auth.security import get_password_hash
from usinagem.customers.exceptions import CustomerNotFoundException, DuplicateCustomerEmailException
from usinagem.customers.interfaces.repositories import AbstractCustomerRepository
from usinagem.customers.models import CustomerCreate, CustomerRead
from usinagem.history.constants import HistoryAction, HistoryEntity
from usinagem.history.service import HistoryService

logger = logging.getLogger(__name__)


class CustomerService:
    """Service de gestion des comptes clients."""

    def __init__(self, customer_repository: AbstractCustomerRepository, history_service: HistoryService):
        self.customer_repository = customer_repository
        self.history_service = history_service

    async def create_customer(self, customer_data: CustomerCreate, actor: Optional[Actor] = None) -> CustomerRead:
        """Crée un compte client actif; l'email doit être unique."""
        email = str(customer_data.email)
        if await self.customer_repository.get_by_email(email):
            logger.warning(f"[CustomerService] Email déjà utilisé: {email}")
            raise DuplicateCustomerEmailException(email=email)

        data = customer_data.model_dump(exclude={"password"})
        data["email"] = email
        data["password_hash"] = get_password_hash(customer_data.password)
        data["status"] = True
        created = CustomerRead.model_validate(await self.customer_repository.create(customer_data=data))
        logger.info(f"[CustomerService] Client ID {created.id} créé ({created.role}).")

        await self.history_service.record(
            HistoryAction.CRIAR, HistoryEntity.CLIENTE, created.id, actor, None, created
        )
        return created

    async def delete_customer(self, customer_id: str, actor: Optional[Actor] = None) -> None:
        customer = await self.customer_repository.get_by_id(customer_id)
        if not customer:
            raise CustomerNotFoundException(customer_id)

        before = CustomerRead.model_validate(customer)
        await self.customer_repository.delete(customer=customer)
        logger.info(f"[CustomerService] Client ID {customer_id} supprimé.")

        await self.history_service.record(
            HistoryAction.DELETAR, HistoryEntity.CLIENTE, customer_id, actor, before, None
        )
