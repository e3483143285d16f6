import logging
from typing import Any, Dict, Optional

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select

from usinagem.customers.exceptions import (
    CustomerCreationFailedException,
    CustomerDeletionException,
    DuplicateCustomerEmailException,
)
from usinagem.customers.interfaces.repositories import AbstractCustomerRepository
from usinagem.customers.models import Customer

logger = logging.getLogger(__name__)


class SQLAlchemyCustomerRepository(AbstractCustomerRepository):
    """Implémentation SQLAlchemy du repository des clients."""

    def __init__(self, db_session: AsyncSession):
        self.db = db_session

    async def get_by_id(self, customer_id: str) -> Optional[Customer]:
        logger.debug(f"[CustomerRepository] Récupération client ID: {customer_id}")
        return await self.db.get(Customer, customer_id)

    async def get_by_email(self, email: str) -> Optional[Customer]:
        result = await self.db.execute(select(Customer).where(Customer.email == email))
        return result.scalars().first()

    async def create(self, *, customer_data: Dict[str, Any]) -> Customer:
        email = customer_data.get("email")
        try:
            db_customer = Customer(**customer_data)
            self.db.add(db_customer)
            await self.db.commit()
            await self.db.refresh(db_customer)
            return db_customer
        except IntegrityError:
            # Email inséré entre la vérification et le commit
            await self.db.rollback()
            raise DuplicateCustomerEmailException(email=email)
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error(f"[CustomerRepository] Erreur création client {email}: {e}", exc_info=True)
            raise CustomerCreationFailedException(detail=f"Database error during customer creation: {e}")

    async def delete(self, *, customer: Customer) -> None:
        customer_id = customer.id
        try:
            await self.db.delete(customer)
            await self.db.commit()
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error(f"[CustomerRepository] Erreur suppression client {customer_id}: {e}", exc_info=True)
            raise CustomerDeletionException(customer_id=customer_id, detail=str(e))
