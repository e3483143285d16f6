import logging
from typing import Any, Dict, List, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select

from usinagem.orders.exceptions import (
    OrderCreationFailedException,
    OrderDeletionException,
    OrderUpdateException,
)
from usinagem.orders.interfaces.repositories import AbstractOrderRepository
from usinagem.orders.models import Order

logger = logging.getLogger(__name__)


class SQLAlchemyOrderRepository(AbstractOrderRepository):
    """Implémentation SQLAlchemy du repository des commandes."""

    def __init__(self, db_session: AsyncSession):
        self.db = db_session

    async def get_by_id(self, order_id: str) -> Optional[Order]:
        logger.debug(f"[OrderRepository] Récupération commande ID: {order_id}")
        return await self.db.get(Order, order_id)

    async def find_active_for_item(self, *, item_id: str, terminal_statuses: List[str]) -> Optional[Order]:
        statement = (
            select(Order)
            .where(Order.item_id == item_id)
            .where(Order.status.not_in(terminal_statuses))
            .order_by(Order.created_at.desc())
            .limit(1)
        )
        result = await self.db.execute(statement)
        return result.scalars().first()

    async def find_latest_for_item(self, *, item_id: str) -> Optional[Order]:
        statement = (
            select(Order)
            .where(Order.item_id == item_id)
            .order_by(Order.created_at.desc())
            .limit(1)
        )
        result = await self.db.execute(statement)
        return result.scalars().first()

    async def create(self, *, order_data: Dict[str, Any]) -> Order:
        logger.debug(f"[OrderRepository] Création commande pour item {order_data.get('item_id')}")
        try:
            db_order = Order(**order_data)
            self.db.add(db_order)
            await self.db.commit()
            await self.db.refresh(db_order)
            logger.info(f"[OrderRepository] Commande ID {db_order.id} créée.")
            return db_order
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error(f"[OrderRepository] Erreur création commande: {e}", exc_info=True)
            raise OrderCreationFailedException(detail=f"Database error during order creation: {e}")

    async def update_status(self, *, order: Order, status: str) -> Order:
        order_id = order.id
        logger.debug(f"[OrderRepository] MAJ statut commande ID: {order_id} vers '{status}'")
        try:
            order.status = status
            self.db.add(order)
            await self.db.commit()
            await self.db.refresh(order)
            return order
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error(f"[OrderRepository] Erreur MAJ statut commande {order_id}: {e}", exc_info=True)
            raise OrderUpdateException(order_id=order_id, detail=str(e))

    async def delete(self, *, order: Order) -> None:
        order_id = order.id
        logger.debug(f"[OrderRepository] Suppression commande ID: {order_id}")
        try:
            await self.db.delete(order)
            await self.db.commit()
            logger.info(f"[OrderRepository] Commande ID {order_id} supprimée.")
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error(f"[OrderRepository] Erreur suppression commande {order_id}: {e}", exc_info=True)
            raise OrderDeletionException(order_id=order_id, detail=str(e))
