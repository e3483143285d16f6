import logging
from typing import Optional

from usinagem.auth.models import Actor
from usinagem.history.constants import HistoryAction, HistoryEntity
from usinagem.history.service import HistoryService
from usinagem.orders.config import (
    DEFAULT_ORDER_STATUS,
    ORDER_STATUS_DISPLAY,
    ORDER_STATUS_UPDATE_ALLOWED,
    ORDER_STATUSES,
)
from usinagem.orders.exceptions import InvalidOrderStatusException, OrderNotFoundException
from usinagem.orders.interfaces.repositories import AbstractOrderRepository
from usinagem.orders.models import OrderCreate, OrderRead
from usinagem.quotes.exceptions import QuoteNotFoundException
from usinagem.quotes.interfaces.repositories import AbstractQuoteRepository

logger = logging.getLogger(__name__)


class OrderService:
    """Service applicatif pour la gestion des commandes (pedidos)."""

    def __init__(
        self,
        order_repository: AbstractOrderRepository,
        quote_repository: AbstractQuoteRepository,
        history_service: HistoryService,
    ):
        self.order_repository = order_repository
        self.quote_repository = quote_repository
        self.history_service = history_service

    async def get_order(self, order_id: str) -> OrderRead:
        order = await self.order_repository.get_by_id(order_id)
        if not order:
            logger.warning(f"[OrderService] Commande ID {order_id} non trouvée.")
            raise OrderNotFoundException(order_id=order_id)
        return OrderRead.model_validate(order)

    async def get_order_for_quote(self, quote_id: str) -> OrderRead:
        """Retourne la commande la plus récente de l'item du devis."""
        quote = await self.quote_repository.get_by_id(quote_id)
        if not quote:
            raise QuoteNotFoundException(quote_id)

        order = await self.order_repository.find_latest_for_item(item_id=quote.item_id)
        if not order:
            logger.debug(f"[OrderService] Aucune commande pour l'item {quote.item_id} du devis {quote_id}.")
            raise OrderNotFoundException(order_id=quote_id, message="Pedido não encontrado para este orçamento")
        return OrderRead.model_validate(order)

    async def create_order(self, order_data: OrderCreate, actor: Optional[Actor] = None) -> OrderRead:
        """Crée une commande directement (hors conversion de devis)."""
        status = order_data.status or DEFAULT_ORDER_STATUS
        if status not in ORDER_STATUSES:
            raise InvalidOrderStatusException(status=status, allowed=ORDER_STATUSES)

        logger.info(f"[OrderService] Création commande pour item {order_data.item_id}")
        data = order_data.model_dump()
        data["status"] = status
        created = OrderRead.model_validate(await self.order_repository.create(order_data=data))

        await self.history_service.record(
            HistoryAction.CRIAR, HistoryEntity.PEDIDO, created.id, actor, None, created
        )
        return created

    async def update_order_status(
        self, order_id: str, new_status: str, actor: Optional[Actor] = None
    ) -> OrderRead:
        """Met à jour le statut d'une commande et trace l'ancien et le nouveau statut."""
        if new_status not in ORDER_STATUS_UPDATE_ALLOWED:
            raise InvalidOrderStatusException(status=new_status, allowed=ORDER_STATUS_UPDATE_ALLOWED)

        order = await self.order_repository.get_by_id(order_id)
        if not order:
            raise OrderNotFoundException(order_id=order_id)

        old_status = order.status
        updated = OrderRead.model_validate(
            await self.order_repository.update_status(order=order, status=new_status)
        )
        logger.info(
            f"[OrderService] Statut commande ID {order_id}: '{ORDER_STATUS_DISPLAY.get(old_status, old_status)}' -> "
            f"'{ORDER_STATUS_DISPLAY.get(new_status, new_status)}'."
        )

        await self.history_service.record(
            HistoryAction.STATUS_ALTERADO,
            HistoryEntity.PEDIDO,
            order_id,
            actor,
            {"status": old_status},
            {"status": updated.status},
        )
        return updated

    async def delete_order(self, order_id: str, actor: Optional[Actor] = None) -> None:
        """Supprime une commande; l'historique conserve son dernier état."""
        order = await self.order_repository.get_by_id(order_id)
        if not order:
            raise OrderNotFoundException(order_id=order_id)

        before = OrderRead.model_validate(order)
        await self.order_repository.delete(order=order)
        logger.info(f"[OrderService] Commande ID {order_id} supprimée.")

        await self.history_service.record(
            HistoryAction.DELETAR, HistoryEntity.PEDIDO, order_id, actor, before, None
        )
