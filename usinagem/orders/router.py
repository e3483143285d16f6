import logging

from fastapi import APIRouter, HTTPException, Path, status

from usinagem.auth.dependencies import CurrentActorDep
from usinagem.core.errors import internal_error
from usinagem.orders.dependencies import OrderServiceDep
from usinagem.orders.exceptions import (
    InvalidOrderStatusException,
    OrderNotFoundException,
)
from usinagem.orders.models import OrderCreate, OrderRead, OrderStatusUpdate
from usinagem.quotes.exceptions import QuoteNotFoundException

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Pedidos"])


def handle_order_service_errors(e: Exception, message: str):
    if isinstance(e, (OrderNotFoundException, QuoteNotFoundException)):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message)
    elif isinstance(e, InvalidOrderStatusException):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message)
    else:
        logger.error(f"[Order API] Erreur inattendue: {e}", exc_info=True)
        raise internal_error(message, e)


@router.post("/pedidos", response_model=OrderRead, status_code=status.HTTP_201_CREATED)
async def create_order(
    order_data: OrderCreate,
    order_service: OrderServiceDep,
    actor: CurrentActorDep,
):
    """Crée une commande directement."""
    logger.info(f"API create_order: item={order_data.item_id}")
    try:
        return await order_service.create_order(order_data, actor)
    except Exception as e:
        handle_order_service_errors(e, "Erro ao criar pedido")


@router.patch("/pedidos/{pedido_id}/status", response_model=OrderRead)
async def update_order_status(
    status_update: OrderStatusUpdate,
    order_service: OrderServiceDep,
    actor: CurrentActorDep,
    pedido_id: str = Path(..., title="ID de la commande"),
):
    """Met à jour le statut d'une commande."""
    logger.info(f"API update_order_status: pedido={pedido_id}, status={status_update.status}")
    try:
        return await order_service.update_order_status(pedido_id, status_update.status, actor)
    except Exception as e:
        handle_order_service_errors(e, "Erro ao atualizar status do pedido")


@router.get("/pedido/por-orcamento/{orcamento_id}", response_model=OrderRead)
async def read_order_for_quote(
    order_service: OrderServiceDep,
    orcamento_id: str = Path(..., title="ID du devis"),
):
    """Retourne la commande la plus récente liée à l'item du devis."""
    try:
        return await order_service.get_order_for_quote(orcamento_id)
    except Exception as e:
        handle_order_service_errors(e, "Erro ao buscar pedido")


@router.get("/pedido/{pedido_id}", response_model=OrderRead)
async def read_order(
    order_service: OrderServiceDep,
    pedido_id: str = Path(..., title="ID de la commande"),
):
    try:
        return await order_service.get_order(pedido_id)
    except Exception as e:
        handle_order_service_errors(e, "Erro ao buscar pedido")


@router.delete("/pedido/{pedido_id}")
async def delete_order(
    order_service: OrderServiceDep,
    actor: CurrentActorDep,
    pedido_id: str = Path(..., title="ID de la commande"),
):
    """Supprime une commande."""
    logger.info(f"API delete_order: {pedido_id}")
    try:
        await order_service.delete_order(pedido_id, actor)
        return {"success": True}
    except Exception as e:
        handle_order_service_errors(e, "Erro ao deletar pedido")
