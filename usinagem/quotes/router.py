import logging

from fastapi import APIRouter, HTTPException, Path, status

from usinagem.auth.dependencies import CurrentActorDep
from usinagem.config import settings
from usinagem.core.errors import internal_error
from usinagem.orders.exceptions import ActiveOrderExistsException
from usinagem.orders.models import OrderRead
from usinagem.quotes.dependencies import QuoteServiceDep
from usinagem.quotes.exceptions import (
    InvalidQuoteStatusException,
    QuoteNotFoundException,
)
from usinagem.quotes.models import QuoteCreate, QuoteRead, QuoteUpdate

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/orcamentos",
    tags=["Orcamentos"],
)


@router.post("", response_model=QuoteRead, status_code=status.HTTP_201_CREATED)
async def create_quote(
    quote_data: QuoteCreate,
    quote_service: QuoteServiceDep,
    actor: CurrentActorDep,
):
    """Crée un nouveau devis."""
    logger.info(f"API create_quote: item={quote_data.item_id}, cliente={quote_data.cliente}")
    try:
        return await quote_service.create_quote(quote_data, actor)
    except InvalidQuoteStatusException as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message)
    except Exception as e:
        logger.error(f"Erreur API create_quote: {e}", exc_info=True)
        raise internal_error("Erro ao criar orçamento", e)


@router.get("/{orcamento_id}", response_model=QuoteRead)
async def read_quote(
    quote_service: QuoteServiceDep,
    orcamento_id: str = Path(..., title="ID du devis"),
):
    try:
        return await quote_service.get_quote(orcamento_id)
    except QuoteNotFoundException as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message)
    except Exception as e:
        logger.error(f"Erreur API read_quote {orcamento_id}: {e}", exc_info=True)
        raise internal_error("Erro ao buscar orçamento", e)


@router.put("/{orcamento_id}", response_model=QuoteRead)
async def update_quote(
    update_data: QuoteUpdate,
    quote_service: QuoteServiceDep,
    actor: CurrentActorDep,
    orcamento_id: str = Path(..., title="ID du devis"),
):
    """Met à jour un devis (mise à jour partielle)."""
    logger.info(f"API update_quote: {orcamento_id}")
    try:
        return await quote_service.update_quote(orcamento_id, update_data, actor)
    except QuoteNotFoundException as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message)
    except InvalidQuoteStatusException as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message)
    except Exception as e:
        logger.error(f"Erreur API update_quote {orcamento_id}: {e}", exc_info=True)
        raise internal_error("Erro ao atualizar orçamento", e)


@router.post(
    "/{orcamento_id}/transformar-em-pedido",
    response_model=OrderRead,
    status_code=status.HTTP_201_CREATED,
)
async def convert_quote_to_order(
    quote_service: QuoteServiceDep,
    actor: CurrentActorDep,
    orcamento_id: str = Path(..., title="ID du devis"),
):
    """
    Transforme un devis en commande.

    - 404 si le devis n'existe pas
    - 400 si une commande non terminée existe déjà pour le même item
      (le corps indique l'ID et le statut de cette commande)
    """
    logger.info(f"API convert_quote_to_order: {orcamento_id} par {actor.id if actor else 'anonyme'}")
    try:
        return await quote_service.convert_to_order(orcamento_id, actor)
    except QuoteNotFoundException as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message)
    except ActiveOrderExistsException as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail={"error": e.message, "pedidoId": e.order_id, "status": e.status},
        )
    except Exception as e:
        logger.error(f"Erreur API convert_quote_to_order {orcamento_id}: {e}", exc_info=True)
        raise internal_error(settings.INTERNAL_ERROR_MSG, e)
