import logging

from fastapi import APIRouter, HTTPException, Path, status

from usinagem.auth.dependencies import CurrentActorDep
from usinagem.core.errors import internal_error
from usinagem.customers.dependencies import CustomerServiceDep
from usinagem.customers.exceptions import CustomerNotFoundException, DuplicateCustomerEmailException
from usinagem.customers.models import CustomerCreate, CustomerRead

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/customer", tags=["Clientes"])


@router.post("", response_model=CustomerRead, status_code=status.HTTP_201_CREATED)
async def create_customer(
    customer_data: CustomerCreate,
    customer_service: CustomerServiceDep,
    actor: CurrentActorDep,
):
    """Crée un compte client."""
    logger.info(f"API create_customer: email={customer_data.email}")
    try:
        return await customer_service.create_customer(customer_data, actor)
    except DuplicateCustomerEmailException as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message)
    except Exception as e:
        logger.error(f"Erreur API create_customer: {e}", exc_info=True)
        raise internal_error("Erro ao criar cliente", e)


@router.delete("/{customer_id}")
async def delete_customer(
    customer_service: CustomerServiceDep,
    actor: CurrentActorDep,
    customer_id: str = Path(..., title="ID du client"),
):
    logger.info(f"API delete_customer: {customer_id}")
    try:
        await customer_service.delete_customer(customer_id, actor)
        return {"message": "Cliente deletado com sucesso."}
    except CustomerNotFoundException as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message)
    except Exception as e:
        logger.error(f"Erreur API delete_customer {customer_id}: {e}", exc_info=True)
        raise internal_error("Erro ao deletar cliente", e)
