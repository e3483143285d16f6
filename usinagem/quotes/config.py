"""
Configuration spécifique au module Quotes (orçamentos).

Les valeurs appliquées lors de la conversion devis -> commande viennent des
settings (ORDER_TERMINAL_STATUSES, CONVERTED_ORDER_STATUS, CONVERTED_QUOTE_STATUS).
"""
from typing import List

from pydantic import BaseModel

from usinagem.config import settings

QUOTE_STATUS_PENDING = "PENDENTE"
QUOTE_STATUS_APPROVED = "APROVADO"
QUOTE_STATUS_REJECTED = "REJEITADO"
QUOTE_STATUS_CANCELLED = "CANCELADO"
QUOTE_STATUS_CONVERTED = "CONVERTIDO"
QUOTE_STATUS_IN_PROGRESS = "EM_ANDAMENTO"

ALLOWED_QUOTE_STATUS: List[str] = [
    QUOTE_STATUS_PENDING,
    QUOTE_STATUS_APPROVED,
    QUOTE_STATUS_REJECTED,
    QUOTE_STATUS_CANCELLED,
    QUOTE_STATUS_CONVERTED,
    QUOTE_STATUS_IN_PROGRESS,
]

DEFAULT_QUOTE_STATUS: str = QUOTE_STATUS_PENDING


class ConversionPolicy(BaseModel):
    """Paramètres de la conversion d'un devis en commande."""
    terminal_order_statuses: List[str]
    converted_order_status: str
    converted_quote_status: str
    default_client_name: str

    @classmethod
    def from_settings(cls) -> "ConversionPolicy":
        return cls(
            terminal_order_statuses=list(settings.ORDER_TERMINAL_STATUSES),
            converted_order_status=settings.CONVERTED_ORDER_STATUS,
            converted_quote_status=settings.CONVERTED_QUOTE_STATUS,
            default_client_name=settings.DEFAULT_CLIENT_NAME,
        )
