"""
Constantes du module Historique: actions et entités tracées.
"""
from enum import Enum


class HistoryAction(str, Enum):
    CRIAR = "CRIAR"
    ATUALIZAR = "ATUALIZAR"
    DELETAR = "DELETAR"
    STATUS_ALTERADO = "STATUS_ALTERADO"
    CONVERTER_ORCAMENTO = "CONVERTER_ORCAMENTO"


class HistoryEntity(str, Enum):
    ITEM = "ITEM"
    PEDIDO = "PEDIDO"
    ORCAMENTO = "ORCAMENTO"
    CATEGORIA = "CATEGORIA"
    CLIENTE = "CLIENTE"


HISTORY_ENTITIES = [entity.value for entity in HistoryEntity]


def compose_action(action: HistoryAction, entity: HistoryEntity) -> str:
    """Construit l'action composite stockée, ex: CRIAR_PEDIDO."""
    return f"{action.value}_{entity.value}"
