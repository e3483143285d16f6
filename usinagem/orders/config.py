"""
Configuration spécifique au module Orders (pedidos).
Contient les statuts et libellés utilisés par la gestion des commandes.
"""

from typing import Dict, List

# Statuts connus d'une commande
ORDER_STATUS_PENDING = "PENDENTE"
ORDER_STATUS_IN_PROGRESS = "EM_ANDAMENTO"
ORDER_STATUS_DONE = "CONCLUIDO"
ORDER_STATUS_CANCELLED = "CANCELADO"

ORDER_STATUSES: List[str] = [
    ORDER_STATUS_PENDING,
    ORDER_STATUS_IN_PROGRESS,
    ORDER_STATUS_DONE,
    ORDER_STATUS_CANCELLED,
]

# Statuts acceptés par PATCH /pedidos/{id}/status
ORDER_STATUS_UPDATE_ALLOWED: List[str] = [
    ORDER_STATUS_IN_PROGRESS,
    ORDER_STATUS_DONE,
    ORDER_STATUS_CANCELLED,
]

DEFAULT_ORDER_STATUS: str = ORDER_STATUS_PENDING

# Libellés pour l'affichage
ORDER_STATUS_DISPLAY: Dict[str, str] = {
    ORDER_STATUS_PENDING: "Pendente",
    ORDER_STATUS_IN_PROGRESS: "Em andamento",
    ORDER_STATUS_DONE: "Concluído",
    ORDER_STATUS_CANCELLED: "Cancelado",
}
