"""Exceptions spécifiques au domaine Order (pedidos)."""
from typing import List, Optional


class OrderDomainException(Exception):
    """Classe de base pour les exceptions du domaine Order."""
    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)


class OrderNotFoundException(OrderDomainException):
    """Levée lorsqu'une commande spécifique n'est pas trouvée."""
    def __init__(self, order_id: str, message: str = "Pedido não encontrado"):
        super().__init__(message)
        self.order_id = order_id


class InvalidOrderStatusException(OrderDomainException):
    """Levée lorsque le statut fourni pour une commande est invalide."""
    def __init__(self, status: str, allowed: List[str]):
        allowed_str = ", ".join(allowed)
        super().__init__(f"Status inválido: '{status}'. Status permitidos: {allowed_str}.")
        self.status = status
        self.allowed = allowed


class ActiveOrderExistsException(OrderDomainException):
    """Levée quand une commande non terminée existe déjà pour le même item."""
    def __init__(self, order_id: str, status: str):
        super().__init__("Já existe um pedido ativo para este item")
        self.order_id = order_id
        self.status = status


class OrderCreationFailedException(OrderDomainException):
    """Levée en cas d'erreur base de données lors de la création d'une commande."""
    def __init__(self, detail: str = "Erro ao criar pedido."):
        super().__init__(detail)
        self.detail = detail


class OrderUpdateException(OrderDomainException):
    """Levée en cas d'erreur lors de la mise à jour d'une commande."""
    def __init__(self, order_id: Optional[str] = None, detail: str = "Erro ao atualizar pedido."):
        message = f"Erro ao atualizar pedido{f' {order_id}' if order_id else ''}: {detail}"
        super().__init__(message)
        self.order_id = order_id
        self.detail = detail


class OrderDeletionException(OrderDomainException):
    """Levée en cas d'erreur base de données lors de la suppression d'une commande."""
    def __init__(self, order_id: str, detail: str = "Erro ao deletar pedido."):
        super().__init__(f"Erro ao deletar pedido {order_id}: {detail}")
        self.order_id = order_id
        self.detail = detail
