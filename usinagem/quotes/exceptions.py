"""Exceptions spécifiques au module Quote (orçamentos)."""
from typing import List, Optional


class QuoteDomainException(Exception):
    """Classe de base pour les exceptions du module Quote."""
    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)


class QuoteNotFoundException(QuoteDomainException):
    """Levée lorsqu'un devis spécifique n'est pas trouvé."""
    def __init__(self, quote_id: str):
        super().__init__("Orçamento não encontrado")
        self.quote_id = quote_id


class InvalidQuoteStatusException(QuoteDomainException):
    """Levée lorsque le statut fourni pour un devis est invalide."""
    def __init__(self, status: str, allowed: List[str]):
        allowed_str = ", ".join(allowed)
        super().__init__(f"Status inválido: '{status}'. Status permitidos: {allowed_str}.")
        self.status = status
        self.allowed = allowed


class QuoteCreationFailedException(QuoteDomainException):
    """Levée en cas d'erreur lors de la création d'un devis."""
    def __init__(self, detail: str = "Erro ao criar orçamento."):
        super().__init__(detail)
        self.detail = detail


class QuoteUpdateException(QuoteDomainException):
    """Levée en cas d'erreur générale lors de la mise à jour d'un devis."""
    def __init__(self, quote_id: Optional[str] = None, detail: str = "Erro ao atualizar orçamento."):
        message = f"Erro ao atualizar orçamento{f' {quote_id}' if quote_id else ''}: {detail}"
        super().__init__(message)
        self.quote_id = quote_id
        self.detail = detail


class QuoteConversionException(QuoteDomainException):
    """Levée quand la transaction de conversion devis -> commande échoue (tout est annulé)."""
    def __init__(self, quote_id: str, detail: str = "Erro ao converter orçamento."):
        super().__init__(f"Erro ao converter orçamento {quote_id}: {detail}")
        self.quote_id = quote_id
        self.detail = detail
