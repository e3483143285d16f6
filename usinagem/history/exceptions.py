"""Exceptions spécifiques au module Historique."""
from typing import List


class HistoryDomainException(Exception):
    """Classe de base pour les exceptions du module Historique."""
    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)


class InvalidHistoryEntityException(HistoryDomainException):
    """Levée lorsque l'entité demandée n'est pas tracée."""
    def __init__(self, entity: str, allowed: List[str]):
        allowed_str = ", ".join(allowed)
        super().__init__(f"Entidade '{entity}' inválida. Entidades permitidas: {allowed_str}.")
        self.entity = entity
        self.allowed = allowed


class HistoryRecordingException(HistoryDomainException):
    """Levée par le repository quand l'écriture d'une entrée échoue."""
    def __init__(self, detail: str = "Erro ao registrar histórico."):
        super().__init__(detail)
        self.detail = detail
