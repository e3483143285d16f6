"""Exceptions spécifiques au module Customers."""


class CustomerDomainException(Exception):
    """Classe de base pour les exceptions du module Customers."""
    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)


class CustomerNotFoundException(CustomerDomainException):
    def __init__(self, customer_id: str):
        super().__init__("Cliente não existe.")
        self.customer_id = customer_id


class DuplicateCustomerEmailException(CustomerDomainException):
    """Levée lorsqu'un compte existe déjà avec cet email."""
    def __init__(self, email: str):
        super().__init__("Email já cadastrado")
        self.email = email


class CustomerCreationFailedException(CustomerDomainException):
    def __init__(self, detail: str = "Erro ao criar cliente."):
        super().__init__(detail)
        self.detail = detail


class CustomerDeletionException(CustomerDomainException):
    def __init__(self, customer_id: str, detail: str = "Erro ao deletar cliente."):
        super().__init__(f"Erro ao deletar cliente {customer_id}: {detail}")
        self.customer_id = customer_id
        self.detail = detail
