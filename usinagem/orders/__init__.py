"""
Module Orders - Gestion des commandes (pedidos)
"""

# Exposer les modèles et schémas pour faciliter les imports
from usinagem.orders.models import Order, OrderCreate, OrderRead, OrderStatusUpdate

__all__ = ["Order", "OrderCreate", "OrderRead", "OrderStatusUpdate"]
