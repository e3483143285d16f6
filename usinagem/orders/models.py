from datetime import datetime
from typing import Optional

from pydantic import Field as PydanticField
from sqlalchemy import Column, DateTime
from sqlmodel import Field, SQLModel

from usinagem.core.schemas import CamelModel
from usinagem.core.utils import new_id, utcnow
from usinagem.orders.config import DEFAULT_ORDER_STATUS

# --- Modèles de table ---

class OrderBase(SQLModel):
    """Base pour les champs de la table pedidos."""
    quantidade: int = Field(..., gt=0)
    material: str = Field(..., max_length=255)
    data_emissao: datetime
    operacao: str = Field(..., max_length=255)
    cliente: Optional[str] = Field(default=None, max_length=255)
    # Référence vers l'item fabriqué (géré hors de ce service)
    item_id: str = Field(..., max_length=64, index=True)
    status: str = Field(default=DEFAULT_ORDER_STATUS, max_length=50, index=True)


class Order(OrderBase, table=True):
    """Modèle de table pour les commandes (pedidos)."""
    id: str = Field(default_factory=new_id, primary_key=True, max_length=64)
    created_at: datetime = Field(
        default_factory=utcnow,
        sa_column=Column(DateTime(timezone=True), nullable=False),
    )

    __tablename__ = "pedidos"

# --- Schémas API ---

class OrderCreate(CamelModel):
    """Schéma pour la création directe d'une commande."""
    item_id: str = PydanticField(..., min_length=1)
    cliente: str = PydanticField(..., min_length=1)
    quantidade: int = PydanticField(..., gt=0)
    material: str = PydanticField(..., min_length=1)
    data_emissao: datetime
    operacao: str = PydanticField(..., min_length=1)
    status: Optional[str] = None


class OrderStatusUpdate(CamelModel):
    """Schéma pour mettre à jour le statut d'une commande."""
    status: str = PydanticField(..., min_length=1)


class OrderRead(CamelModel):
    """Schéma de réponse d'une commande."""
    id: str
    quantidade: int
    material: str
    data_emissao: datetime
    operacao: str
    cliente: Optional[str] = None
    item_id: str
    status: str
    created_at: datetime
