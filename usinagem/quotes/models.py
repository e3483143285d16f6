from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import Field as PydanticField
from sqlalchemy import Column, DateTime
from sqlmodel import Field, SQLModel

from usinagem.core.schemas import CamelModel
from usinagem.core.utils import new_id, utcnow
from usinagem.quotes.config import DEFAULT_QUOTE_STATUS

# --- Modèles pour Quote ---

class QuoteBase(SQLModel):
    """Modèle de base pour un devis (orçamento)."""
    quantidade: int = Field(..., gt=0)
    material: str = Field(..., max_length=255)
    data_emissao: datetime
    operacao: str = Field(..., max_length=255)
    cliente: Optional[str] = Field(default=None, max_length=255)
    item_id: str = Field(..., max_length=64, index=True)
    valor: Decimal = Field(..., ge=0, max_digits=12, decimal_places=2)
    status: str = Field(default=DEFAULT_QUOTE_STATUS, max_length=50)


class Quote(QuoteBase, table=True):
    """Modèle de table pour un devis."""
    id: str = Field(default_factory=new_id, primary_key=True, max_length=64)
    created_at: datetime = Field(
        default_factory=utcnow,
        sa_column=Column(DateTime(timezone=True), nullable=False),
    )

    __tablename__ = "orcamentos"


class QuoteCreate(CamelModel):
    """Schéma pour créer un nouveau devis via l'API."""
    item_id: str = PydanticField(..., min_length=1)
    cliente: str = PydanticField(..., min_length=1)
    quantidade: int = PydanticField(..., gt=0)
    material: str = PydanticField(..., min_length=1)
    data_emissao: datetime
    operacao: str = PydanticField(..., min_length=1)
    valor: Decimal = PydanticField(..., ge=0)
    status: Optional[str] = None


class QuoteUpdate(CamelModel):
    """Schéma de mise à jour partielle d'un devis (PUT /orcamentos/{id})."""
    cliente: Optional[str] = None
    quantidade: Optional[int] = PydanticField(None, gt=0)
    valor: Optional[Decimal] = PydanticField(None, ge=0)
    status: Optional[str] = None
    material: Optional[str] = PydanticField(None, min_length=1)
    operacao: Optional[str] = PydanticField(None, min_length=1)
    data_emissao: Optional[datetime] = None
    item_id: Optional[str] = PydanticField(None, min_length=1)


class QuoteRead(CamelModel):
    """Schéma pour lire un devis depuis l'API."""
    id: str
    quantidade: int
    material: str
    data_emissao: datetime
    operacao: str
    cliente: Optional[str] = None
    item_id: str
    # Sérialisé en JSON comme chaîne décimale exacte ("1500.00")
    valor: Decimal
    status: str
    created_at: datetime
