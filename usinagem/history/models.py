import json
from datetime import datetime
from typing import Any, List, Optional

from pydantic import Field as PydanticField, field_validator
from sqlalchemy import Column, DateTime, Text
from sqlmodel import Field, SQLModel

from usinagem.core.schemas import CamelModel
from usinagem.core.utils import utcnow


# --- Modèle de table ---

class HistoryEntry(SQLModel, table=True):
    """Entrée append-only du journal d'audit."""
    id: Optional[int] = Field(default=None, primary_key=True)
    acao: str = Field(..., max_length=100, index=True)
    entidade: str = Field(..., max_length=50, index=True)
    entidade_id: str = Field(..., max_length=64, index=True)
    # JSON sérialisé {"antigos": ..., "novos": ...}
    dados: Optional[str] = Field(default=None, sa_column=Column(Text, nullable=True))
    usuario_id: Optional[str] = Field(default=None, max_length=64)
    usuario_nome: Optional[str] = Field(default=None, max_length=255)
    created_at: datetime = Field(
        default_factory=utcnow,
        sa_column=Column(DateTime(timezone=True), nullable=False, index=True),
    )

    __tablename__ = "historico"


# --- Schémas ---

class HistoryEntryCreate(SQLModel):
    """Données d'une nouvelle entrée (created_at est posé par le modèle de table)."""
    acao: str
    entidade: str
    entidade_id: str
    dados: Optional[str] = None
    usuario_id: Optional[str] = None
    usuario_nome: Optional[str] = None


class HistoryRead(CamelModel):
    """Entrée d'historique exposée par l'API."""
    id: int
    acao: str
    entidade: str
    entidade_id: str
    dados: Optional[Any] = None
    usuario_id: Optional[str] = None
    usuario_nome: Optional[str] = None
    created_at: datetime

    @field_validator("dados", mode="before")
    @classmethod
    def parse_dados(cls, value: Any) -> Any:
        if isinstance(value, str):
            try:
                return json.loads(value)
            except ValueError:
                return value
        return value


class HistoryPagination(CamelModel):
    pagina: int
    por_pagina: int
    total: int
    total_paginas: int


class PaginatedHistoryRead(CamelModel):
    """Réponse paginée: {dados, paginacao}."""
    dados: List[HistoryRead] = PydanticField(default_factory=list)
    paginacao: HistoryPagination
