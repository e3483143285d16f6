from datetime import datetime
from typing import Literal

from pydantic import EmailStr, Field as PydanticField
from sqlalchemy import Column, DateTime
from sqlmodel import Field, SQLModel

from usinagem.core.schemas import CamelModel
from usinagem.core.utils import new_id, utcnow

CUSTOMER_ROLE_USER = "USER"
CUSTOMER_ROLE_ADMIN = "ADMIN"

# --- Modèle de table ---

class CustomerBase(SQLModel):
    name: str = Field(..., max_length=100)
    email: str = Field(..., max_length=255, unique=True, index=True)
    status: bool = Field(default=True)
    role: str = Field(default=CUSTOMER_ROLE_USER, max_length=20)


class Customer(CustomerBase, table=True):
    """Modèle de table pour les comptes clients."""
    id: str = Field(default_factory=new_id, primary_key=True, max_length=64)
    password_hash: str = Field(..., max_length=255)
    created_at: datetime = Field(
        default_factory=utcnow,
        sa_column=Column(DateTime(timezone=True), nullable=False),
    )

    __tablename__ = "clientes"

# --- Schémas API ---

class CustomerCreate(CamelModel):
    """Schéma de création d'un client; le mot de passe est haché avant stockage."""
    name: str = PydanticField(..., min_length=1, max_length=100)
    email: EmailStr
    # bcrypt ne prend en compte que 72 octets
    password: str = PydanticField(..., min_length=1, max_length=72)
    role: Literal["USER", "ADMIN"] = CUSTOMER_ROLE_USER


class CustomerRead(CamelModel):
    """Schéma de réponse d'un client (sans le hash du mot de passe)."""
    id: str
    name: str
    email: str
    status: bool
    role: str
    created_at: datetime
