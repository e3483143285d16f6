from typing import Optional

from pydantic import BaseModel


class Actor(BaseModel):
    """Utilisateur à l'origine d'une action, tel qu'extrait du token JWT."""
    id: str
    name: Optional[str] = None
