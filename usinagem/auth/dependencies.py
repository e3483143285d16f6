"""
Dépendances FastAPI pour l'identification optionnelle de l'utilisateur courant.

Un token absent ou invalide ne bloque jamais la requête: l'acteur vaut alors None.
"""
import logging
from typing import Annotated, Optional

from fastapi import Depends
from fastapi.security import OAuth2PasswordBearer

from usinagem.auth.models import Actor
from usinagem.auth.security import decode_actor_token

logger = logging.getLogger(__name__)

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/login", auto_error=False)


async def get_current_actor(
    token: Annotated[Optional[str], Depends(oauth2_scheme)],
) -> Optional[Actor]:
    """Retourne l'acteur du token Bearer, ou None."""
    if token is None:
        return None
    actor = decode_actor_token(token)
    if actor is not None:
        logger.debug(f"Acteur identifié: {actor.id}")
    return actor


CurrentActorDep = Annotated[Optional[Actor], Depends(get_current_actor)]
