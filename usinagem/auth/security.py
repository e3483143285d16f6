"""
Fonctions utilitaires de sécurité: hachage des mots de passe et identification
de l'utilisateur.

Le token JWT est émis ailleurs; ici on se contente de le décoder pour savoir
qui est à l'origine d'une action enregistrée dans l'historique.
"""
import logging
from typing import Optional

import bcrypt
from jose import JWTError, jwt

from usinagem.auth.models import Actor
from usinagem.config import settings

logger = logging.getLogger(__name__)


def get_password_hash(password: str) -> str:
    """Génère le hash bcrypt d'un mot de passe."""
    hashed_bytes = bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt())
    return hashed_bytes.decode("utf-8")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Vérifie un mot de passe en clair contre un hash bcrypt."""
    return bcrypt.checkpw(plain_password.encode("utf-8"), hashed_password.encode("utf-8"))


def decode_actor_token(token: str) -> Optional[Actor]:
    """Décode un token JWT et retourne l'acteur ('id' ou 'sub', 'name') ou None si invalide/expiré."""
    try:
        payload = jwt.decode(token, settings.JWT_SECRET_KEY, algorithms=[settings.JWT_ALGORITHM])
    except JWTError as e:
        logger.warning(f"Erreur de décodage JWT: {e}")  # Inclut expiration, signature invalide, etc.
        return None

    actor_id = payload.get("id") or payload.get("sub")
    if actor_id is None:
        logger.warning("Token JWT décodé mais sans champ 'id' ni 'sub'.")
        return None

    return Actor(id=str(actor_id), name=payload.get("name"))
