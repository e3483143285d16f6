import uuid
from datetime import datetime, timezone


def utcnow() -> datetime:
    """Horodatage UTC conscient du fuseau."""
    return datetime.now(timezone.utc)


def new_id() -> str:
    """Identifiant texte (uuid4) pour les devis et commandes."""
    return str(uuid.uuid4())
