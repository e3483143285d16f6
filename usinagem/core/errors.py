from fastapi import HTTPException, status

from usinagem.config import settings


def internal_error(message: str, exc: Exception) -> HTTPException:
    """Construit une erreur 500; le détail technique n'est exposé qu'en développement."""
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail={
            "error": message,
            "details": str(exc) if settings.is_development else None,
        },
    )
