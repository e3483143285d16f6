import logging
from typing import List, Optional

from dotenv import load_dotenv
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)

# Charger les variables d'environnement AVANT de définir la classe Settings
load_dotenv()

DEFAULT_JWT_SECRET = "remplacer_par_une_vraie_cle_secrete_forte"


class Settings(BaseSettings):
    """Configuration de l'application, chargée depuis l'environnement et le fichier .env."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",  # Ignorer les variables d'env non définies dans le modèle
    )

    # --- Environnement ---
    ENVIRONMENT: str = "production"

    # --- Base de Données ---
    POSTGRES_DB: str = "usinagem"
    POSTGRES_USER: str = "usinagem"
    POSTGRES_PASSWORD: str = ""
    POSTGRES_HOST: str = "localhost"
    POSTGRES_PORT: str = "5432"
    DB_ECHO_LOG: bool = False
    # URL complète optionnelle, prioritaire sur les variables POSTGRES_*
    DATABASE_URL: Optional[str] = None

    # --- Pagination ---
    DEFAULT_PAGE_SIZE: int = 20
    MAX_PAGE_SIZE: int = 100
    HISTORY_ENTITY_LIMIT: int = 50

    # --- JWT ---
    JWT_SECRET_KEY: str = DEFAULT_JWT_SECRET
    JWT_ALGORITHM: str = "HS256"

    # --- Conversion devis -> commande ---
    # Les anciennes versions de l'API ne s'accordaient pas sur ces valeurs:
    # statuts terminaux CANCELADO+FINALIZADO, commande créée en PENDENTE,
    # devis marqué CONVERTIDO. Tout reste paramétrable.
    ORDER_TERMINAL_STATUSES: List[str] = ["CANCELADO", "CONCLUIDO"]
    CONVERTED_ORDER_STATUS: str = "EM_ANDAMENTO"
    CONVERTED_QUOTE_STATUS: str = "EM_ANDAMENTO"
    DEFAULT_CLIENT_NAME: str = "Cliente não especificado"

    # --- Messages Génériques ---
    INTERNAL_ERROR_MSG: str = "Erro interno no servidor"

    @property
    def database_url(self) -> str:
        if self.DATABASE_URL:
            return self.DATABASE_URL
        return (
            f"postgresql+asyncpg://{self.POSTGRES_USER}:{self.POSTGRES_PASSWORD}@"
            f"{self.POSTGRES_HOST}:{self.POSTGRES_PORT}/{self.POSTGRES_DB}"
        )

    @property
    def is_development(self) -> bool:
        return self.ENVIRONMENT.lower() == "development"


# Instancier la classe de configuration
settings = Settings()

# --- Validation des secrets après le chargement ---
if not settings.POSTGRES_PASSWORD and not settings.DATABASE_URL:
    logger.critical("La variable d'environnement POSTGRES_PASSWORD n'est pas définie!")

if settings.JWT_SECRET_KEY == DEFAULT_JWT_SECRET:
    logger.warning("La variable JWT_SECRET_KEY utilise la valeur par défaut. Veuillez définir une clé secrète forte.")

logger.info(f"Configuration chargée: DB={settings.POSTGRES_DB}@{settings.POSTGRES_HOST}, env={settings.ENVIRONMENT}")
