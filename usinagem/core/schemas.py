from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

# ======================================================
# Configuration Commune Pydantic
# ======================================================


class OrmBaseModel(BaseModel):
    """Active le mode ORM (from_attributes) pour lire directement les modèles de table."""
    model_config = ConfigDict(from_attributes=True)


class CamelModel(OrmBaseModel):
    """Schéma API exposé en camelCase (dataEmissao, itemId...), accepté aussi en snake_case."""
    model_config = ConfigDict(
        from_attributes=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )
