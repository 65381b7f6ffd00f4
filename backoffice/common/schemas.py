from decimal import Decimal
from typing import Annotated

from pydantic import BaseModel, ConfigDict, PlainSerializer
from pydantic.alias_generators import to_camel

# Monetary values stay Decimal inside the application and are written to
# JSON as numbers, which is what the admin UI expects.
Money = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]

class AppBaseModel(BaseModel):
    """
    Global base model for the application.
    Centralizes Pydantic configuration (strict mode, stripping, etc.).
    """
    model_config = ConfigDict(
        strict=True,                # No implicit type coercion (ex: "1" != 1)
        str_strip_whitespace=True,  # Auto-strip whitespace from strings
        validate_assignment=True,   # Validate values even when setting attributes after creation
        from_attributes=True,       # Enable ORM mode (SQLAlchemy -> Pydantic)
        frozen=False                # Allow mutation (default)
    )

class CamelModel(AppBaseModel):
    """
    Base model for responses whose JSON keys are camelCase
    (``total_revenue`` is serialized as ``totalRevenue``).
    """
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )
