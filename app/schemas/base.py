"""Shared pydantic configuration: camelCase on the wire, snake_case in Python."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

# Identity references are 24 hex characters.
OBJECT_ID_REGEX = r"^[0-9a-fA-F]{24}$"


class CamelModel(BaseModel):
    """Base for API schemas whose JSON keys are camelCase (userId, createdAt, ...)."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )
