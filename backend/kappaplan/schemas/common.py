"""
Shared Pydantic building blocks.
"""

from pydantic import BaseModel
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """
    Base for resources whose JSON field names are camelCase.
    Inputs accept both the camelCase alias and the snake_case field name.
    """

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        from_attributes = True
        use_enum_values = True


class SuccessResponse(BaseModel):
    """Acknowledgement returned by update and delete endpoints."""
    success: bool = True
