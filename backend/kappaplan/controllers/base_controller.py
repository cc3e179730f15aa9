"""
Base controller class.
Controllers sit between the endpoints and the services: they translate
request schemas into service calls and return Pydantic schemas.
"""

from abc import ABC


class BaseController(ABC):
    """Base controller class for all controllers."""
    pass
