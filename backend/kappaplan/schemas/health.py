"""
Health check response schema.
"""

from pydantic import BaseModel
from typing import Dict


class HealthResponse(BaseModel):
    """Liveness of the API and its database file."""
    status: str
    uptime: str
    version: str
    checks: Dict[str, str] = {}
