"""
User preference and application settings schemas.
"""

from pydantic import BaseModel, Field
from typing import Any

DEFAULT_APP_SETTINGS = {
    "language": "en",
    "darkMode": True,
    "animations": True,
    "highlightMissing": True,
    "blinkAlerts": True,
}


class PreferenceValue(BaseModel):
    """Body of a preference write."""
    value: Any = None


class PreferenceEntry(BaseModel):
    """A stored preference."""
    key: str = Field(..., min_length=1, max_length=100)
    value: Any = None

    class Config:
        from_attributes = True
