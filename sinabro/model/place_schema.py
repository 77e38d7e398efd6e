"""
Place Request Schema
====================

Pydantic model for the JSON body of ``POST /api/places/save``.
Only shape and types are checked; coordinates are not range-validated,
but they must be finite JSON numbers.
"""

from typing import Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator


class PlaceCreate(BaseModel):
    """Incoming place payload. place_id is accepted but never used."""

    model_config = ConfigDict(extra="ignore", allow_inf_nan=False)

    place_id: Optional[int] = Field(None, description="Ignored; assigned by the store")
    place_name: str = Field(..., description="Display name")
    address: str = Field(..., description="Street address")
    latitude: float = Field(..., description="Latitude in degrees")
    longitude: float = Field(..., description="Longitude in degrees")
    detail: Optional[str] = Field(None, description="Free-text detail")

    @field_validator("latitude", "longitude", mode="before")
    @classmethod
    def reject_booleans(cls, value):
        # bool is an int subclass, lax float parsing would accept true/false
        if isinstance(value, bool):
            raise ValueError("Input should be a number, not a boolean")
        return value
