from typing import Optional
from sqlalchemy import Integer, String, Float, Text
from sqlalchemy.orm import Mapped, mapped_column

from ..core.base_model import BaseModel


PLACE_FIELDS = ('place_name', 'address', 'latitude', 'longitude', 'detail')


class Place(BaseModel):
    __tablename__ = 'places'

    place_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    place_name: Mapped[str] = mapped_column(String(255), nullable=False)
    address: Mapped[str] = mapped_column(String(255), nullable=False)
    latitude: Mapped[float] = mapped_column(Float, nullable=False)
    longitude: Mapped[float] = mapped_column(Float, nullable=False)
    detail: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    def __init__(self, place_name: Optional[str] = None, address: Optional[str] = None,
                 latitude: Optional[float] = None, longitude: Optional[float] = None,
                 detail: Optional[str] = None, place_id: Optional[int] = None):
        """
        place_id is normally left unset; the store assigns it on insert.
        """
        self.place_id = place_id
        self.place_name = place_name
        self.address = address
        self.latitude = latitude
        self.longitude = longitude
        self.detail = detail

    @classmethod
    def from_dict(cls, data: dict) -> "Place":
        """Build a new, unsaved Place from a payload. Any place_id is dropped."""
        return cls(**{field: data.get(field) for field in PLACE_FIELDS})

    def to_dict(self) -> dict:
        return self.as_dict()

    def __repr__(self):
        return f"<Place place_id={self.place_id} place_name='{self.place_name}'>"
