from typing import Optional
from datetime import datetime
from sqlalchemy import Integer, String, DateTime, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship

from ..core.base_model import BaseModel


class HeadCount(BaseModel):
    __tablename__ = 'headcounts'

    hid: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    place_id: Mapped[Optional[int]] = mapped_column(Integer, ForeignKey('places.place_id'), nullable=True, index=True)
    count: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    time_stamp: Mapped[Optional[datetime]] = mapped_column(DateTime, nullable=True)
    writer: Mapped[Optional[str]] = mapped_column(String(128), nullable=True)  # id of the reporting user

    place = relationship('Place', foreign_keys=[place_id])
