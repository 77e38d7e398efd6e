from typing import Optional
from sqlalchemy import Integer, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship

from ..core.base_model import BaseModel


class BookMark(BaseModel):
    """A Place filed under one of a user's Labels."""
    __tablename__ = 'bookmarks'

    bid: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    place_id: Mapped[Optional[int]] = mapped_column(Integer, ForeignKey('places.place_id'), nullable=True, index=True)
    label_id: Mapped[Optional[int]] = mapped_column(Integer, ForeignKey('labels.lid'), nullable=True, index=True)

    place = relationship('Place', foreign_keys=[place_id])
    label = relationship('Label', foreign_keys=[label_id])
