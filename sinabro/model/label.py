from typing import Optional
from sqlalchemy import Integer, String, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship

from ..core.base_model import BaseModel


class Label(BaseModel):
    __tablename__ = 'labels'

    lid: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[Optional[int]] = mapped_column(Integer, ForeignKey('users.id', ondelete='CASCADE'), nullable=True, index=True)
    label_name: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)

    user = relationship('User', back_populates='labels', foreign_keys=[user_id])
