from typing import Optional
from sqlalchemy import Integer, String, Float
from sqlalchemy.orm import Mapped, mapped_column, relationship

from ..core.base_model import BaseModel


class User(BaseModel):
    __tablename__ = 'users'

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    uid: Mapped[str] = mapped_column(String(128), nullable=False)
    uname: Mapped[str] = mapped_column(String(100), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False)
    point_score: Mapped[Optional[float]] = mapped_column(Float, default=0, server_default='0')

    labels = relationship('Label', back_populates='user', cascade="all, delete-orphan", lazy='select')

    def __repr__(self):
        return f"<User uid='{self.uid}' email='{self.email}'>"
