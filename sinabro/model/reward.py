from sqlalchemy import Integer, Float
from sqlalchemy.orm import Mapped, mapped_column

from ..core.base_model import BaseModel


class Reward(BaseModel):
    __tablename__ = 'rewards'

    bid: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    point: Mapped[float] = mapped_column(Float, nullable=False)
