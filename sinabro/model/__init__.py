"""
SQLAlchemy models.

Only Place has repositories and endpoints; the other entities are
schema-only and exist so migrations and create_all build the full schema.
"""

from .place import Place
from .user import User
from .label import Label
from .bookmark import BookMark
from .headcount import HeadCount
from .reward import Reward

__all__ = [
    'Place',
    'User',
    'Label',
    'BookMark',
    'HeadCount',
    'Reward'
]
