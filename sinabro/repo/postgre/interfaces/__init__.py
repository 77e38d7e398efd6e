"""
Repository Interfaces Package

This package contains all abstract interfaces for data access layer.
Each interface defines the contract that repository implementations must follow.
"""

from .place_repository_interface import PlaceInterface

__all__ = [
    'PlaceInterface'
]
