"""
Repository Implementations Package

This package contains concrete implementations of repository interfaces.
These implementations handle actual database operations.
"""

from .place_repository import PlaceRepository

__all__ = [
    'PlaceRepository'
]
