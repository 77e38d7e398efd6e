"""
Place Repository Interface
==========================

Abstract interface for place data access.
Defines contract for repository implementations.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from ....model.place import Place as PlaceModel


class PlaceInterface(ABC):
    """Abstract interface for Place repository operations."""

    def __init__(self):
        pass

    # --- WRITE OPERATIONS ---

    @abstractmethod
    def save(self, place: PlaceModel) -> PlaceModel:
        """
        Insert or overwrite a place.

        A place without place_id, or whose place_id does not exist yet, is
        inserted and receives a new identifier. A place whose place_id
        already exists overwrites that row.

        Args:
            place: Place instance to persist

        Returns:
            The persisted Place with place_id populated
        """
        pass

    @abstractmethod
    def delete(self, place: PlaceModel) -> bool:
        """
        Delete the row matching place.place_id.

        Returns:
            True if a row was removed, False if no such place exists
        """
        pass

    # --- READ OPERATIONS ---

    @abstractmethod
    def get_all(self) -> List[PlaceModel]:
        """Get every place, oldest first."""
        pass

    @abstractmethod
    def get_by_id(self, place_id: int) -> Optional[PlaceModel]:
        """Get place by ID."""
        pass
