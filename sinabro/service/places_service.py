import logging
from typing import List

from ..repo.postgre.interfaces.place_repository_interface import PlaceInterface
from ..model.place import Place
from ..model.place_schema import PlaceCreate
from ..common.exceptions import NotFoundError

logger = logging.getLogger(__name__)


class PlacesService:
    def __init__(self, place_repo: PlaceInterface):
        """
        Initialize PlacesService with injected dependencies.

        Args:
            place_repo: Place repository implementation
        """
        self.place_repository = place_repo

    def get_all_places(self) -> List[Place]:
        return self.place_repository.get_all()

    def get_place(self, place_id: int) -> Place:
        place = self.place_repository.get_by_id(place_id)
        if place is None:
            raise NotFoundError("Place", str(place_id))
        return place

    def create_place(self, payload: PlaceCreate) -> Place:
        """
        Persist a new place from a validated payload.
        A place_id in the payload is discarded; the store assigns one.
        """
        place = Place.from_dict(payload.model_dump())
        saved = self.place_repository.save(place)
        logger.info(f"[PLACES] Created place {saved.place_id} '{saved.place_name}'")
        return saved

    def delete_place(self, place: Place) -> bool:
        deleted = self.place_repository.delete(place)
        if deleted:
            logger.info(f"[PLACES] Deleted place {place.place_id}")
        return deleted
