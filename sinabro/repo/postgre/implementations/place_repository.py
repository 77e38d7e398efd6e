import logging
from typing import List, Optional

from ..interfaces.place_repository_interface import PlaceInterface
from ....model.place import Place as PlaceModel
from .... import db


class PlaceRepository(PlaceInterface):
    def __init__(self):
        pass


    def get_all(self) -> List[PlaceModel]:
        return list(db.session.execute(
            db.select(PlaceModel).order_by(PlaceModel.place_id)
        ).scalars().all())

    def get_by_id(self, place_id: int) -> Optional[PlaceModel]:
        return db.session.get(PlaceModel, place_id)


    def save(self, place: PlaceModel) -> PlaceModel:
        try:
            if place.place_id is not None:
                existing = db.session.get(PlaceModel, place.place_id)
                if existing is None:
                    # Unknown identifier: insert as a new row with a fresh id
                    place.place_id = None
                elif existing is not place:
                    place = db.session.merge(place)
            return place.save()
        except Exception as e:
            db.session.rollback()
            logging.error(f"Error saving place: {str(e)}")
            raise

    def delete(self, place: PlaceModel) -> bool:
        try:
            if place.place_id is None:
                return False
            existing = db.session.get(PlaceModel, place.place_id)
            if not existing:
                return False

            existing.delete_permanently()
            return True

        except Exception as e:
            db.session.rollback()
            logging.error(f"Error deleting place: {str(e)}")
            raise
