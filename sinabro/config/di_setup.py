from dataclasses import dataclass

from ..repo.postgre.interfaces.place_repository_interface import PlaceInterface
from ..service.places_service import PlacesService


@dataclass(frozen=True)
class Dependencies:
    """Objects built once at startup and passed down to the controllers."""
    place_repository: PlaceInterface
    places_service: PlacesService


def setup_dependencies(place_repository: PlaceInterface = None) -> Dependencies:
    """
    Construct repositories and services.

    Args:
        place_repository: Optional repository to use instead of the
            SQLAlchemy implementation (e.g. an in-memory fake in tests)
    """
    if place_repository is None:
        from ..repo.postgre.implementations.place_repository import PlaceRepository
        place_repository = PlaceRepository()

    places_service = PlacesService(place_repository)

    return Dependencies(
        place_repository=place_repository,
        places_service=places_service
    )
