"""
Places Controller - API Endpoints for Place Operations
======================================================

Purpose:
- RESTful API to register places and list them
- Request body validation via pydantic
- Errors are raised and turned into responses by the app error handler
"""

from flask import Blueprint, jsonify
import logging

from ...service.places_service import PlacesService
from ...model.place_schema import PlaceCreate
from ...middleware import validate_body

logger = logging.getLogger(__name__)


class PlacesController:
    """
    Places Controller

    Endpoints:
    - GET /api/places - List every registered place
    - POST /api/places/save - Register a place at a marker position
    - GET /api/places/{place_id} - Get a single place

    Example Requests:
        POST /api/places/save
        Body: {"place_name": "Test", "address": "Addr",
               "latitude": 36.62, "longitude": 127.45}
    """

    def __init__(self, places_service: PlacesService, blueprint: Blueprint):
        """Initialize controller with service dependency."""
        self.places_service = places_service
        self.blueprint = blueprint
        self._register_routes()
        logger.info("[INFO] PlacesController initialized")

    def _register_routes(self):
        """Register all routes with Flask Blueprint."""
        self.blueprint.add_url_rule("", "list", self.get_all_places, methods=["GET"])
        self.blueprint.add_url_rule("/save", "save", validate_body(PlaceCreate)(self.save_place), methods=["POST"])
        self.blueprint.add_url_rule("/<int:place_id>", "get_by_id", self.get_place_by_id, methods=["GET"])

    def get_all_places(self):
        """
        List every registered place.

        Response Success (200):
            [
                {"place_id": 1, "place_name": "...", "address": "...",
                 "latitude": 36.62, "longitude": 127.45, "detail": null}
            ]
        """
        places = self.places_service.get_all_places()
        logger.debug(f"[LIST] Returning {len(places)} places")
        return jsonify([place.to_dict() for place in places]), 200

    def save_place(self, payload: PlaceCreate):
        """
        Register a new place.

        Request Body:
            place_name (required), address (required),
            latitude (required), longitude (required), detail (optional).
            place_id may be sent but is ignored.

        Response Success (201):
            The stored place including its assigned place_id.

        Response Error (400):
            {
                "resultMessage": {"en": "...", "ko": "..."},
                "resultCode": "VAL002",
                "details": {"errors": [{"field": "latitude", "message": "..."}]}
            }
        """
        place = self.places_service.create_place(payload)
        return jsonify(place.to_dict()), 201

    def get_place_by_id(self, place_id: int):
        place = self.places_service.get_place(place_id)
        return jsonify(place.to_dict()), 200


def init_places_controller(places_service: PlacesService, blueprint: Blueprint):
    """Initialize Places controller with an explicitly constructed service."""
    return PlacesController(places_service, blueprint)
