"""
Places Controller Package
Flask Blueprint for Place endpoints
"""

from flask import Blueprint


def init_app(places_service):
    """Initialize Places controller and return its blueprint."""
    from .places_controller import init_places_controller
    places_bp = Blueprint("places", __name__, url_prefix="/api/places")
    init_places_controller(places_service, places_bp)
    return places_bp
