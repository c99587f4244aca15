from flask import Blueprint, jsonify, request
from city_explorer.services.location_service import LocationService
from city_explorer.utils.query import parse_place_name

location_bp = Blueprint('location', __name__)
location_service = LocationService()


@location_bp.route('/location')
def get_location():
    """Resolve a place name, from the store when it has been seen before."""
    query = parse_place_name(request.args)
    location = location_service.get(query)
    return jsonify(location.to_dict())
