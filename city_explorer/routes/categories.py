from flask import Blueprint, jsonify, request
from city_explorer.services.cache_service import get_category_cache
from city_explorer.utils.query import parse_location

categories_bp = Blueprint('categories', __name__)


def _category_response(category):
    location = parse_location(request.args)
    records = get_category_cache(category).get(location)
    return jsonify([r.to_dict() for r in records])


@categories_bp.route('/weather')
def get_weather():
    """Daily forecast summaries for a location."""
    return _category_response('weather')


@categories_bp.route('/yelp')
def get_restaurants():
    """Restaurants near a location."""
    return _category_response('restaurant')


@categories_bp.route('/movies')
def get_movies():
    """Movies matching a location's search query."""
    return _category_response('movie')


@categories_bp.route('/meetups')
def get_meetups():
    """Software development meetups near a location."""
    return _category_response('meetup')


@categories_bp.route('/trails')
def get_trails():
    """Hiking trails within 20 miles of a location."""
    return _category_response('trail')
