from city_explorer.models.location import Location
from city_explorer.models.weather import Weather
from city_explorer.models.restaurant import Restaurant
from city_explorer.models.movie import Movie
from city_explorer.models.meetup import Meetup
from city_explorer.models.trail import Trail

__all__ = [
    'Location',
    'Weather', 'Restaurant', 'Movie', 'Meetup', 'Trail',
]
