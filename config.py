import os
from dotenv import load_dotenv

load_dotenv()


class Config:
    SECRET_KEY = os.getenv('SECRET_KEY', 'dev-secret-change-me')
    SQLALCHEMY_DATABASE_URI = os.getenv('DATABASE_URL', 'postgresql://localhost/city_explorer')
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    SQLALCHEMY_ENGINE_OPTIONS = {'pool_pre_ping': True, 'pool_size': 5}

    PORT = int(os.getenv('PORT', '3000'))
    CORS_ORIGINS = os.getenv('CORS_ORIGINS', '*')

    # Provider credentials
    GEOCODE_API_KEY = os.getenv('GEOCODE_API_KEY')
    WEATHER_API_KEY = os.getenv('WEATHER_API_KEY')
    YELP_API_KEY = os.getenv('YELP_API_KEY')
    MOVIEDB_API_KEY = os.getenv('MOVIEDB_API_KEY')
    MEETUP_API_KEY = os.getenv('MEETUP_API_KEY')
    TRAIL_API_KEY = os.getenv('TRAIL_API_KEY')
    PROVIDER_TIMEOUT_SECONDS = float(os.getenv('PROVIDER_TIMEOUT_SECONDS', '10'))

    # Minutes before a category's cached rows are refetched
    CACHE_MAX_AGE_MINUTES = {
        'weather': float(os.getenv('WEATHER_MAX_AGE_MINUTES', '1')),
        'restaurant': float(os.getenv('RESTAURANT_MAX_AGE_MINUTES', '2')),
        'movie': float(os.getenv('MOVIE_MAX_AGE_MINUTES', '3')),
        'meetup': float(os.getenv('MEETUP_MAX_AGE_MINUTES', '4')),
        'trail': float(os.getenv('TRAIL_MAX_AGE_MINUTES', '5')),
    }

    # Logging
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')


class TestConfig(Config):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'
    SQLALCHEMY_ENGINE_OPTIONS = {}  # SQLite doesn't support pool_size
    GEOCODE_API_KEY = 'test-geocode-key'
    WEATHER_API_KEY = 'test-weather-key'
    YELP_API_KEY = 'test-yelp-key'
    MOVIEDB_API_KEY = 'test-moviedb-key'
    MEETUP_API_KEY = 'test-meetup-key'
    TRAIL_API_KEY = 'test-trail-key'
    CACHE_MAX_AGE_MINUTES = {
        'weather': 1,
        'restaurant': 2,
        'movie': 3,
        'meetup': 4,
        'trail': 5,
    }
