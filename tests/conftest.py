import json
import pytest
import requests
from datetime import datetime, timezone, timedelta

from city_explorer import create_app
from city_explorer.extensions import db as _db
from city_explorer.models.location import Location
from config import TestConfig


@pytest.fixture(scope='session')
def app():
    """Create app with test config."""
    app = create_app(TestConfig)
    return app


@pytest.fixture(autouse=True)
def setup_db(app):
    """Create tables before each test, drop after."""
    with app.app_context():
        _db.create_all()
        yield
        _db.session.rollback()
        _db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def db_session(app):
    with app.app_context():
        yield _db.session


@pytest.fixture
def sample_location(db_session):
    """A Seattle row as the geocoder would have stored it."""
    location = Location(
        search_query='Seattle',
        formatted_query='Seattle, WA, USA',
        latitude=47.6062095,
        longitude=-122.3320708,
        created_at=datetime.now(timezone.utc) - timedelta(days=30),
    )
    db_session.add(location)
    db_session.commit()
    return location


@pytest.fixture
def location_payload(sample_location):
    """The serialized Location a client sends in the `data` parameter."""
    return sample_location.to_dict()


def _json_response(payload, status_code=200, url='https://provider.example/api'):
    resp = requests.Response()
    resp.status_code = status_code
    resp.url = url
    resp._content = json.dumps(payload).encode('utf-8')
    resp.headers['Content-Type'] = 'application/json'
    return resp


@pytest.fixture
def make_response():
    """Factory for real requests.Response objects carrying a JSON body."""
    return _json_response


@pytest.fixture
def geocode_payload():
    return {
        'status': 'OK',
        'results': [
            {
                'formatted_address': 'Seattle, WA, USA',
                'geometry': {'location': {'lat': 47.6062095, 'lng': -122.3320708}},
            },
        ],
    }


@pytest.fixture
def weather_payload():
    return {
        'daily': {
            'data': [
                {'time': 1546819200, 'summary': 'Rain throughout the day.'},
                {'time': 1546905600, 'summary': 'Mostly cloudy until evening.'},
            ],
        },
    }


@pytest.fixture
def yelp_payload():
    return {
        'businesses': [
            {
                'name': 'Pike Place Chowder',
                'image_url': 'https://s3-media.yelpcdn.com/chowder.jpg',
                'price': '$$',
                'rating': 4.5,
                'url': 'https://www.yelp.com/biz/pike-place-chowder-seattle',
            },
            {
                'name': 'Paseo',
                'image_url': 'https://s3-media.yelpcdn.com/paseo.jpg',
                'price': '$',
                'rating': 4.0,
                'url': 'https://www.yelp.com/biz/paseo-seattle',
            },
        ],
    }


@pytest.fixture
def movie_payload():
    return {
        'results': [
            {
                'title': 'Sleepless in Seattle',
                'overview': 'A recently widowed man talks about his wife on the radio.',
                'vote_average': 6.6,
                'vote_count': 881,
                'poster_path': '/afkYP15OeUOD0tFEmj6VvejuOcz.jpg',
                'popularity': 8.2,
                'release_date': '1993-06-24',
            },
        ],
    }


@pytest.fixture
def meetup_payload():
    return {
        'results': [
            {
                'event_url': 'https://www.meetup.com/seattle-python/events/1/',
                'name': 'Python Project Night',
                'created': 1546819200000,
                'group': {'name': 'Seattle Python Meetup'},
            },
        ],
    }


@pytest.fixture
def trail_payload():
    return {
        'trails': [
            {
                'name': 'Rattlesnake Ledge',
                'location': 'Riverbend, Washington',
                'length': 5.3,
                'stars': 4.4,
                'starVotes': 84,
                'summary': 'An extremely popular out-and-back hike to the viewpoint.',
                'url': 'https://www.hikingproject.com/trail/7021679/rattlesnake-ledge',
                'conditionDetails': 'Dry',
                'conditionDate': '2018-07-21 20:58:39',
            },
        ],
    }
