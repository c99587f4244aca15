import logging
from flask import current_app, has_app_context
from city_explorer.extensions import db
from city_explorer.models import Weather, Restaurant, Movie, Meetup, Trail
from city_explorer.models.base import utcnow
from city_explorer.integrations.weather import WeatherService
from city_explorer.integrations.yelp import YelpService
from city_explorer.integrations.moviedb import MovieService
from city_explorer.integrations.meetup import MeetupService
from city_explorer.integrations.hiking import TrailService

logger = logging.getLogger(__name__)

# category -> (model, provider service class, default max age in minutes)
CATEGORIES = {
    'weather': (Weather, WeatherService, 1),
    'restaurant': (Restaurant, YelpService, 2),
    'movie': (Movie, MovieService, 3),
    'meetup': (Meetup, MeetupService, 4),
    'trail': (Trail, TrailService, 5),
}


class CategoryCache:
    """Store-backed cache in front of one provider, keyed by location id.

    Freshness is judged on the first stored row only: every row for a
    location is written by the same fetch, so they share an age.
    """

    def __init__(self, category, model, fetch, max_age_minutes, clock=None):
        self.category = category
        self.model = model
        self.fetch = fetch
        self.max_age_minutes = max_age_minutes
        self.clock = clock or utcnow

    def get(self, location):
        """Return the location's rows, refetching on a miss or when stale."""
        location_id = location['id']
        rows = self.lookup(location_id)

        if not rows:
            logger.info(f"No {self.category} data in SQL for location {location_id}")
            return self.refresh(location)

        age = rows[0].age_minutes(self.clock())
        if self.max_age_minutes is not None and age > self.max_age_minutes:
            logger.info(
                f"Got {self.category} data from SQL for location {location_id} "
                f"...but it's stale ({age:.1f}m > {self.max_age_minutes}m)"
            )
            self.evict(location_id)
            return self.refresh(location)

        logger.info(f"Got {self.category} data from SQL for location {location_id}")
        return rows

    def lookup(self, location_id):
        return self.model.query.filter_by(location_id=location_id).order_by(self.model.id).all()

    def evict(self, location_id):
        logger.info(f"Deleting ID {location_id} from table {self.model.__tablename__}")
        deleted = self.model.query.filter_by(location_id=location_id).delete()
        db.session.commit()
        return deleted

    def refresh(self, location):
        items = self.fetch(location)
        now = self.clock()
        records = [
            self.model(location_id=location['id'], created_at=now, **item)
            for item in items
        ]
        db.session.add_all(records)
        db.session.commit()
        return records


def get_category_cache(category):
    """Build the cache for a category using the app's configured max age."""
    if category not in CATEGORIES:
        raise ValueError(f"Unknown category: {category}")

    model, service_cls, default_max_age = CATEGORIES[category]
    max_age = default_max_age
    if has_app_context():
        max_age = current_app.config.get('CACHE_MAX_AGE_MINUTES', {}).get(category, default_max_age)

    return CategoryCache(category, model, service_cls().fetch, max_age)
