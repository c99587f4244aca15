import logging
from city_explorer.extensions import db
from city_explorer.models.location import Location
from city_explorer.integrations.geocode import GeocodeService

logger = logging.getLogger(__name__)


class LocationService:
    """Resolves place names to Location rows. Locations never expire."""

    def __init__(self, geocoder=None):
        self.geocoder = geocoder or GeocodeService()

    def get(self, query):
        location = self.lookup(query)
        if location:
            logger.info(f"Got location data from SQL for '{query}'")
            return location
        return self.create(query)

    def lookup(self, query):
        return Location.query.filter_by(search_query=query).order_by(Location.id).first()

    def create(self, query):
        fields = self.geocoder.fetch(query)
        location = Location(**fields)
        db.session.add(location)
        db.session.commit()
        logger.info(f"Saved location '{query}' as id {location.id}")
        return location
