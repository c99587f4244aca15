import logging
from city_explorer.errors import ProviderError
from city_explorer.integrations.base import get_json, extract_items, config_value

logger = logging.getLogger(__name__)

GEOCODE_URL = 'https://maps.googleapis.com/maps/api/geocode/json'


class GeocodeService:
    name = 'geocode'

    def __init__(self, api_key=None):
        self._api_key = api_key

    def fetch(self, query):
        """Resolve a place name to the fields of a Location row (first match wins)."""
        params = {
            'address': query,
            'key': self._api_key or config_value('GEOCODE_API_KEY'),
        }
        payload = get_json(self.name, GEOCODE_URL, params=params)
        result = extract_items(self.name, payload, 'results')[0]
        logger.info(f"Got location data from the API for '{query}'")

        try:
            coords = result['geometry']['location']
            return {
                'search_query': query,
                'formatted_query': result.get('formatted_address'),
                'latitude': float(coords['lat']),
                'longitude': float(coords['lng']),
            }
        except (KeyError, TypeError, ValueError) as e:
            raise ProviderError(self.name, f'Unexpected result shape: {e}') from e
