from city_explorer.integrations.base import ProviderService, get_json, extract_items
from city_explorer.utils.dates import split_date_time

HIKING_PROJECT_URL = 'https://www.hikingproject.com/data/get-trails'
MAX_DISTANCE_MILES = 20


class TrailService(ProviderService):
    name = 'trails'
    api_key_setting = 'TRAIL_API_KEY'

    def request_items(self, location):
        params = {
            'lat': location['latitude'],
            'lon': location['longitude'],
            'maxDistance': MAX_DISTANCE_MILES,
            'key': self.api_key,
        }
        payload = get_json(self.name, HIKING_PROJECT_URL, params=params)
        return extract_items(self.name, payload, 'trails')

    def map_item(self, trail):
        condition_date, condition_time = split_date_time(trail.get('conditionDate'))
        return {
            'name': trail.get('name'),
            'location': trail.get('location'),
            'length': trail.get('length'),
            'stars': trail.get('stars'),
            'star_votes': trail.get('starVotes'),
            'summary': trail.get('summary'),
            'trail_url': trail.get('url'),
            'conditions': trail.get('conditionDetails'),
            'condition_date': condition_date,
            'condition_time': condition_time,
        }
