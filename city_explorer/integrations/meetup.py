from city_explorer.integrations.base import ProviderService, get_json, extract_items
from city_explorer.utils.dates import day_string_from_millis

MEETUP_EVENTS_URL = 'https://api.meetup.com/2/open_events'


class MeetupService(ProviderService):
    name = 'meetups'
    api_key_setting = 'MEETUP_API_KEY'

    def request_items(self, location):
        params = {
            'key': self.api_key,
            'sign': 'true',
            'photo-host': 'public',
            'lat': location['latitude'],
            'lon': location['longitude'],
            'topic': 'softwaredev',
            'page': 20,
        }
        payload = get_json(self.name, MEETUP_EVENTS_URL, params=params)
        return extract_items(self.name, payload, 'results')

    def map_item(self, event):
        group = event.get('group') or {}
        return {
            'link': event.get('event_url'),
            'name': event.get('name'),
            'creation_date': day_string_from_millis(event['created']),
            'host': group.get('name'),
        }
