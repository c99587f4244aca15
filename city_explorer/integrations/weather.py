from city_explorer.integrations.base import ProviderService, get_json, extract_items
from city_explorer.utils.dates import day_string_from_seconds

DARK_SKY_BASE = 'https://api.darksky.net/forecast'


class WeatherService(ProviderService):
    name = 'weather'
    api_key_setting = 'WEATHER_API_KEY'

    def request_items(self, location):
        url = f"{DARK_SKY_BASE}/{self.api_key}/{location['latitude']},{location['longitude']}"
        payload = get_json(self.name, url)
        return extract_items(self.name, payload, 'daily', 'data')

    def map_item(self, day):
        return {
            'forecast': day.get('summary'),
            'time': day_string_from_seconds(day['time']),
        }
