from city_explorer.integrations.base import ProviderService, get_json, extract_items

YELP_SEARCH_URL = 'https://api.yelp.com/v3/businesses/search'


class YelpService(ProviderService):
    name = 'yelp'
    api_key_setting = 'YELP_API_KEY'

    def request_items(self, location):
        payload = get_json(
            self.name,
            YELP_SEARCH_URL,
            params={'location': location['search_query']},
            headers={'Authorization': f'Bearer {self.api_key}'},
        )
        return extract_items(self.name, payload, 'businesses')

    def map_item(self, business):
        return {
            'name': business.get('name'),
            'image_url': business.get('image_url'),
            'price': business.get('price'),
            'rating': business.get('rating'),
            'url': business.get('url'),
        }
