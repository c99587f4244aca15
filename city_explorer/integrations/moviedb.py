from city_explorer.integrations.base import ProviderService, get_json, extract_items

MOVIEDB_SEARCH_URL = 'https://api.themoviedb.org/3/search/movie'
POSTER_BASE_URL = 'https://image.tmdb.org/t/p/w200_and_h300_bestv2/'


class MovieService(ProviderService):
    name = 'movies'
    api_key_setting = 'MOVIEDB_API_KEY'

    def request_items(self, location):
        params = {'api_key': self.api_key, 'query': location['search_query']}
        payload = get_json(self.name, MOVIEDB_SEARCH_URL, params=params)
        return extract_items(self.name, payload, 'results')

    def map_item(self, movie):
        poster_path = movie.get('poster_path')
        return {
            'title': movie.get('title'),
            'overview': movie.get('overview'),
            'average_votes': movie.get('vote_average'),
            'total_votes': movie.get('vote_count'),
            'image_url': f'{POSTER_BASE_URL}{poster_path}' if poster_path else None,
            'popularity': movie.get('popularity'),
            'released_on': movie.get('release_date'),
        }
