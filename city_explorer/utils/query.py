import json
from city_explorer.errors import InvalidQueryError

REQUIRED_LOCATION_FIELDS = ['id', 'search_query', 'latitude', 'longitude']


def parse_place_name(args):
    """The raw `data` string of a /location request, used verbatim as the cache key."""
    value = args.get('data') or ''
    if not value.strip():
        raise InvalidQueryError('Query parameter "data" is required')
    return value


def parse_location(args):
    """Read a serialized Location from the `data` query parameter.

    Accepts a JSON object (`data={"id": 1, ...}`) or bracketed keys
    (`data[id]=1&data[latitude]=...`) as sent by browser clients.
    """
    raw = args.get('data')
    if raw:
        try:
            payload = json.loads(raw)
        except ValueError:
            raise InvalidQueryError('Query parameter "data" must be a JSON object')
        if not isinstance(payload, dict):
            raise InvalidQueryError('Query parameter "data" must be a JSON object')
    else:
        payload = {
            key[len('data['):-1]: value
            for key, value in args.items()
            if key.startswith('data[') and key.endswith(']')
        }

    missing = [f for f in REQUIRED_LOCATION_FIELDS if payload.get(f) in (None, '')]
    if missing:
        raise InvalidQueryError(f'Missing location fields: {missing}')

    try:
        return {
            'id': int(payload['id']),
            'search_query': str(payload['search_query']),
            'formatted_query': payload.get('formatted_query'),
            'latitude': float(payload['latitude']),
            'longitude': float(payload['longitude']),
        }
    except (TypeError, ValueError):
        raise InvalidQueryError('Location id and coordinates must be numeric')
