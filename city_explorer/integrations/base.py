import logging
import requests
from flask import current_app, has_app_context
from city_explorer.errors import ProviderError, EmptyResultError

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 10


def config_value(key, default=None):
    if has_app_context():
        return current_app.config.get(key, default)
    return default


def get_json(provider, url, params=None, headers=None, timeout=None):
    """GET a provider endpoint and decode its JSON body.

    Any transport error, non-2xx status or undecodable body becomes a
    ProviderError. Nothing is retried.
    """
    timeout = timeout or config_value('PROVIDER_TIMEOUT_SECONDS', DEFAULT_TIMEOUT)
    try:
        resp = requests.get(url, params=params, headers=headers, timeout=timeout)
        resp.raise_for_status()
        return resp.json()
    except requests.RequestException as e:
        raise ProviderError(provider, str(e)) from e
    except ValueError as e:
        raise ProviderError(provider, f'Invalid JSON body: {e}') from e


def extract_items(provider, payload, *path):
    """Walk `path` into the payload and return the non-empty list found there."""
    node = payload
    for key in path:
        if not isinstance(node, dict) or key not in node:
            raise ProviderError(provider, f"Missing '{'.'.join(path)}' in response")
        node = node[key]

    if not isinstance(node, list):
        raise ProviderError(provider, f"Expected a list at '{'.'.join(path)}'")
    if not node:
        raise EmptyResultError(provider)
    return node


class ProviderService:
    """A remote provider whose items become one category's records.

    Subclasses set `name`, `api_key_setting` and implement `request_items`
    (returns the raw item list) and `map_item` (one raw item -> record
    fields).
    """

    name = 'provider'
    api_key_setting = None

    def __init__(self, api_key=None):
        self._api_key = api_key

    @property
    def api_key(self):
        if self._api_key:
            return self._api_key
        return config_value(self.api_key_setting)

    def fetch(self, location):
        items = self.request_items(location)
        try:
            records = [self.map_item(item) for item in items]
        except (KeyError, TypeError, ValueError, AttributeError, OverflowError, OSError) as e:
            raise ProviderError(self.name, f'Unexpected item shape: {e}') from e
        logger.info(f"Got {len(records)} {self.name} items from the API")
        return records

    def request_items(self, location):
        raise NotImplementedError

    def map_item(self, item):
        raise NotImplementedError
