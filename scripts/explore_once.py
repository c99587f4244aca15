#!/usr/bin/env python3
"""Resolve a place and fetch every category once, for testing/debugging."""

import os
import sys

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from city_explorer import create_app
from city_explorer.services.cache_service import CATEGORIES, get_category_cache
from city_explorer.services.location_service import LocationService

if __name__ == '__main__':
    if len(sys.argv) < 2:
        print("usage: explore_once.py <place name>")
        sys.exit(1)

    app = create_app()
    query = ' '.join(sys.argv[1:])

    print(f"Exploring {query}...")
    with app.app_context():
        location = LocationService().get(query).to_dict()
        print(f"Location {location['id']}: {location['formatted_query']} "
              f"({location['latitude']}, {location['longitude']})")
        for category in CATEGORIES:
            records = get_category_cache(category).get(location)
            print(f"  {category}: {len(records)} records")
