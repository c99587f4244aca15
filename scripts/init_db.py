#!/usr/bin/env python3
"""Create all tables directly (local development). Idempotent."""

import os
import sys

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from city_explorer import create_app
from city_explorer.extensions import db


def main():
    app = create_app()
    with app.app_context():
        db.create_all()
        print(f"Tables ready: {', '.join(sorted(db.metadata.tables))}")


if __name__ == '__main__':
    main()
