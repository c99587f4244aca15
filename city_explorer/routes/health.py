from flask import Blueprint, current_app, jsonify
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from city_explorer.extensions import db

health_bp = Blueprint('health', __name__)

PROVIDER_KEY_SETTINGS = {
    'geocode': 'GEOCODE_API_KEY',
    'weather': 'WEATHER_API_KEY',
    'yelp': 'YELP_API_KEY',
    'movies': 'MOVIEDB_API_KEY',
    'meetups': 'MEETUP_API_KEY',
    'trails': 'TRAIL_API_KEY',
}


@health_bp.route('/health')
def health():
    return jsonify({'status': 'ok'})


@health_bp.route('/ready')
def ready():
    """Store reachability gates readiness; provider keys are reported only."""
    try:
        db.session.execute(text('SELECT 1'))
        store_ok = True
    except SQLAlchemyError:
        db.session.rollback()
        store_ok = False

    providers = {
        name: bool(current_app.config.get(setting))
        for name, setting in PROVIDER_KEY_SETTINGS.items()
    }
    body = {
        'status': 'ready' if store_ok else 'not_ready',
        'db': store_ok,
        'providers': providers,
    }
    return jsonify(body), 200 if store_ok else 503
