import logging
from flask import Flask
from flask_cors import CORS
from config import Config


def create_app(config_class=None):
    app = Flask(__name__)
    app.config.from_object(config_class or Config)

    # Heroku-style DATABASE_URL (postgres:// -> postgresql://)
    db_uri = app.config.get('SQLALCHEMY_DATABASE_URI', '')
    if db_uri.startswith('postgres://'):
        app.config['SQLALCHEMY_DATABASE_URI'] = db_uri.replace('postgres://', 'postgresql://', 1)

    # Logging
    logging.basicConfig(
        level=getattr(logging, app.config.get('LOG_LEVEL', 'INFO')),
        format='%(asctime)s [%(levelname)s] %(name)s: %(message)s',
    )

    # Extensions
    from city_explorer.extensions import db, migrate
    from city_explorer import models  # noqa: F401  registers tables with the metadata
    db.init_app(app)
    migrate.init_app(app, db)

    # Errors
    from city_explorer.errors import register_error_handlers
    register_error_handlers(app)

    # CORS for browser front ends
    origins = [o.strip() for o in app.config.get('CORS_ORIGINS', '*').split(',') if o.strip()]
    CORS(app, origins=origins)

    # Register blueprints
    from city_explorer.routes import register_blueprints
    register_blueprints(app)

    return app
