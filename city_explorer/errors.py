import logging
from flask import jsonify
from sqlalchemy.exc import SQLAlchemyError

logger = logging.getLogger(__name__)

GENERIC_ERROR_MESSAGE = 'This location is not a valid input'


class ProviderError(Exception):
    """A remote data provider could not be reached or answered badly."""

    def __init__(self, provider, message):
        self.provider = provider
        super().__init__(f"[{provider}] {message}")


class EmptyResultError(ProviderError):
    """The provider answered successfully but returned no items."""

    def __init__(self, provider):
        super().__init__(provider, 'No data')


class InvalidQueryError(ValueError):
    """The `data` query parameter is missing or malformed."""


def register_error_handlers(app):
    @app.errorhandler(InvalidQueryError)
    def handle_invalid_query(error):
        return jsonify({'error': str(error)}), 400

    @app.errorhandler(ProviderError)
    def handle_provider_error(error):
        logger.error(f"ERROR {error}")
        return GENERIC_ERROR_MESSAGE, 500

    @app.errorhandler(SQLAlchemyError)
    def handle_store_error(error):
        from city_explorer.extensions import db
        db.session.rollback()
        logger.exception(f"ERROR store failure: {error}")
        return GENERIC_ERROR_MESSAGE, 500
