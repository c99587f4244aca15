def register_blueprints(app):
    from city_explorer.routes.health import health_bp
    from city_explorer.routes.location import location_bp
    from city_explorer.routes.categories import categories_bp

    app.register_blueprint(health_bp)
    app.register_blueprint(location_bp)
    app.register_blueprint(categories_bp)
