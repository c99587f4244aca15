import logging
from city_explorer import create_app

app = create_app()
logger = logging.getLogger(__name__)

if __name__ == '__main__':
    port = app.config['PORT']
    logger.info(f"listening on {port}")
    app.run(host='0.0.0.0', port=port)
