# app.py
from flask import Flask, jsonify, request, g
from flask_cors import CORS
from sqlalchemy.exc import SQLAlchemyError
from werkzeug.middleware.proxy_fix import ProxyFix
from config import Config, ConfigError
from database import VerseStore
from routes.verses import verses_bp
import logging
import time
import sys

logger = logging.getLogger(__name__)


def configure_logging(level=logging.INFO):
    # Configure logging to output to stdout
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[logging.StreamHandler(sys.stdout)]
    )


def create_app(store=None, config=None):
    """Build the query API around an explicit store client.

    When no store is given, configuration is read from the .env file and a
    Postgres-backed store is created; a missing .env file stops startup.
    """
    if store is None:
        configure_logging()
        config = config or Config.from_env()
        store = VerseStore.from_url(config.database_url)
        store.ping()
        logger.info("Successfully connected to the database")

    app = Flask(__name__)
    app.extensions['verse_store'] = store

    # Handle proxy headers when running behind a load balancer
    app.wsgi_app = ProxyFix(app.wsgi_app, x_for=1, x_proto=1, x_host=1)

    app.json.sort_keys = False  # Keep version, book, chapter, verse, text order
    app.json.compact = True

    CORS(app, resources={
        r"/api/*": {
            "origins": "*",
            "methods": ["GET", "POST", "OPTIONS"],
        }
    })

    app.url_map.strict_slashes = False

    app.register_blueprint(verses_bp, url_prefix='/api')

    @app.before_request
    def before_request():
        g.start_time = time.time()

    @app.after_request
    def after_request(response):
        duration = time.time() - g.start_time
        logger.info(f"Request to {request.path} took {duration:.2f} seconds ({response.status_code})")
        return response

    @app.route('/health', methods=['GET'])
    def health():
        """Health check endpoint that also verifies the database connection"""
        try:
            store.ping()
            return jsonify({
                'status': 'healthy',
                'database': 'connected',
                'timestamp': time.time()
            })
        except SQLAlchemyError as e:
            logger.error(f"Health check failed: {str(e)}")
            return jsonify({
                'status': 'unhealthy',
                'error': str(e),
                'timestamp': time.time()
            }), 500

    return app


if __name__ == '__main__':
    configure_logging()
    try:
        config = Config.from_env()
        app = create_app(config=config)
    except (ConfigError, SQLAlchemyError) as e:
        logger.error(f"Startup failed: {e}")
        sys.exit(1)

    logger.info(f"API server is running on http://0.0.0.0:{config.api_port}")
    app.run(host='0.0.0.0', port=config.api_port)
