"""
Review Service — Flask application
Verified review submission, verification codes, and Sanity webhook revalidation.
"""

import logging
from datetime import datetime, timezone

import sentry_sdk
from dotenv import load_dotenv
from flasgger import Swagger
from flask import Flask, jsonify
from sentry_sdk.integrations.flask import FlaskIntegration

from review_service.config import load_config, missing_settings
from review_service.errors import ConfigurationError
from review_service.extensions import content_store, revalidator, verification_client

load_dotenv()


def create_app(test_config=None):
    app = Flask(__name__)

    # Configuration
    app.config.update(load_config())
    if test_config:
        app.config.update(test_config)

    missing = missing_settings(app.config)
    if missing:
        raise ConfigurationError(f"Missing required settings: {', '.join(missing)}")

    logging.basicConfig(
        level=app.config['LOG_LEVEL'],
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if app.config['SENTRY_DSN']:
        sentry_sdk.init(dsn=app.config['SENTRY_DSN'], integrations=[FlaskIntegration()])

    # Initialize Extensions
    verification_client.init_app(app)
    content_store.init_app(app)
    revalidator.init_app(app)

    Swagger(app)

    # Register Blueprints
    from review_service.routes.verifications import verifications_bp
    app.register_blueprint(verifications_bp)

    from review_service.routes.reviews import reviews_bp
    app.register_blueprint(reviews_bp)

    from review_service.routes.webhooks import webhooks_bp
    app.register_blueprint(webhooks_bp)

    from review_service.routes.courses import courses_bp
    app.register_blueprint(courses_bp)

    @app.errorhandler(404)
    def not_found(e):
        return jsonify({'error': 'Not found'}), 404

    @app.errorhandler(405)
    def method_not_allowed(e):
        return jsonify({}), 405

    @app.route('/health')
    def health():
        return jsonify({
            "status": "healthy",
            "service": "review-service",
            "timestamp": datetime.now(timezone.utc).isoformat(),
        })

    return app


if __name__ == '__main__':
    app = create_app()
    app.run(host='0.0.0.0', port=5000)
