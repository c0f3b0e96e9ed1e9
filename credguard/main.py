"""
CREDGUARD API
Flask backend for the privacy-preserving credit identity dashboard and marketing site
"""

import logging
import os
import sys
from datetime import datetime, timezone

from flask import Flask, jsonify
from flask_cors import CORS

from credguard.config import Config
from credguard.models import db
from credguard.routes.auth import auth_bp
from credguard.routes.consents import consents_bp
from credguard.routes.cyborgdb import cyborgdb_bp
from credguard.routes.dashboard import dashboard_bp
from credguard.routes.fraud import fraud_bp
from credguard.routes.identity import identity_bp
from credguard.routes.institutions import institutions_bp
from credguard.routes.loans import loans_bp
from credguard.routes.profile import profile_bp
from credguard.routes.site import site_bp
from credguard.routes.verifications import verifications_bp
from credguard.utils.database import init_database, get_database_info

logger = logging.getLogger(__name__)

BLUEPRINTS = [
    (auth_bp, '/api/auth'),
    (cyborgdb_bp, '/api/functions'),
    (identity_bp, '/api/identity'),
    (loans_bp, '/api/loans'),
    (fraud_bp, '/api/fraud'),
    (consents_bp, '/api/consents'),
    (institutions_bp, '/api/institutions'),
    (verifications_bp, '/api/verifications'),
    (profile_bp, '/api/profile'),
    (dashboard_bp, '/api/dashboard'),
    (site_bp, '/api/site'),
]


def create_app(config_object=Config):
    app = Flask(__name__)
    app.config.from_object(config_object)

    CORS(app, origins=app.config['CORS_ORIGINS'])
    db.init_app(app)

    for blueprint, url_prefix in BLUEPRINTS:
        app.register_blueprint(blueprint, url_prefix=url_prefix)

    @app.route('/api/health', methods=['GET'])
    def health_check():
        database = get_database_info()
        return jsonify({
            'status': 'healthy' if database.get('status') == 'connected' else 'degraded',
            'timestamp': datetime.now(timezone.utc).isoformat(),
            'database': database,
            'cyborgdb_enabled': bool(app.config.get('CYBORGDB_API_KEY'))
        })

    @app.errorhandler(404)
    def not_found(error):
        return jsonify({'message': 'Resource not found'}), 404

    @app.errorhandler(405)
    def method_not_allowed(error):
        return jsonify({'message': 'Method not allowed'}), 405

    @app.errorhandler(500)
    def internal_error(error):
        db.session.rollback()
        logger.error("Unhandled error: %s", error)
        return jsonify({'message': 'Internal server error'}), 500

    with app.app_context():
        init_database()

    return app


def setup_logging(level='INFO', log_file=None):
    handlers = [logging.StreamHandler(sys.stdout)]
    if log_file:
        log_dir = os.path.dirname(log_file)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        handlers.append(logging.FileHandler(log_file, mode='a'))

    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        handlers=handlers,
    )


if __name__ == '__main__':
    setup_logging(Config.LOG_LEVEL, Config.LOG_FILE)
    app = create_app()
    port = int(os.environ.get('PORT', 5000))
    logger.info("CREDGUARD API listening on port %s", port)
    app.run(host='0.0.0.0', port=port, debug=False)
