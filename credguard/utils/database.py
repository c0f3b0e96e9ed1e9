"""
Database utilities for the CREDGUARD API
Handles table creation and the rows every new account starts with
"""

import logging

from flask import current_app

from credguard.models import db
from credguard.models.identity import EncryptedIdentity, DEFAULT_METRICS
from credguard.models.profile import Profile, TrustScoreHistory, DEFAULT_TRUST_SCORE
from credguard.seed_data import seed_demo_data
from credguard.utils.vectors import generate_local_vector, generate_zk_proof

logger = logging.getLogger(__name__)

def init_database():
    """Create any missing tables"""
    db.create_all()
    logger.info("Database tables ready")

def provision_user(user, display_name=None):
    """
    Add the profile, encrypted identity and first trust score point for a new
    user, plus the demo rows when SEED_DEMO_DATA is on. The caller commits.
    """
    db.session.add(Profile(
        user_id=user.id,
        display_name=display_name or user.default_display_name,
        email=user.email,
        trust_score=DEFAULT_TRUST_SCORE
    ))

    db.session.add(EncryptedIdentity(
        user_id=user.id,
        encrypted_vector=generate_local_vector(),
        zk_proof=generate_zk_proof(),
        behavioral_metrics=dict(DEFAULT_METRICS),
        cyborgdb_indexed=False
    ))

    db.session.add(TrustScoreHistory.record(user.id, DEFAULT_TRUST_SCORE))

    if current_app.config.get('SEED_DEMO_DATA'):
        seed_demo_data(user)

def get_database_info():
    """Row counts for the health endpoint"""
    try:
        with db.engine.connect() as conn:
            user_count = conn.execute(db.text("SELECT COUNT(*) FROM users")).scalar()
        return {
            'users': user_count,
            'status': 'connected'
        }
    except Exception as e:
        logger.error("Database health check failed: %s", e)
        return {
            'status': 'error',
            'error': str(e)
        }
