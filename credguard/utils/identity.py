"""
Identity actions shared by the cyborgdb-api handler and the identity routes
"""

import logging

from flask import current_app
from sqlalchemy.exc import SQLAlchemyError

from credguard.models import db
from credguard.models.identity import EncryptedIdentity
from credguard.models.profile import Profile, TrustScoreHistory
from credguard.utils.cyborgdb import CyborgDBClient
from credguard.utils.scoring import compute_trust_score
from credguard.utils.vectors import index_id_for, normalize_vector

logger = logging.getLogger(__name__)

class IdentityNotFound(Exception):
    """The user has no encrypted identity row"""

class IdentityUpdateError(Exception):
    """The identity row could not be written"""

def get_client():
    return CyborgDBClient.from_config(current_app.config)

def generate_vector(user, client=None):
    """Generate, normalize and index a new vector for the user"""
    client = client or get_client()

    encrypted_vector = normalize_vector(client.generate_vector(user.id))

    identity = EncryptedIdentity.get_by_user(user.id)
    if identity is None:
        logger.error("No identity row to update for %s", user.id)
        raise IdentityUpdateError('Failed to update identity')

    identity.mark_indexed(encrypted_vector, index_id_for(user.id))
    try:
        db.session.commit()
    except SQLAlchemyError as e:
        db.session.rollback()
        logger.error("Identity update failed for %s: %s", user.id, e)
        raise IdentityUpdateError('Failed to update identity') from e

    return {
        'success': True,
        'encrypted_vector': encrypted_vector,
        'indexed': True,
        'cyborgdb_enabled': client.enabled,
        'message': 'Encrypted identity generated and indexed on CyborgDB'
    }

def verify_identity(user, client=None):
    """Recompute the trust score from the stored behavioral metrics"""
    client = client or get_client()

    identity = EncryptedIdentity.get_by_user(user.id)
    if identity is None:
        raise IdentityNotFound('No identity found')

    trust_score = compute_trust_score(identity.metrics)

    profile = Profile.get_by_user(user.id)
    if profile is not None:
        profile.trust_score = trust_score
    db.session.add(TrustScoreHistory.record(user.id, trust_score))
    db.session.commit()

    return {
        'success': True,
        'trust_score': trust_score,
        'verified': True,
        'zk_proof': identity.zk_proof,
        'cyborgdb_indexed': bool(identity.cyborgdb_indexed),
        'cyborgdb_enabled': client.enabled
    }

def search_similar(user, client=None):
    """Similarity matches for the user's stored vector"""
    client = client or get_client()

    identity = EncryptedIdentity.get_by_user(user.id)
    vector = identity.encrypted_vector if identity else None

    return {
        'success': True,
        'matches': client.search_similar(vector),
        'query_vector': f'{vector[:20]}...' if vector else None,
        'indexed_on': 'CyborgDB Encrypted Vector Search',
        'cyborgdb_enabled': client.enabled
    }
