"""
Credit identity routes: view, refresh, verify and export the encrypted identity
"""

import json
import logging

from flask import Blueprint, jsonify, Response

from credguard.models import utcnow
from credguard.models.identity import EncryptedIdentity, METRIC_LABELS
from credguard.models.profile import Profile, DEFAULT_TRUST_SCORE
from credguard.utils.auth import token_required
from credguard.utils.helpers import log_action, get_json_body
from credguard.utils.identity import (
    IdentityNotFound,
    IdentityUpdateError,
    generate_vector,
    verify_identity,
)
from credguard.utils.scoring import compute_trust_score, trust_level, validate_metrics

logger = logging.getLogger(__name__)

identity_bp = Blueprint('identity', __name__)

@identity_bp.route('', methods=['GET'])
@token_required
def get_identity(current_user):
    identity = EncryptedIdentity.get_by_user(current_user.id)
    profile = Profile.get_by_user(current_user.id)
    trust_score = profile.effective_trust_score if profile else DEFAULT_TRUST_SCORE

    return jsonify({
        'identity': identity.to_dict() if identity else None,
        'trust_score': trust_score,
        'trust_level': trust_level(trust_score),
        'metric_labels': METRIC_LABELS
    }), 200

@identity_bp.route('/refresh', methods=['POST'])
@token_required
def refresh_identity(current_user):
    """Generate a new encrypted vector and index it"""
    try:
        result = generate_vector(current_user)
    except IdentityUpdateError as e:
        return jsonify({'message': 'Failed to refresh identity. Please try again.', 'error': str(e)}), 500

    log_action(current_user.id, 'Identity refresh', 'encrypted_identity', None, 'System')

    if result['cyborgdb_enabled']:
        result['message'] = 'New encrypted vector generated via CyborgDB API.'
    else:
        result['message'] = 'New encrypted vector generated and indexed.'
    return jsonify(result), 200

@identity_bp.route('/verify', methods=['POST'])
@token_required
def verify(current_user):
    """Recompute and store the trust score"""
    try:
        result = verify_identity(current_user)
    except IdentityNotFound as e:
        return jsonify({'message': str(e)}), 404

    log_action(current_user.id, 'Identity verified', 'encrypted_identity', None,
               f'Trust score updated to {result["trust_score"]}')

    result['message'] = f'Trust score updated to {result["trust_score"]}'
    return jsonify(result), 200

@identity_bp.route('/metrics', methods=['PUT'])
@token_required
def preview_metrics(current_user):
    """Trust score the four slider values would produce; nothing is stored"""
    data = get_json_body()
    if not data:
        return jsonify({'message': 'No data provided'}), 400

    metrics, error = validate_metrics(data.get('behavioral_metrics', data))
    if error:
        return jsonify({'message': error}), 400

    trust_score = compute_trust_score(metrics)
    return jsonify({
        'behavioral_metrics': metrics,
        'trust_score': trust_score,
        'trust_level': trust_level(trust_score)
    }), 200

@identity_bp.route('/export', methods=['GET'])
@token_required
def export_identity(current_user):
    """Download the identity as credguard-identity.json"""
    identity = EncryptedIdentity.get_by_user(current_user.id)
    if identity is None:
        return jsonify({'message': 'No identity found'}), 404

    body = json.dumps(identity.to_export(utcnow().isoformat() + 'Z'), indent=2)
    return Response(
        body,
        mimetype='application/json',
        headers={'Content-Disposition': 'attachment; filename=credguard-identity.json'}
    )
