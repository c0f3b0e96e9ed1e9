"""
Verification history routes
"""

import json
import logging

from flask import Blueprint, jsonify, request, Response
from sqlalchemy.exc import SQLAlchemyError

from credguard.models import db
from credguard.models.verification import VerificationHistory
from credguard.utils.auth import token_required
from credguard.utils.helpers import sanitize_input, get_json_body, handle_database_error

logger = logging.getLogger(__name__)

verifications_bp = Blueprint('verifications', __name__)

def _filtered(user_id):
    search_term = sanitize_input(request.args.get('search', ''))
    status = request.args.get('status', 'all') or 'all'
    return VerificationHistory.search(user_id, search_term, status)

@verifications_bp.route('', methods=['GET'])
@token_required
def list_verifications(current_user):
    verifications = _filtered(current_user.id)
    return jsonify({
        'verifications': [v.to_dict() for v in verifications],
        'count': len(verifications)
    }), 200

@verifications_bp.route('', methods=['POST'])
@token_required
def create_verification(current_user):
    data = get_json_body()
    if not data:
        return jsonify({'message': 'No data provided'}), 400

    verification_type = sanitize_input(data.get('verification_type'), max_length=50)
    institution_name = sanitize_input(data.get('institution_name'), max_length=150)
    country = sanitize_input(data.get('country'), max_length=100)
    status = sanitize_input(data.get('status'), max_length=20) or 'pending'
    score = data.get('score')

    if not verification_type or not institution_name or not country:
        return jsonify({'message': 'verification_type, institution_name and country are required'}), 400

    if score is not None and (isinstance(score, bool) or not isinstance(score, int)):
        return jsonify({'message': 'score must be an integer'}), 400

    try:
        verification = VerificationHistory(
            user_id=current_user.id,
            verification_type=verification_type,
            institution_name=institution_name,
            country=country,
            status=status,
            score=score,
            zk_proof=sanitize_input(data.get('zk_proof'), max_length=255)
        )
        db.session.add(verification)
        db.session.commit()
    except SQLAlchemyError as e:
        db.session.rollback()
        logger.error("Error recording verification: %s", e)
        error_message, status_code = handle_database_error(e)
        return jsonify({'message': error_message}), status_code

    return jsonify({'message': 'Verification recorded', 'verification': verification.to_dict()}), 201

@verifications_bp.route('/export', methods=['GET'])
@token_required
def export_verifications(current_user):
    """Download the filtered history as verification-history.json"""
    body = json.dumps([v.to_dict() for v in _filtered(current_user.id)], indent=2)
    return Response(
        body,
        mimetype='application/json',
        headers={'Content-Disposition': 'attachment; filename=verification-history.json'}
    )
