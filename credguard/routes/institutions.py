"""
Connected institution routes
"""

import logging

from flask import Blueprint, jsonify, request
from sqlalchemy.exc import SQLAlchemyError

from credguard.models import db
from credguard.models.institution import ConnectedInstitution, AVAILABLE_INSTITUTIONS
from credguard.utils.auth import token_required
from credguard.utils.helpers import sanitize_input, log_action, get_json_body, handle_database_error

logger = logging.getLogger(__name__)

institutions_bp = Blueprint('institutions', __name__)

@institutions_bp.route('', methods=['GET'])
@token_required
def list_institutions(current_user):
    """Non-disconnected institutions matching ?search= on name or country"""
    search_term = sanitize_input(request.args.get('search', ''))
    institutions = ConnectedInstitution.get_by_user(current_user.id)

    visible = [
        institution for institution in institutions
        if institution.status != 'disconnected' and institution.matches(search_term)
    ]

    return jsonify({
        'institutions': [institution.to_dict() for institution in visible],
        'connected_count': sum(1 for i in institutions if i.status == 'connected'),
        'total_verifications': sum(i.verifications_count or 0 for i in institutions)
    }), 200

@institutions_bp.route('/available', methods=['GET'])
@token_required
def available_institutions(current_user):
    return jsonify({'institutions': AVAILABLE_INSTITUTIONS}), 200

@institutions_bp.route('', methods=['POST'])
@token_required
def connect_institution(current_user):
    """Request a connection; it stays pending until the institution verifies the user"""
    data = get_json_body()
    if not data:
        return jsonify({'message': 'No data provided'}), 400

    name = sanitize_input(data.get('name') or data.get('institution_name'), max_length=150)
    country = sanitize_input(data.get('country'), max_length=100)
    institution_type = sanitize_input(data.get('type') or data.get('institution_type'), max_length=100)

    if not name or not country or not institution_type:
        return jsonify({'message': 'Name, country and type are required'}), 400

    if ConnectedInstitution.get_active_by_name(current_user.id, name):
        return jsonify({'message': f'{name} is already connected'}), 409

    try:
        institution = ConnectedInstitution(
            user_id=current_user.id,
            institution_name=name,
            country=country,
            institution_type=institution_type,
            status='pending',
            trust_level='silver',
            verifications_count=0
        )
        db.session.add(institution)
        db.session.commit()
    except SQLAlchemyError as e:
        db.session.rollback()
        logger.error("Error connecting institution: %s", e)
        error_message, status_code = handle_database_error(e)
        return jsonify({'message': error_message}), status_code

    log_action(current_user.id, 'Connection initiated', 'connected_institution', institution.id, name,
               status='pending')

    return jsonify({
        'message': f'{name} will be connected once they verify your identity.',
        'institution': institution.to_dict()
    }), 201

@institutions_bp.route('/<institution_id>/disconnect', methods=['POST'])
@token_required
def disconnect_institution(current_user, institution_id):
    institution = ConnectedInstitution.get_for_user(institution_id, current_user.id)
    if not institution:
        return jsonify({'message': 'Institution not found'}), 404

    try:
        institution.disconnect()
        db.session.commit()
    except SQLAlchemyError as e:
        db.session.rollback()
        logger.error("Error disconnecting institution %s: %s", institution_id, e)
        return jsonify({'message': 'Error disconnecting institution'}), 500

    log_action(current_user.id, 'Institution disconnected', 'connected_institution', institution.id,
               institution.institution_name)

    return jsonify({
        'message': 'The connection has been terminated.',
        'institution': institution.to_dict()
    }), 200
