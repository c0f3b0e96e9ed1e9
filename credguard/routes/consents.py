"""
Consent management routes
"""

import logging
from datetime import datetime, timezone

from flask import Blueprint, jsonify
from sqlalchemy.exc import SQLAlchemyError

from credguard.models import db, utcnow
from credguard.models.consent import Consent, one_year_from
from credguard.models.preference import UserPreference, PRIVACY_DEFAULTS, privacy_key
from credguard.utils.auth import token_required
from credguard.utils.helpers import sanitize_input, log_action, get_json_body, parse_bool_map, handle_database_error

logger = logging.getLogger(__name__)

consents_bp = Blueprint('consents', __name__)

def _parse_expiry(value):
    """ISO date or datetime string to naive UTC; None when unparseable"""
    try:
        parsed = datetime.fromisoformat(str(value).replace('Z', '+00:00'))
    except ValueError:
        return None
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
    return parsed

def _get_owned(consent_id, user_id):
    return Consent.get_for_user(consent_id, user_id)

@consents_bp.route('', methods=['GET'])
@token_required
def list_consents(current_user):
    """Consents with per-status counts; lapsed consents expire when auto-revoke is on"""
    consents = Consent.get_by_user(current_user.id)
    settings = UserPreference.load(current_user.id, privacy_key(current_user.id), PRIVACY_DEFAULTS)

    if settings['auto_revoke']:
        changed = [consent for consent in consents if consent.expire_if_due()]
        if changed:
            try:
                db.session.commit()
            except SQLAlchemyError as e:
                db.session.rollback()
                logger.error("Could not expire consents for %s: %s", current_user.id, e)

    counts = Consent.count_by_status(consents)
    return jsonify({
        'consents': [consent.to_dict() for consent in consents],
        'active_count': counts['active'],
        'expired_count': counts['expired'],
        'revoked_count': counts['revoked'],
        'settings': settings
    }), 200

@consents_bp.route('', methods=['POST'])
@token_required
def grant_consent(current_user):
    data = get_json_body()
    if not data:
        return jsonify({'message': 'No data provided'}), 400

    institution_name = sanitize_input(data.get('institution_name'), max_length=150)
    purpose = sanitize_input(data.get('purpose'), max_length=255)
    data_types = data.get('data_types') or []

    if not institution_name or not purpose:
        return jsonify({'message': 'Institution and purpose are required'}), 400

    if not isinstance(data_types, list) or not all(isinstance(item, str) and item.strip() for item in data_types):
        return jsonify({'message': 'data_types must be a list of names'}), 400

    if data.get('expires_at'):
        expires_at = _parse_expiry(data['expires_at'])
        if expires_at is None or expires_at <= utcnow():
            return jsonify({'message': 'expires_at must be a future date'}), 400
    else:
        expires_at = one_year_from(utcnow())

    try:
        consent = Consent(
            user_id=current_user.id,
            institution_name=institution_name,
            purpose=purpose,
            data_types=[item.strip() for item in data_types],
            status='active',
            expires_at=expires_at
        )
        db.session.add(consent)
        db.session.commit()
    except SQLAlchemyError as e:
        db.session.rollback()
        logger.error("Error granting consent: %s", e)
        error_message, status_code = handle_database_error(e)
        return jsonify({'message': error_message}), status_code

    log_action(current_user.id, 'Consent granted', 'consent', consent.id, institution_name)

    return jsonify({'message': 'Consent granted', 'consent': consent.to_dict()}), 201

@consents_bp.route('/<consent_id>/revoke', methods=['POST'])
@token_required
def revoke_consent(current_user, consent_id):
    consent = _get_owned(consent_id, current_user.id)
    if not consent:
        return jsonify({'message': 'Consent not found'}), 404

    try:
        consent.revoke()
        db.session.commit()
    except SQLAlchemyError as e:
        db.session.rollback()
        logger.error("Error revoking consent %s: %s", consent_id, e)
        return jsonify({'message': 'Error revoking consent'}), 500

    log_action(current_user.id, 'Consent revoked', 'consent', consent.id, consent.institution_name)

    return jsonify({
        'message': 'The institution can no longer access your encrypted identity.',
        'consent': consent.to_dict()
    }), 200

@consents_bp.route('/<consent_id>/renew', methods=['POST'])
@token_required
def renew_consent(current_user, consent_id):
    consent = _get_owned(consent_id, current_user.id)
    if not consent:
        return jsonify({'message': 'Consent not found'}), 404

    try:
        consent.renew()
        db.session.commit()
    except SQLAlchemyError as e:
        db.session.rollback()
        logger.error("Error renewing consent %s: %s", consent_id, e)
        return jsonify({'message': 'Error renewing consent'}), 500

    log_action(current_user.id, 'Consent renewed', 'consent', consent.id, consent.institution_name)

    return jsonify({
        'message': 'Access has been extended for another year.',
        'consent': consent.to_dict()
    }), 200

@consents_bp.route('/<consent_id>', methods=['DELETE'])
@token_required
def delete_consent(current_user, consent_id):
    consent = _get_owned(consent_id, current_user.id)
    if not consent:
        return jsonify({'message': 'Consent not found'}), 404

    institution_name = consent.institution_name
    try:
        db.session.delete(consent)
        db.session.commit()
    except SQLAlchemyError as e:
        db.session.rollback()
        logger.error("Error deleting consent %s: %s", consent_id, e)
        return jsonify({'message': 'Error deleting consent'}), 500

    log_action(current_user.id, 'Consent deleted', 'consent', consent_id, institution_name)

    return jsonify({'message': 'Consent deleted successfully'}), 200

@consents_bp.route('/settings', methods=['GET'])
@token_required
def get_settings(current_user):
    return jsonify(UserPreference.load(current_user.id, privacy_key(current_user.id), PRIVACY_DEFAULTS)), 200

@consents_bp.route('/settings', methods=['PUT'])
@token_required
def update_settings(current_user):
    data = get_json_body()
    if not data:
        return jsonify({'message': 'No data provided'}), 400

    updates, error = parse_bool_map(data, PRIVACY_DEFAULTS)
    if error:
        return jsonify({'message': error}), 400

    key = privacy_key(current_user.id)
    settings = UserPreference.load(current_user.id, key, PRIVACY_DEFAULTS)
    settings.update(updates)

    try:
        UserPreference.save(current_user.id, key, settings)
        db.session.commit()
    except SQLAlchemyError as e:
        db.session.rollback()
        logger.error("Error saving privacy settings: %s", e)
        return jsonify({'message': 'Error saving settings'}), 500

    return jsonify({'message': 'Privacy settings updated', 'settings': settings}), 200
