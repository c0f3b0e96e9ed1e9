"""
Profile routes: display name, trust level, stats and notification preferences
"""

import logging

from flask import Blueprint, jsonify
from sqlalchemy.exc import SQLAlchemyError

from credguard.models import db
from credguard.models.consent import Consent
from credguard.models.institution import ConnectedInstitution
from credguard.models.preference import (
    UserPreference,
    NOTIFICATION_DEFAULTS,
    EMAIL_DEFAULTS,
    notification_key,
    email_key,
)
from credguard.models.profile import Profile
from credguard.models.verification import VerificationHistory
from credguard.utils.auth import token_required
from credguard.utils.helpers import sanitize_input, log_action, get_json_body, parse_bool_map
from credguard.utils.scoring import trust_level

logger = logging.getLogger(__name__)

profile_bp = Blueprint('profile', __name__)

def _stats(user_id):
    return {
        'verifications': VerificationHistory.count_for_user(user_id),
        'institutions': ConnectedInstitution.count_for_user(user_id),
        'consents': Consent.count_for_user(user_id)
    }

@profile_bp.route('', methods=['GET'])
@token_required
def get_profile(current_user):
    profile = Profile.get_by_user(current_user.id)
    if not profile:
        return jsonify({'message': 'Profile not found'}), 404

    data = profile.to_dict()
    return jsonify({
        'profile': data,
        'trust_level': trust_level(data['trust_score']),
        'stats': _stats(current_user.id)
    }), 200

@profile_bp.route('', methods=['PUT'])
@token_required
def update_profile(current_user):
    data = get_json_body()
    if not data:
        return jsonify({'message': 'No data provided'}), 400

    display_name = sanitize_input(data.get('display_name'))
    if not display_name or len(display_name) > 100:
        return jsonify({'message': 'Display name must be between 1 and 100 characters'}), 400

    profile = Profile.get_by_user(current_user.id)
    if not profile:
        return jsonify({'message': 'Profile not found'}), 404

    try:
        profile.display_name = display_name
        db.session.commit()
    except SQLAlchemyError as e:
        db.session.rollback()
        logger.error("Profile update error: %s", e)
        return jsonify({'message': 'Failed to update profile.'}), 500

    log_action(current_user.id, 'Profile updated', 'profile', profile.id)

    return jsonify({
        'message': 'Your profile has been updated successfully.',
        'profile': profile.to_dict()
    }), 200

def _get_preferences(user_id, key, defaults):
    return jsonify(UserPreference.load(user_id, key, defaults)), 200

def _update_preferences(user_id, key, defaults, success_message):
    data = get_json_body()
    if not data:
        return jsonify({'message': 'No data provided'}), 400

    updates, error = parse_bool_map(data, defaults)
    if error:
        return jsonify({'message': error}), 400

    preferences = UserPreference.load(user_id, key, defaults)
    preferences.update(updates)

    try:
        UserPreference.save(user_id, key, preferences)
        db.session.commit()
    except SQLAlchemyError as e:
        db.session.rollback()
        logger.error("Error saving %s: %s", key, e)
        return jsonify({'message': 'Failed to save preferences'}), 500

    return jsonify({'message': success_message, 'preferences': preferences}), 200

@profile_bp.route('/preferences/notifications', methods=['GET'])
@token_required
def get_notification_preferences(current_user):
    return _get_preferences(current_user.id, notification_key(current_user.id), NOTIFICATION_DEFAULTS)

@profile_bp.route('/preferences/notifications', methods=['PUT'])
@token_required
def update_notification_preferences(current_user):
    return _update_preferences(current_user.id, notification_key(current_user.id), NOTIFICATION_DEFAULTS,
                               'Your notification preferences have been updated.')

@profile_bp.route('/preferences/email', methods=['GET'])
@token_required
def get_email_preferences(current_user):
    return _get_preferences(current_user.id, email_key(current_user.id), EMAIL_DEFAULTS)

@profile_bp.route('/preferences/email', methods=['PUT'])
@token_required
def update_email_preferences(current_user):
    return _update_preferences(current_user.id, email_key(current_user.id), EMAIL_DEFAULTS,
                               'Your email notification preferences have been updated.')
