"""
Authentication routes for the CREDGUARD API
Handles sign up, sign in, sign out and the current session
"""

import logging

from flask import Blueprint, jsonify
from sqlalchemy.exc import SQLAlchemyError

from credguard.models import db
from credguard.models.profile import Profile
from credguard.models.user import User
from credguard.utils.auth import generate_token, token_required
from credguard.utils.database import provision_user
from credguard.utils.helpers import validate_email, sanitize_input, log_action, handle_database_error, get_json_body

logger = logging.getLogger(__name__)

auth_bp = Blueprint('auth', __name__)

MIN_PASSWORD_LENGTH = 6

def _validate_credentials(data):
    """Shared email/password checks; returns (email, password, error_message)"""
    email = sanitize_input(data.get('email'))
    password = data.get('password')

    if not email or not password:
        return None, None, 'Email and password required'

    if not validate_email(email):
        return None, None, 'Please enter a valid email address'

    if not isinstance(password, str) or len(password) < MIN_PASSWORD_LENGTH:
        return None, None, f'Password must be at least {MIN_PASSWORD_LENGTH} characters'

    return email, password, None

def _session_payload(user):
    profile = Profile.get_by_user(user.id)
    return {
        'token': generate_token(user),
        'user': user.to_dict(),
        'profile': profile.to_dict() if profile else None
    }

@auth_bp.route('/signup', methods=['POST'])
def signup():
    """Create an account with its profile and encrypted identity"""
    data = get_json_body()
    if not data:
        return jsonify({'message': 'No data provided'}), 400

    email, password, error = _validate_credentials(data)
    if error:
        return jsonify({'message': error}), 400

    if User.get_by_email(email):
        return jsonify({'message': 'This email is already registered. Please sign in.'}), 409

    try:
        user = User.create_user(email=email, password=password)
        db.session.add(user)
        db.session.flush()

        provision_user(user, display_name=sanitize_input(data.get('display_name'), max_length=100))
        user.mark_signed_in()
        db.session.commit()

    except SQLAlchemyError as e:
        db.session.rollback()
        logger.error("Signup failed for %s: %s", email, e)

        error_message, status_code = handle_database_error(e)
        return jsonify({'message': error_message}), status_code

    log_action(user.id, 'Account created', 'user', user.id, 'Your encrypted identity is being generated.')
    logger.info("New account %s", user.id)

    payload = _session_payload(user)
    payload['message'] = 'Account created! Your encrypted identity is being generated.'
    return jsonify(payload), 201

@auth_bp.route('/login', methods=['POST'])
def login():
    """Sign in with email and password"""
    data = get_json_body()
    if not data:
        return jsonify({'message': 'No data provided'}), 400

    email, password, error = _validate_credentials(data)
    if error:
        return jsonify({'message': error}), 400

    user = User.get_by_email(email)
    if not user or not user.check_password(password):
        return jsonify({'message': 'Invalid email or password. Please try again.'}), 401

    try:
        user.mark_signed_in()
        db.session.commit()
    except SQLAlchemyError as e:
        db.session.rollback()
        logger.error("Could not stamp sign-in for %s: %s", user.id, e)
        return jsonify({'message': 'Login failed'}), 500

    log_action(user.id, 'Signed in', 'user', user.id)

    payload = _session_payload(user)
    payload['message'] = 'Successfully signed in to CREDGUARD.'
    return jsonify(payload), 200

@auth_bp.route('/logout', methods=['POST'])
@token_required
def logout(current_user):
    """Tokens are stateless; the client discards its copy"""
    log_action(current_user.id, 'Signed out', 'user', current_user.id)
    return jsonify({'message': 'You have been signed out successfully.'}), 200

@auth_bp.route('/session', methods=['GET'])
@token_required
def session(current_user):
    profile = Profile.get_by_user(current_user.id)
    return jsonify({
        'user': current_user.to_dict(),
        'profile': profile.to_dict() if profile else None
    }), 200
