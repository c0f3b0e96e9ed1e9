"""
Authentication utilities for the CREDGUARD API
Handles JWT bearer tokens and the route decorators built on them
"""

import logging
from datetime import timedelta
from functools import wraps

import jwt
from flask import request, jsonify, current_app, g

from credguard.models import utcnow
from credguard.models.user import User

logger = logging.getLogger(__name__)

class AuthError(Exception):
    """Raised when a request cannot be authenticated"""

def generate_token(user):
    """Generate an HS256 JWT for the user"""
    expiration_time = utcnow() + timedelta(hours=current_app.config['TOKEN_EXPIRY_HOURS'])

    token_payload = {
        'user_id': user.id,
        'email': user.email,
        'exp': expiration_time
    }

    return jwt.encode(token_payload, current_app.config['SECRET_KEY'], algorithm='HS256')

def decode_token(token):
    """Decode JWT token"""
    try:
        return jwt.decode(token, current_app.config['SECRET_KEY'], algorithms=['HS256'])
    except jwt.ExpiredSignatureError:
        raise AuthError('Token has expired')
    except jwt.InvalidTokenError:
        raise AuthError('Token is invalid')

def get_token_from_request():
    """Extract the bearer token from the Authorization header, or None when absent"""
    auth_header = request.headers.get('Authorization')
    if not auth_header:
        return None

    scheme, _, token = auth_header.partition(' ')
    if scheme.lower() != 'bearer' or not token.strip():
        raise AuthError('Token format invalid')

    return token.strip()

def get_user_from_token(token):
    """Resolve a token to its user"""
    data = decode_token(token)

    current_user = User.query.filter_by(id=data.get('user_id')).first()
    if not current_user:
        raise AuthError('User not found')

    return current_user

def token_required(f):
    """Decorator for routes that require authentication"""
    @wraps(f)
    def decorated(*args, **kwargs):
        try:
            token = get_token_from_request()
            if not token:
                raise AuthError('Token is missing')
            current_user = get_user_from_token(token)
        except AuthError as e:
            return jsonify({'message': str(e)}), 401

        g.current_user = current_user
        return f(current_user, *args, **kwargs)

    return decorated

def optional_auth(f):
    """Decorator for routes with optional authentication"""
    @wraps(f)
    def decorated(*args, **kwargs):
        current_user = None

        try:
            token = get_token_from_request()
            if token:
                current_user = get_user_from_token(token)
        except AuthError as e:
            logger.debug("Ignoring invalid optional token: %s", e)

        return f(current_user, *args, **kwargs)

    return decorated
