"""
cyborgdb-api action handler
POST {action, data}; actions: generate_vector, verify_identity, search_similar
"""

import logging

from flask import Blueprint, jsonify, request

from credguard.utils.auth import AuthError, get_token_from_request, get_user_from_token
from credguard.utils.helpers import get_json_body
from credguard.utils.identity import (
    IdentityNotFound,
    IdentityUpdateError,
    generate_vector,
    search_similar,
    verify_identity,
)

logger = logging.getLogger(__name__)

cyborgdb_bp = Blueprint('cyborgdb', __name__)

ACTIONS = {
    'generate_vector': generate_vector,
    'verify_identity': verify_identity,
    'search_similar': search_similar,
}

@cyborgdb_bp.route('/cyborgdb-api', methods=['POST'])
def cyborgdb_api():
    if not request.headers.get('Authorization'):
        return jsonify({'error': 'Missing authorization'}), 401

    try:
        token = get_token_from_request()
        user = get_user_from_token(token)
    except AuthError as e:
        logger.warning("cyborgdb-api auth error: %s", e)
        return jsonify({'error': 'Invalid token'}), 401

    body = get_json_body() or {}
    action = body.get('action')
    logger.info("CyborgDB API - Action: %s, User: %s", action, user.id)

    handler = ACTIONS.get(action)
    if handler is None:
        return jsonify({'error': 'Unknown action'}), 400

    try:
        return jsonify(handler(user)), 200
    except IdentityNotFound as e:
        return jsonify({'error': str(e)}), 404
    except IdentityUpdateError as e:
        return jsonify({'error': str(e)}), 500
    except Exception as e:
        logger.exception("CyborgDB API error")
        return jsonify({'error': str(e) or 'Internal error'}), 500
