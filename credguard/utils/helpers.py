"""
Helper utilities for the CREDGUARD API
"""

import logging
import re

from flask import request
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from credguard.models import db
from credguard.models.activity import ActivityLog

logger = logging.getLogger(__name__)

EMAIL_PATTERN = re.compile(r'^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$')

def get_client_ip():
    """Get client IP address"""
    forwarded_for = request.environ.get('HTTP_X_FORWARDED_FOR')
    if forwarded_for:
        return forwarded_for.split(',')[0].strip()
    return request.environ.get('REMOTE_ADDR')

def get_user_agent():
    """Get user agent string"""
    return request.headers.get('User-Agent', '')[:500]

def log_action(user_id, action, resource_type, resource_id=None, details=None, status='success'):
    """Record a user action in the activity log; never fails the caller"""
    try:
        entry = ActivityLog.log_action(
            user_id=user_id,
            action=action,
            resource_type=resource_type,
            resource_id=resource_id,
            details=details,
            status=status,
            ip_address=get_client_ip(),
            user_agent=get_user_agent()
        )

        db.session.add(entry)
        db.session.commit()

    except SQLAlchemyError as e:
        logger.warning("Failed to log action %s for %s: %s", action, user_id, e)
        db.session.rollback()

def validate_email(email):
    """Basic email validation"""
    return bool(email) and EMAIL_PATTERN.match(email) is not None

def sanitize_input(text, max_length=None):
    """Trim user input"""
    if not text:
        return text

    text = str(text).strip()

    if max_length:
        text = text[:max_length]

    return text

def get_json_body():
    """Request JSON as a dict, or None when absent or not an object"""
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else None

def parse_bool_map(data, allowed_keys):
    """
    Validate a partial {key: bool} update
    Returns (values, error_message)
    """
    unknown = [key for key in data if key not in allowed_keys]
    if unknown:
        return None, f'Unknown preference: {", ".join(sorted(unknown))}'

    for key, value in data.items():
        if not isinstance(value, bool):
            return None, f'{key} must be true or false'

    return dict(data), None

def handle_database_error(error):
    """Map database errors to a message and status code"""
    error_message = str(error).lower()

    if isinstance(error, IntegrityError) or 'unique' in error_message or 'duplicate key' in error_message:
        if 'foreign key' in error_message:
            return "Referenced record not found", 400
        if 'not null' in error_message:
            return "Required field is missing", 400
        return "This record already exists", 409

    logger.error("Database error: %s", error)
    return "Database operation failed", 500
