"""
Utility modules for the CREDGUARD API
"""

from .auth import token_required, optional_auth, generate_token
from .database import init_database, provision_user
from .helpers import get_client_ip, log_action

__all__ = [
    'token_required',
    'optional_auth',
    'generate_token',
    'init_database',
    'provision_user',
    'get_client_ip',
    'log_action'
]
