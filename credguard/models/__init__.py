"""
Database models for the CREDGUARD dashboard
"""

from datetime import datetime, timezone

from flask_sqlalchemy import SQLAlchemy

db = SQLAlchemy()


def utcnow():
    """Naive UTC timestamp, matching what the DateTime columns store"""
    return datetime.now(timezone.utc).replace(tzinfo=None)


# Import all models to ensure they're registered
from .user import User
from .profile import Profile, TrustScoreHistory
from .identity import EncryptedIdentity
from .loan import LoanApplication
from .verification import VerificationHistory
from .institution import ConnectedInstitution
from .consent import Consent
from .fraud import FraudAlert, FraudScan
from .preference import UserPreference
from .activity import ActivityLog
from .inquiry import SalesInquiry

__all__ = [
    'db',
    'User',
    'Profile',
    'TrustScoreHistory',
    'EncryptedIdentity',
    'LoanApplication',
    'VerificationHistory',
    'ConnectedInstitution',
    'Consent',
    'FraudAlert',
    'FraudScan',
    'UserPreference',
    'ActivityLog',
    'SalesInquiry',
]
