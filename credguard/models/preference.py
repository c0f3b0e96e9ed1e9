"""
Per-user key/value preferences (notification, email and privacy settings)
"""

import uuid

# Import shared db instance
from . import db, utcnow

NOTIFICATION_DEFAULTS = {
    'loans': True,
    'verifications': True,
    'institutions': True,
}

EMAIL_DEFAULTS = {
    'emailEnabled': False,
    'emailLoans': True,
    'emailVerifications': True,
    'emailInstitutions': True,
}

PRIVACY_DEFAULTS = {
    'auto_revoke': True,
    'notify_on_access': True,
}

def notification_key(user_id):
    return f'notification_prefs_{user_id}'

def email_key(user_id):
    return f'email_prefs_{user_id}'

def privacy_key(user_id):
    return f'privacy_settings_{user_id}'

class UserPreference(db.Model):
    __tablename__ = 'user_preferences'
    __table_args__ = (db.UniqueConstraint('user_id', 'key', name='uq_user_preferences_user_key'),)

    id = db.Column(db.String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    user_id = db.Column(db.String(36), db.ForeignKey('users.id'), nullable=False, index=True)
    key = db.Column(db.String(100), nullable=False)
    value = db.Column(db.JSON, nullable=False)
    updated_at = db.Column(db.DateTime, default=utcnow, onupdate=utcnow)

    @classmethod
    def load(cls, user_id, key, defaults):
        """Stored value merged over defaults; unknown stored keys are dropped"""
        merged = dict(defaults)
        row = cls.query.filter_by(user_id=user_id, key=key).first()
        if row and isinstance(row.value, dict):
            merged.update({k: v for k, v in row.value.items() if k in defaults})
        return merged

    @classmethod
    def save(cls, user_id, key, value):
        """Insert or replace a preference; the caller commits"""
        row = cls.query.filter_by(user_id=user_id, key=key).first()
        if row is None:
            row = cls(user_id=user_id, key=key, value=value)
            db.session.add(row)
        else:
            row.value = value
            row.updated_at = utcnow()
        return row

    def __repr__(self):
        return f'<UserPreference {self.key}>'
