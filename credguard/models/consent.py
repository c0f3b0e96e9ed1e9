"""
Consent model: an institution's permission to access the encrypted identity
"""

import uuid

# Import shared db instance
from . import db, utcnow

CONSENT_STATUSES = ('active', 'expired', 'revoked')

def one_year_from(moment):
    """Same calendar day next year (Feb 29 rolls back to Feb 28)"""
    try:
        return moment.replace(year=moment.year + 1)
    except ValueError:
        return moment.replace(year=moment.year + 1, day=28)

class Consent(db.Model):
    __tablename__ = 'consents'

    id = db.Column(db.String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    user_id = db.Column(db.String(36), db.ForeignKey('users.id'), nullable=False, index=True)
    institution_name = db.Column(db.String(150), nullable=False)
    purpose = db.Column(db.String(255), nullable=False)
    data_types = db.Column(db.JSON, nullable=False, default=list)
    status = db.Column(db.String(20), nullable=False, default='active')
    granted_at = db.Column(db.DateTime, default=utcnow)
    expires_at = db.Column(db.DateTime, nullable=False)

    @property
    def is_past_expiry(self):
        return self.expires_at is not None and self.expires_at <= utcnow()

    def to_dict(self):
        """Convert to dictionary"""
        return {
            'id': self.id,
            'user_id': self.user_id,
            'institution_name': self.institution_name,
            'purpose': self.purpose,
            'data_types': self.data_types or [],
            'status': self.status,
            'granted_at': self.granted_at.isoformat() if self.granted_at else None,
            'expires_at': self.expires_at.isoformat() if self.expires_at else None
        }

    def revoke(self):
        self.status = 'revoked'

    def renew(self):
        """Reactivate for another year from today"""
        self.status = 'active'
        self.expires_at = one_year_from(utcnow())

    def expire_if_due(self):
        """Flip an active consent past its expiry date to expired; True when changed"""
        if self.status == 'active' and self.is_past_expiry:
            self.status = 'expired'
            return True
        return False

    @classmethod
    def get_by_user(cls, user_id):
        return cls.query.filter_by(user_id=user_id).order_by(cls.granted_at.desc()).all()

    @classmethod
    def get_for_user(cls, consent_id, user_id):
        return cls.query.filter_by(id=consent_id, user_id=user_id).first()

    @classmethod
    def count_for_user(cls, user_id):
        return cls.query.filter_by(user_id=user_id).count()

    @staticmethod
    def count_by_status(consents):
        counts = {status: 0 for status in CONSENT_STATUSES}
        for consent in consents:
            if consent.status in counts:
                counts[consent.status] += 1
        return counts

    def __repr__(self):
        return f'<Consent {self.institution_name} {self.status}>'
