"""
Connected institution model
"""

import uuid

# Import shared db instance
from . import db, utcnow

INSTITUTION_STATUSES = ('connected', 'pending', 'disconnected')
TRUST_LEVELS = ('platinum', 'gold', 'silver')

# Institutions a user can request a connection with
AVAILABLE_INSTITUTIONS = [
    {'name': 'Canadian Trust Bank', 'country': 'Canada', 'type': 'Commercial Bank'},
    {'name': 'Australian Credit Corp', 'country': 'Australia', 'type': 'Credit Provider'},
    {'name': 'Tokyo Finance Group', 'country': 'Japan', 'type': 'Investment Bank'},
    {'name': 'Mumbai Central Bank', 'country': 'India', 'type': 'Commercial Bank'},
]

class ConnectedInstitution(db.Model):
    __tablename__ = 'connected_institutions'

    id = db.Column(db.String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    user_id = db.Column(db.String(36), db.ForeignKey('users.id'), nullable=False, index=True)
    institution_name = db.Column(db.String(150), nullable=False)
    institution_type = db.Column(db.String(100), nullable=False)
    country = db.Column(db.String(100), nullable=False)
    status = db.Column(db.String(20), nullable=False, default='pending')
    trust_level = db.Column(db.String(20), nullable=True, default='silver')
    verifications_count = db.Column(db.Integer, nullable=True, default=0)
    connected_at = db.Column(db.DateTime, default=utcnow)
    last_access_at = db.Column(db.DateTime, nullable=True)

    def to_dict(self):
        """Convert to dictionary"""
        return {
            'id': self.id,
            'user_id': self.user_id,
            'institution_name': self.institution_name,
            'institution_type': self.institution_type,
            'country': self.country,
            'status': self.status,
            'trust_level': self.trust_level,
            'verifications_count': self.verifications_count or 0,
            'connected_at': self.connected_at.isoformat() if self.connected_at else None,
            'last_access_at': self.last_access_at.isoformat() if self.last_access_at else None
        }

    def matches(self, search_term):
        """Case-insensitive match on name or country"""
        if not search_term:
            return True
        term = search_term.lower()
        return term in (self.institution_name or '').lower() or term in (self.country or '').lower()

    def disconnect(self):
        self.status = 'disconnected'

    @classmethod
    def get_by_user(cls, user_id):
        return cls.query.filter_by(user_id=user_id).order_by(cls.connected_at.asc()).all()

    @classmethod
    def get_for_user(cls, institution_id, user_id):
        return cls.query.filter_by(id=institution_id, user_id=user_id).first()

    @classmethod
    def get_active_by_name(cls, user_id, institution_name):
        """A connection that is not disconnected, if one exists"""
        return (cls.query.filter_by(user_id=user_id, institution_name=institution_name)
                .filter(cls.status != 'disconnected')
                .first())

    @classmethod
    def count_for_user(cls, user_id):
        return cls.query.filter_by(user_id=user_id).count()

    def __repr__(self):
        return f'<ConnectedInstitution {self.institution_name} {self.status}>'
