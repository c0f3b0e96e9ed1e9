"""
Verification history model
"""

import uuid

# Import shared db instance
from . import db, utcnow

class VerificationHistory(db.Model):
    __tablename__ = 'verification_history'

    id = db.Column(db.String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    user_id = db.Column(db.String(36), db.ForeignKey('users.id'), nullable=False, index=True)
    verification_type = db.Column(db.String(50), nullable=False)
    institution_name = db.Column(db.String(150), nullable=False)
    country = db.Column(db.String(100), nullable=False)
    status = db.Column(db.String(20), nullable=False)  # approved, declined, pending, conditional, rejected
    score = db.Column(db.Integer, nullable=True)
    zk_proof = db.Column(db.String(255), nullable=True)
    created_at = db.Column(db.DateTime, default=utcnow)

    def to_dict(self):
        """Convert to dictionary"""
        return {
            'id': self.id,
            'user_id': self.user_id,
            'verification_type': self.verification_type,
            'institution_name': self.institution_name,
            'country': self.country,
            'status': self.status,
            'score': self.score,
            'zk_proof': self.zk_proof,
            'created_at': self.created_at.isoformat() if self.created_at else None
        }

    def matches(self, search_term):
        """Case-insensitive match on institution, country or id"""
        if not search_term:
            return True
        term = search_term.lower()
        return (term in (self.institution_name or '').lower()
                or term in (self.country or '').lower()
                or term in (self.id or '').lower())

    @classmethod
    def get_by_user(cls, user_id):
        """Verifications for a user, newest first"""
        return cls.query.filter_by(user_id=user_id).order_by(cls.created_at.desc()).all()

    @classmethod
    def search(cls, user_id, search_term=None, status='all'):
        """Filter a user's verifications by free-text search and status"""
        query = cls.query.filter_by(user_id=user_id)
        if status and status != 'all':
            query = query.filter_by(status=status)
        rows = query.order_by(cls.created_at.desc()).all()
        return [row for row in rows if row.matches(search_term)]

    @classmethod
    def count_for_user(cls, user_id):
        return cls.query.filter_by(user_id=user_id).count()

    def __repr__(self):
        return f'<VerificationHistory {self.verification_type} {self.status}>'
