"""
Profile and trust score history models
"""

import uuid

# Import shared db instance
from . import db, utcnow

DEFAULT_TRUST_SCORE = 750

class Profile(db.Model):
    __tablename__ = 'profiles'

    id = db.Column(db.String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    user_id = db.Column(db.String(36), db.ForeignKey('users.id'), nullable=False, unique=True)
    display_name = db.Column(db.String(100))
    email = db.Column(db.String(255))
    trust_score = db.Column(db.Integer, default=DEFAULT_TRUST_SCORE)
    created_at = db.Column(db.DateTime, default=utcnow)
    updated_at = db.Column(db.DateTime, default=utcnow, onupdate=utcnow)

    @property
    def effective_trust_score(self):
        return self.trust_score or DEFAULT_TRUST_SCORE

    def to_dict(self):
        """Convert to dictionary, filling the display defaults the dashboard expects"""
        fallback_name = self.user.default_display_name if self.user else ''
        return {
            'id': self.id,
            'user_id': self.user_id,
            'display_name': self.display_name or fallback_name,
            'email': self.email or (self.user.email if self.user else None),
            'trust_score': self.effective_trust_score,
            'created_at': self.created_at.isoformat() if self.created_at else None,
            'updated_at': self.updated_at.isoformat() if self.updated_at else None
        }

    @classmethod
    def get_by_user(cls, user_id):
        return cls.query.filter_by(user_id=user_id).first()

    def __repr__(self):
        return f'<Profile {self.display_name or self.user_id}>'

class TrustScoreHistory(db.Model):
    __tablename__ = 'trust_score_history'

    id = db.Column(db.String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    user_id = db.Column(db.String(36), db.ForeignKey('users.id'), nullable=False, index=True)
    score = db.Column(db.Integer, nullable=False)
    recorded_at = db.Column(db.DateTime, default=utcnow)

    def to_dict(self):
        return {
            'id': self.id,
            'score': self.score,
            'recorded_at': self.recorded_at.isoformat() if self.recorded_at else None
        }

    @classmethod
    def record(cls, user_id, score):
        """Build a history point; the caller adds and commits it"""
        return cls(user_id=user_id, score=score)

    @classmethod
    def get_by_user(cls, user_id, limit=12):
        """Most recent points, returned oldest first for charting"""
        points = (cls.query.filter_by(user_id=user_id)
                  .order_by(cls.recorded_at.desc())
                  .limit(limit)
                  .all())
        return list(reversed(points))

    def __repr__(self):
        return f'<TrustScoreHistory {self.score}>'
