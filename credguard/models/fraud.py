"""
Fraud alert and fraud scan models
"""

import uuid

# Import shared db instance
from . import db, utcnow

SEVERITIES = ('low', 'medium', 'high', 'critical')
ALERT_STATUSES = ('pending', 'investigating', 'resolved')

DEFAULT_RISK_SCORE = 15
PROTECTION_LEVEL = 98

class FraudAlert(db.Model):
    __tablename__ = 'fraud_alerts'

    id = db.Column(db.String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    user_id = db.Column(db.String(36), db.ForeignKey('users.id'), nullable=False, index=True)
    alert_type = db.Column(db.String(100), nullable=False)
    severity = db.Column(db.String(20), nullable=False, default='low')
    description = db.Column(db.Text, nullable=False)
    location = db.Column(db.String(150), nullable=True)
    status = db.Column(db.String(20), nullable=False, default='pending')
    created_at = db.Column(db.DateTime, default=utcnow)
    resolved_at = db.Column(db.DateTime, nullable=True)

    def to_dict(self):
        """Convert to dictionary"""
        return {
            'id': self.id,
            'type': self.alert_type,
            'severity': self.severity,
            'description': self.description,
            'location': self.location,
            'status': self.status,
            'timestamp': self.created_at.isoformat() if self.created_at else None,
            'resolved_at': self.resolved_at.isoformat() if self.resolved_at else None
        }

    def resolve(self):
        self.status = 'resolved'
        self.resolved_at = utcnow()

    @classmethod
    def get_by_user(cls, user_id):
        return cls.query.filter_by(user_id=user_id).order_by(cls.created_at.desc()).all()

    @classmethod
    def get_for_user(cls, alert_id, user_id):
        return cls.query.filter_by(id=alert_id, user_id=user_id).first()

    def __repr__(self):
        return f'<FraudAlert {self.alert_type} {self.status}>'

class FraudScan(db.Model):
    __tablename__ = 'fraud_scans'

    id = db.Column(db.String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    user_id = db.Column(db.String(36), db.ForeignKey('users.id'), nullable=False, index=True)
    risk_score = db.Column(db.Integer, nullable=False)
    threats_found = db.Column(db.Integer, nullable=False, default=0)
    created_at = db.Column(db.DateTime, default=utcnow)

    def to_dict(self):
        return {
            'id': self.id,
            'risk_score': self.risk_score,
            'threats_found': self.threats_found,
            'created_at': self.created_at.isoformat() if self.created_at else None
        }

    @classmethod
    def latest_for_user(cls, user_id):
        return cls.query.filter_by(user_id=user_id).order_by(cls.created_at.desc()).first()

    @classmethod
    def count_for_user(cls, user_id):
        return cls.query.filter_by(user_id=user_id).count()

    def __repr__(self):
        return f'<FraudScan {self.risk_score}>'
