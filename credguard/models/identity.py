"""
Encrypted behavioral identity model
"""

import uuid

# Import shared db instance
from . import db, utcnow

METRIC_KEYS = (
    'repayment_discipline',
    'spending_stability',
    'employment_consistency',
    'income_regularity',
)

METRIC_LABELS = {
    'repayment_discipline': 'Repayment Discipline',
    'spending_stability': 'Spending Stability',
    'employment_consistency': 'Employment Consistency',
    'income_regularity': 'Income Regularity',
}

DEFAULT_METRICS = {
    'repayment_discipline': 85,
    'spending_stability': 80,
    'employment_consistency': 90,
    'income_regularity': 82,
}

class EncryptedIdentity(db.Model):
    __tablename__ = 'encrypted_identities'

    id = db.Column(db.String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    user_id = db.Column(db.String(36), db.ForeignKey('users.id'), nullable=False, unique=True)
    encrypted_vector = db.Column(db.String(255), nullable=False)
    zk_proof = db.Column(db.String(255), nullable=True)
    behavioral_metrics = db.Column(db.JSON, nullable=True)
    cyborgdb_indexed = db.Column(db.Boolean, default=False)
    cyborgdb_index_id = db.Column(db.String(100), nullable=True)
    created_at = db.Column(db.DateTime, default=utcnow)
    updated_at = db.Column(db.DateTime, default=utcnow, onupdate=utcnow)

    @property
    def metrics(self):
        """Behavioral metrics, falling back to the demo defaults when unset"""
        return dict(self.behavioral_metrics or DEFAULT_METRICS)

    def mark_indexed(self, encrypted_vector, index_id):
        self.encrypted_vector = encrypted_vector
        self.cyborgdb_indexed = True
        self.cyborgdb_index_id = index_id
        self.updated_at = utcnow()

    def to_dict(self):
        """Convert to dictionary"""
        return {
            'id': self.id,
            'user_id': self.user_id,
            'encrypted_vector': self.encrypted_vector,
            'zk_proof': self.zk_proof,
            'behavioral_metrics': self.metrics,
            'cyborgdb_indexed': bool(self.cyborgdb_indexed),
            'cyborgdb_index_id': self.cyborgdb_index_id,
            'created_at': self.created_at.isoformat() if self.created_at else None,
            'updated_at': self.updated_at.isoformat() if self.updated_at else None
        }

    def to_export(self, timestamp):
        """Shape of the downloadable identity file"""
        return {
            'encryptedVector': self.encrypted_vector,
            'zkProof': self.zk_proof,
            'cyborgdbIndexed': bool(self.cyborgdb_indexed),
            'cyborgdbIndexId': self.cyborgdb_index_id,
            'timestamp': timestamp
        }

    @classmethod
    def get_by_user(cls, user_id):
        return cls.query.filter_by(user_id=user_id).first()

    def __repr__(self):
        return f'<EncryptedIdentity {self.encrypted_vector[:10] if self.encrypted_vector else None}>'
