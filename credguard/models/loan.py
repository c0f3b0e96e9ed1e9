"""
Loan application model
Stores the request and the outcome of the privacy-preserving assessment
"""

import uuid

# Import shared db instance
from . import db, utcnow

class LoanApplication(db.Model):
    __tablename__ = 'loan_applications'

    id = db.Column(db.String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    user_id = db.Column(db.String(36), db.ForeignKey('users.id'), nullable=False, index=True)

    # Request
    amount = db.Column(db.Float, nullable=False)
    purpose = db.Column(db.String(255), nullable=True)
    tenure = db.Column(db.Integer, nullable=True)  # months
    status = db.Column(db.String(20), nullable=False, default='submitted')  # submitted, assessed

    # Outcome
    decision_status = db.Column(db.String(20), nullable=True)
    eligibility = db.Column(db.String(20), nullable=True)  # approved, conditional, rejected
    recommended_min = db.Column(db.Float, nullable=True)
    recommended_max = db.Column(db.Float, nullable=True)
    risk_score = db.Column(db.Integer, nullable=True)
    fraud_likelihood = db.Column(db.Float, nullable=True)
    fairness_score = db.Column(db.Integer, nullable=True)
    cryptographic_proof = db.Column(db.String(255), nullable=True)
    reasoning = db.Column(db.JSON, nullable=True)

    created_at = db.Column(db.DateTime, default=utcnow)
    updated_at = db.Column(db.DateTime, default=utcnow, onupdate=utcnow)

    def to_dict(self):
        """Convert to dictionary"""
        return {
            'id': self.id,
            'user_id': self.user_id,
            'amount': self.amount,
            'purpose': self.purpose,
            'tenure': self.tenure,
            'status': self.status,
            'decision_status': self.decision_status,
            'eligibility': self.eligibility,
            'recommended_range': {
                'min': self.recommended_min,
                'max': self.recommended_max
            },
            'risk_score': self.risk_score,
            'fraud_likelihood': self.fraud_likelihood,
            'fairness_score': self.fairness_score,
            'cryptographic_proof': self.cryptographic_proof,
            'reasoning': self.reasoning or [],
            'created_at': self.created_at.isoformat() if self.created_at else None,
            'updated_at': self.updated_at.isoformat() if self.updated_at else None
        }

    @classmethod
    def get_by_user(cls, user_id):
        """Applications for a user, newest first"""
        return cls.query.filter_by(user_id=user_id).order_by(cls.created_at.desc()).all()

    @classmethod
    def get_for_user(cls, application_id, user_id):
        return cls.query.filter_by(id=application_id, user_id=user_id).first()

    @classmethod
    def from_assessment(cls, user_id, amount, purpose, tenure, assessment):
        """Build an assessed application from a LoanAssessment"""
        return cls(
            user_id=user_id,
            amount=amount,
            purpose=purpose,
            tenure=tenure,
            status='assessed',
            decision_status=assessment.eligibility,
            eligibility=assessment.eligibility,
            recommended_min=assessment.recommended_min,
            recommended_max=assessment.recommended_max,
            risk_score=assessment.risk_score,
            fraud_likelihood=assessment.fraud_likelihood,
            fairness_score=assessment.fairness_score,
            cryptographic_proof=assessment.cryptographic_proof,
            reasoning=list(assessment.reasoning)
        )

    def __repr__(self):
        return f'<LoanApplication {self.amount} {self.eligibility}>'
