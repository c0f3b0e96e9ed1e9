"""
Trust score and loan assessment arithmetic

The trust score is a linear function of four behavioral percentages and the
loan assessment is a set of fixed threshold comparisons on that score.
"""

import math
import random
from dataclasses import dataclass, field
from typing import List, Optional

from credguard.models.identity import METRIC_KEYS
from credguard.utils.vectors import generate_decision_proof

MIN_TRUST_SCORE = 600
MAX_TRUST_SCORE = 850

PROCESSING_STEPS = [
    {'progress': 10, 'step': 'Validating consent and permissions...'},
    {'progress': 25, 'step': 'Retrieving Encrypted Behavioral Identity...'},
    {'progress': 40, 'step': 'Performing homomorphic similarity matching...'},
    {'progress': 55, 'step': 'Calculating encrypted risk signals...'},
    {'progress': 70, 'step': 'Verifying compliance proofs...'},
    {'progress': 85, 'step': 'Generating cryptographic decision proof...'},
    {'progress': 100, 'step': 'Assessment complete'},
]

REASONING = {
    'approved': [
        'Encrypted behavioral vector shows consistent patterns',
        'Trust score exceeds threshold for requested amount',
        'No adverse fraud signals detected',
        'Compliance verification passed',
    ],
    'conditional': [
        'Behavioral patterns indicate moderate confidence',
        'Additional verification may be required',
        'Recommended: Provide collateral or co-signer',
        'Compliance verification passed with conditions',
    ],
    'rejected': [
        'Encrypted behavioral similarity below threshold',
        'Requested amount exceeds recommended limit',
        'Risk assessment indicates elevated concern',
        'Consider requesting a lower amount',
    ],
}

def round_half_up(value):
    return int(math.floor(value + 0.5))

def clamp(value, lower, upper):
    return max(lower, min(upper, value))

def validate_metrics(metrics):
    """
    Check the four slider values
    Returns (clean_metrics, error_message)
    """
    if not isinstance(metrics, dict):
        return None, 'Behavioral metrics must be an object'

    clean = {}
    for key in METRIC_KEYS:
        value = metrics.get(key)
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            return None, f'{key} must be a number between 0 and 100'
        if not 0 <= value <= 100:
            return None, f'{key} must be a number between 0 and 100'
        clean[key] = value

    return clean, None

def compute_trust_score(metrics):
    """600 + 2 x the rounded average of the four metrics, kept within 600-850"""
    average = round_half_up(sum(metrics.get(key, 0) for key in METRIC_KEYS) / len(METRIC_KEYS))
    score = MIN_TRUST_SCORE + round_half_up(average * 2)
    return clamp(score, MIN_TRUST_SCORE, MAX_TRUST_SCORE)

def trust_level(score):
    """Label shown next to a trust score"""
    if score >= 800:
        return 'Excellent'
    if score >= 700:
        return 'Good'
    if score >= 600:
        return 'Fair'
    return 'Building'

def max_loan_for(trust_score):
    if trust_score >= 800:
        return 50000
    if trust_score >= 700:
        return 35000
    if trust_score >= 600:
        return 20000
    return 10000

@dataclass
class LoanAssessment:
    eligibility: str
    recommended_min: int
    recommended_max: int
    risk_score: int
    fraud_likelihood: float
    fairness_score: int
    cryptographic_proof: str
    compliance_verified: bool = True
    reasoning: List[str] = field(default_factory=list)

    def to_dict(self):
        return {
            'eligibility': self.eligibility,
            'recommended_range': {
                'min': self.recommended_min,
                'max': self.recommended_max
            },
            'risk_score': self.risk_score,
            'fraud_likelihood': self.fraud_likelihood,
            'fairness_score': self.fairness_score,
            'cryptographic_proof': self.cryptographic_proof,
            'compliance_verified': self.compliance_verified,
            'reasoning': list(self.reasoning)
        }

def assess_loan(amount, trust_score, rng: Optional[random.Random] = None):
    """Threshold-based eligibility decision for a requested amount"""
    rng = rng or random

    max_loan = max_loan_for(trust_score)
    risk_score = clamp(100 - (trust_score - 600) / 2, 0, 100)
    fraud_likelihood = clamp(15 - (trust_score - 700) / 20, 0, 100)

    if trust_score >= 750 and amount <= max_loan * 0.8:
        eligibility = 'approved'
    elif trust_score >= 650 and amount <= max_loan:
        eligibility = 'conditional'
    else:
        eligibility = 'rejected'

    return LoanAssessment(
        eligibility=eligibility,
        recommended_min=math.floor(max_loan * 0.3),
        recommended_max=max_loan,
        risk_score=round_half_up(risk_score),
        fraud_likelihood=round_half_up(fraud_likelihood * 10) / 10,
        fairness_score=round_half_up(85 + rng.random() * 15),
        cryptographic_proof=generate_decision_proof(),
        reasoning=list(REASONING[eligibility])
    )

def next_risk_score(previous, rng: Optional[random.Random] = None):
    """Risk score after a fraud scan: drops by 0-4 points, never below 5"""
    rng = rng or random
    return max(5, previous - rng.randint(0, 4))
