"""
Demo rows for a newly registered user
Dates are relative to sign-up so the dashboard always shows a mix of states
"""

import logging
import secrets
from datetime import timedelta

from credguard.models import db, utcnow
from credguard.models.consent import Consent
from credguard.models.fraud import FraudAlert
from credguard.models.institution import ConnectedInstitution
from credguard.models.verification import VerificationHistory

logger = logging.getLogger(__name__)

DEMO_INSTITUTIONS = [
    {'institution_name': 'Global Bank UK', 'country': 'United Kingdom', 'institution_type': 'Commercial Bank',
     'status': 'connected', 'verifications_count': 45, 'trust_level': 'platinum', 'days_ago': 240, 'last_access_hours': 2},
    {'institution_name': 'FinTech Partners AG', 'country': 'Switzerland', 'institution_type': 'Digital Bank',
     'status': 'connected', 'verifications_count': 28, 'trust_level': 'gold', 'days_ago': 150, 'last_access_hours': 24},
    {'institution_name': 'Nordic Credit Union', 'country': 'Sweden', 'institution_type': 'Credit Union',
     'status': 'pending', 'verifications_count': 0, 'trust_level': 'silver', 'days_ago': 10, 'last_access_hours': None},
    {'institution_name': 'Asia Pacific Finance', 'country': 'Singapore', 'institution_type': 'Investment Bank',
     'status': 'connected', 'verifications_count': 62, 'trust_level': 'platinum', 'days_ago': 90, 'last_access_hours': 5},
    {'institution_name': 'Euro Finance Group', 'country': 'Germany', 'institution_type': 'Commercial Bank',
     'status': 'connected', 'verifications_count': 34, 'trust_level': 'gold', 'days_ago': 180, 'last_access_hours': 72},
]

DEMO_CONSENTS = [
    {'institution_name': 'Global Bank UK', 'purpose': 'Credit verification for loan application',
     'data_types': ['Trust Score', 'Behavioral Pattern', 'Verification History'],
     'status': 'active', 'granted_days_ago': 20, 'expires_in_days': 345},
    {'institution_name': 'FinTech Partners AG', 'purpose': 'Ongoing credit monitoring',
     'data_types': ['Trust Score', 'Behavioral Pattern'],
     'status': 'active', 'granted_days_ago': 75, 'expires_in_days': 290},
    {'institution_name': 'Nordic Credit Union', 'purpose': 'One-time credit check',
     'data_types': ['Trust Score'],
     'status': 'expired', 'granted_days_ago': 200, 'expires_in_days': -20},
    {'institution_name': 'Asia Pacific Finance', 'purpose': 'Credit card application',
     'data_types': ['Trust Score', 'Behavioral Pattern', 'Employment Data'],
     'status': 'active', 'granted_days_ago': 25, 'expires_in_days': 155},
    {'institution_name': 'Euro Finance Group', 'purpose': 'Mortgage pre-approval',
     'data_types': ['Trust Score', 'Behavioral Pattern', 'Income Data'],
     'status': 'revoked', 'granted_days_ago': 240, 'expires_in_days': -60},
]

DEMO_VERIFICATIONS = [
    {'institution_name': 'Global Bank UK', 'country': 'United Kingdom', 'verification_type': 'Credit Check',
     'status': 'approved', 'score': 785, 'days_ago': 4},
    {'institution_name': 'FinTech Partners AG', 'country': 'Switzerland', 'verification_type': 'Loan Application',
     'status': 'approved', 'score': 778, 'days_ago': 7},
    {'institution_name': 'Nordic Credit Union', 'country': 'Sweden', 'verification_type': 'Credit Check',
     'status': 'pending', 'score': None, 'days_ago': 9},
    {'institution_name': 'Asia Pacific Finance', 'country': 'Singapore', 'verification_type': 'Credit Check',
     'status': 'approved', 'score': 792, 'days_ago': 11},
    {'institution_name': 'Canadian Trust Bank', 'country': 'Canada', 'verification_type': 'Mortgage Pre-approval',
     'status': 'declined', 'score': 685, 'days_ago': 14},
    {'institution_name': 'Euro Finance Group', 'country': 'Germany', 'verification_type': 'Credit Check',
     'status': 'approved', 'score': 768, 'days_ago': 16},
]

DEMO_ALERTS = [
    {'alert_type': 'Unusual Login Location', 'severity': 'medium',
     'description': 'Login detected from a new geographic location',
     'location': 'Mumbai, India', 'status': 'pending', 'hours_ago': 2},
    {'alert_type': 'Multiple Failed Verifications', 'severity': 'high',
     'description': '3 failed verification attempts in the last hour',
     'location': 'System', 'status': 'investigating', 'hours_ago': 5},
    {'alert_type': 'Unusual Transaction Pattern', 'severity': 'low',
     'description': 'Transaction amount differs from typical behavior',
     'location': 'London, UK', 'status': 'resolved', 'hours_ago': 24},
]

def seed_demo_data(user):
    """Add the demo institutions, consents, verifications and alerts; the caller commits"""
    now = utcnow()

    for item in DEMO_INSTITUTIONS:
        last_access = item['last_access_hours']
        db.session.add(ConnectedInstitution(
            user_id=user.id,
            institution_name=item['institution_name'],
            institution_type=item['institution_type'],
            country=item['country'],
            status=item['status'],
            trust_level=item['trust_level'],
            verifications_count=item['verifications_count'],
            connected_at=now - timedelta(days=item['days_ago']),
            last_access_at=now - timedelta(hours=last_access) if last_access is not None else None
        ))

    for item in DEMO_CONSENTS:
        db.session.add(Consent(
            user_id=user.id,
            institution_name=item['institution_name'],
            purpose=item['purpose'],
            data_types=list(item['data_types']),
            status=item['status'],
            granted_at=now - timedelta(days=item['granted_days_ago']),
            expires_at=now + timedelta(days=item['expires_in_days'])
        ))

    for item in DEMO_VERIFICATIONS:
        db.session.add(VerificationHistory(
            user_id=user.id,
            institution_name=item['institution_name'],
            country=item['country'],
            verification_type=item['verification_type'],
            status=item['status'],
            score=item['score'],
            zk_proof=f'0x{secrets.token_hex(2)}...{secrets.token_hex(2)}' if item['score'] is not None else None,
            created_at=now - timedelta(days=item['days_ago'])
        ))

    for item in DEMO_ALERTS:
        created_at = now - timedelta(hours=item['hours_ago'])
        db.session.add(FraudAlert(
            user_id=user.id,
            alert_type=item['alert_type'],
            severity=item['severity'],
            description=item['description'],
            location=item['location'],
            status=item['status'],
            created_at=created_at,
            resolved_at=created_at if item['status'] == 'resolved' else None
        ))

    logger.info("Seeded demo data for %s", user.email)
