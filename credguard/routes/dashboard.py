"""
Dashboard routes: overview charts, sidebar layout and the notification feed
"""

import logging
from datetime import datetime

from flask import Blueprint, jsonify, request

from credguard.models import utcnow
from credguard.models.activity import ActivityLog
from credguard.models.consent import Consent
from credguard.models.fraud import PROTECTION_LEVEL
from credguard.models.institution import ConnectedInstitution
from credguard.models.loan import LoanApplication
from credguard.models.preference import UserPreference, NOTIFICATION_DEFAULTS, notification_key
from credguard.models.profile import Profile, TrustScoreHistory, DEFAULT_TRUST_SCORE
from credguard.models.verification import VerificationHistory
from credguard.utils.auth import token_required

logger = logging.getLogger(__name__)

dashboard_bp = Blueprint('dashboard', __name__)

# Shown until the user has any recorded history
DEMO_TRUST_SCORE_SERIES = [
    {'month': 'Jan', 'score': 720},
    {'month': 'Feb', 'score': 735},
    {'month': 'Mar', 'score': 728},
    {'month': 'Apr', 'score': 745},
    {'month': 'May', 'score': 760},
    {'month': 'Jun', 'score': 778},
    {'month': 'Jul', 'score': 785},
]

NAV_ITEMS = [
    {'title': 'Overview', 'url': '/dashboard'},
    {'title': 'Credit Identity', 'url': '/dashboard/identity'},
    {'title': 'Verification History', 'url': '/dashboard/history'},
    {'title': 'Consent Management', 'url': '/dashboard/consent'},
    {'title': 'Connected Institutions', 'url': '/dashboard/institutions'},
    {'title': 'Loan Application', 'url': '/dashboard/loan'},
    {'title': 'Fraud Detection', 'url': '/dashboard/fraud'},
    {'title': 'Profile', 'url': '/dashboard/profile'},
]

MAX_NOTIFICATIONS = 100

def _month_label(moment):
    return moment.strftime('%b')

def _trust_score_chart(user_id):
    points = TrustScoreHistory.get_by_user(user_id)
    if not points:
        return DEMO_TRUST_SCORE_SERIES, True
    return [
        {'month': _month_label(point.recorded_at), 'score': point.score, 'recorded_at': point.recorded_at.isoformat()}
        for point in points
    ], False

def _verifications_by_month(verifications, months=7):
    """Verified (approved) and pending counts for the trailing months, oldest first"""
    now = utcnow()
    buckets = []
    year, month = now.year, now.month
    for _ in range(months):
        buckets.append((year, month))
        month -= 1
        if month == 0:
            year, month = year - 1, 12
    buckets.reverse()

    series = {bucket: {'verified': 0, 'pending': 0} for bucket in buckets}
    for verification in verifications:
        if not verification.created_at:
            continue
        bucket = (verification.created_at.year, verification.created_at.month)
        if bucket not in series:
            continue
        if verification.status == 'approved':
            series[bucket]['verified'] += 1
        elif verification.status == 'pending':
            series[bucket]['pending'] += 1

    return [
        {'month': datetime(year, month, 1).strftime('%b'), **series[(year, month)]}
        for year, month in buckets
    ]

@dashboard_bp.route('/overview', methods=['GET'])
@token_required
def overview(current_user):
    """Stats cards, charts and recent activity for the dashboard landing page"""
    profile = Profile.get_by_user(current_user.id)
    trust_score = profile.effective_trust_score if profile else DEFAULT_TRUST_SCORE

    verifications = VerificationHistory.get_by_user(current_user.id)
    month_start = utcnow().replace(day=1, hour=0, minute=0, second=0, microsecond=0)
    this_month = sum(1 for v in verifications if v.created_at and v.created_at >= month_start)

    institutions = ConnectedInstitution.get_by_user(current_user.id)
    connected = sum(1 for i in institutions if i.status == 'connected')

    consent_counts = Consent.count_by_status(Consent.get_by_user(current_user.id))
    chart, is_demo = _trust_score_chart(current_user.id)

    return jsonify({
        'stats': [
            {'title': 'Trust Score', 'value': trust_score, 'description': 'Encrypted global score'},
            {'title': 'Verifications', 'value': this_month, 'description': 'This month'},
            {'title': 'Connected Banks', 'value': connected, 'description': 'Active connections'},
            {'title': 'Privacy Score', 'value': f'{PROTECTION_LEVEL}%', 'description': 'Data protection level'},
        ],
        'trust_score_chart': chart,
        'trust_score_chart_demo': is_demo,
        'verification_activity': _verifications_by_month(verifications),
        'consent_distribution': [
            {'name': 'Active', 'value': consent_counts['active']},
            {'name': 'Expired', 'value': consent_counts['expired']},
            {'name': 'Revoked', 'value': consent_counts['revoked']},
        ],
        'recent_activity': [entry.to_dict() for entry in ActivityLog.get_by_user(current_user.id, limit=5)]
    }), 200

@dashboard_bp.route('/layout', methods=['GET'])
@token_required
def layout(current_user):
    profile = Profile.get_by_user(current_user.id)
    return jsonify({
        'display_name': profile.to_dict()['display_name'] if profile else current_user.default_display_name,
        'trust_score': profile.effective_trust_score if profile else DEFAULT_TRUST_SCORE,
        'nav_items': NAV_ITEMS
    }), 200

def _loan_notification(application):
    return {
        'id': f'loan-{application.id}',
        'type': 'loan',
        'title': 'Loan application ' + (application.eligibility or application.status),
        'message': f'Application for ${application.amount:,.0f} was {application.eligibility or application.status}',
        'timestamp': application.created_at,
    }

def _verification_notification(verification):
    return {
        'id': f'verification-{verification.id}',
        'type': 'verification',
        'title': f'Verification {verification.status}',
        'message': f'{verification.institution_name} ({verification.country}) verification is {verification.status}',
        'timestamp': verification.created_at,
    }

def _institution_notification(institution):
    return {
        'id': f'institution-{institution.id}',
        'type': 'institution',
        'title': f'Institution {institution.status}',
        'message': f'{institution.institution_name} is {institution.status}',
        'timestamp': institution.connected_at,
    }

@dashboard_bp.route('/notifications', methods=['GET'])
@token_required
def notifications(current_user):
    """Loans, verifications and institution changes merged into one feed, newest first"""
    try:
        limit = int(request.args.get('limit', 20))
    except ValueError:
        return jsonify({'message': 'limit must be a positive integer'}), 400
    if limit < 1:
        return jsonify({'message': 'limit must be a positive integer'}), 400
    limit = min(limit, MAX_NOTIFICATIONS)

    prefs = UserPreference.load(current_user.id, notification_key(current_user.id), NOTIFICATION_DEFAULTS)

    feed = []
    if prefs['loans']:
        feed.extend(_loan_notification(a) for a in LoanApplication.get_by_user(current_user.id))
    if prefs['verifications']:
        feed.extend(_verification_notification(v) for v in VerificationHistory.get_by_user(current_user.id))
    if prefs['institutions']:
        feed.extend(_institution_notification(i) for i in ConnectedInstitution.get_by_user(current_user.id))

    feed.sort(key=lambda item: item['timestamp'] or datetime.min, reverse=True)
    feed = feed[:limit]
    for item in feed:
        item['timestamp'] = item['timestamp'].isoformat() if item['timestamp'] else None

    return jsonify({'notifications': feed, 'count': len(feed)}), 200
