"""
Fraud detection routes: alerts, scans and alert resolution
"""

import logging

from flask import Blueprint, jsonify
from sqlalchemy.exc import SQLAlchemyError

from credguard.models import db, utcnow
from credguard.models.fraud import FraudAlert, FraudScan, DEFAULT_RISK_SCORE, PROTECTION_LEVEL
from credguard.utils.auth import token_required
from credguard.utils.helpers import log_action
from credguard.utils.scoring import next_risk_score

logger = logging.getLogger(__name__)

fraud_bp = Blueprint('fraud', __name__)

def _overview(user_id):
    alerts = FraudAlert.get_by_user(user_id)
    latest_scan = FraudScan.latest_for_user(user_id)

    return {
        'alerts': [alert.to_dict() for alert in alerts],
        'risk_score': latest_scan.risk_score if latest_scan else DEFAULT_RISK_SCORE,
        'stats': {
            'total_scans': FraudScan.count_for_user(user_id),
            'threats_blocked': sum(1 for alert in alerts if alert.status == 'resolved'),
            'last_scan_time': (latest_scan.created_at if latest_scan else utcnow()).isoformat(),
            'protection_level': PROTECTION_LEVEL
        }
    }

@fraud_bp.route('', methods=['GET'])
@token_required
def get_fraud_overview(current_user):
    return jsonify(_overview(current_user.id)), 200

@fraud_bp.route('/scan', methods=['POST'])
@token_required
def run_scan(current_user):
    """Record a scan; the risk score can only drift down"""
    latest_scan = FraudScan.latest_for_user(current_user.id)
    previous = latest_scan.risk_score if latest_scan else DEFAULT_RISK_SCORE

    try:
        scan = FraudScan(user_id=current_user.id, risk_score=next_risk_score(previous), threats_found=0)
        db.session.add(scan)
        db.session.commit()
    except SQLAlchemyError as e:
        db.session.rollback()
        logger.error("Fraud scan failed for %s: %s", current_user.id, e)
        return jsonify({'message': 'Scan failed'}), 500

    log_action(current_user.id, 'Fraud scan', 'fraud_scan', scan.id, f'Risk score {scan.risk_score}')

    payload = _overview(current_user.id)
    payload['scan'] = scan.to_dict()
    payload['message'] = 'No new threats detected. Your identity is secure.'
    return jsonify(payload), 201

@fraud_bp.route('/alerts/<alert_id>/resolve', methods=['POST'])
@token_required
def resolve_alert(current_user, alert_id):
    alert = FraudAlert.get_for_user(alert_id, current_user.id)
    if not alert:
        return jsonify({'message': 'Alert not found'}), 404

    try:
        alert.resolve()
        db.session.commit()
    except SQLAlchemyError as e:
        db.session.rollback()
        logger.error("Error resolving alert %s: %s", alert_id, e)
        return jsonify({'message': 'Error resolving alert'}), 500

    log_action(current_user.id, 'Alert resolved', 'fraud_alert', alert.id, alert.alert_type)

    return jsonify({
        'message': 'The security alert has been marked as resolved.',
        'alert': alert.to_dict()
    }), 200
