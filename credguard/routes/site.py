"""
Marketing site routes: landing page content, interactive demo and contact sales
"""

import logging

from flask import Blueprint, jsonify, request
from sqlalchemy.exc import SQLAlchemyError

from credguard.content import SECTIONS, DEMO_STEPS, DEMO_MOCK_DATA
from credguard.models import db
from credguard.models.identity import EncryptedIdentity
from credguard.models.inquiry import SalesInquiry
from credguard.models.profile import Profile, DEFAULT_TRUST_SCORE
from credguard.utils.auth import optional_auth
from credguard.utils.helpers import validate_email, sanitize_input, get_json_body, handle_database_error

logger = logging.getLogger(__name__)

site_bp = Blueprint('site', __name__)

@site_bp.route('', methods=['GET'])
def get_site():
    return jsonify(SECTIONS), 200

def _real_demo_data(user):
    """Demo payload built from the signed-in user's own identity"""
    identity = EncryptedIdentity.get_by_user(user.id)
    profile = Profile.get_by_user(user.id)
    if not identity:
        return None

    metrics = identity.metrics
    return {
        'raw_data': {
            'repaymentDiscipline': f"{metrics.get('repayment_discipline')}%",
            'spendingStability': f"{metrics.get('spending_stability')}%",
            'employmentConsistency': f"{metrics.get('employment_consistency')}%",
            'incomeRegularity': f"{metrics.get('income_regularity')}%",
            'trustScore': profile.effective_trust_score if profile else DEFAULT_TRUST_SCORE,
        },
        'encrypted_vector': identity.encrypted_vector,
        'zk_proof': identity.zk_proof or DEMO_MOCK_DATA['zk_proof'],
    }

@site_bp.route('/demo', methods=['GET'])
@optional_auth
def get_demo(current_user):
    """Interactive demo steps; ?mode=real swaps in the caller's identity"""
    mode = request.args.get('mode', 'mock')

    if mode == 'real':
        if current_user is None:
            return jsonify({'message': 'Sign in to run the demo with your own data'}), 401
        data = _real_demo_data(current_user)
        if data is not None:
            return jsonify({'mode': 'real', 'steps': DEMO_STEPS, 'data': data}), 200
        logger.info("No identity for %s, serving mock demo data", current_user.id)

    return jsonify({'mode': 'mock', 'steps': DEMO_STEPS, 'data': DEMO_MOCK_DATA}), 200

@site_bp.route('/contact', methods=['POST'])
def contact_sales():
    data = get_json_body()
    if not data:
        return jsonify({'message': 'No data provided'}), 400

    first_name = sanitize_input(data.get('first_name'), max_length=100)
    last_name = sanitize_input(data.get('last_name'), max_length=100)
    email = sanitize_input(data.get('email'), max_length=255)

    if not first_name or not last_name or not email:
        return jsonify({'message': 'First name, last name and email are required'}), 400

    if not validate_email(email):
        return jsonify({'message': 'Invalid email format'}), 400

    try:
        inquiry = SalesInquiry.create_inquiry(
            first_name,
            last_name,
            email.lower(),
            company=sanitize_input(data.get('company'), max_length=150),
            message=sanitize_input(data.get('message'))
        )
        db.session.add(inquiry)
        db.session.commit()
    except SQLAlchemyError as e:
        db.session.rollback()
        logger.error("Error saving sales inquiry: %s", e)
        error_message, status_code = handle_database_error(e)
        return jsonify({'message': error_message}), status_code

    logger.info("Sales inquiry received from %s", inquiry.email)

    return jsonify({
        'message': 'Our sales team will contact you within 24 hours.',
        'inquiry_id': inquiry.id
    }), 201

@site_bp.route('/<section>', methods=['GET'])
def get_section(section):
    if section not in SECTIONS:
        return jsonify({'message': f'Unknown section: {section}'}), 404
    return jsonify(SECTIONS[section]), 200
