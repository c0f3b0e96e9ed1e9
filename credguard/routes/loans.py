"""
Loan application routes
Consent -> application -> assessment, recorded in loan_applications and verification_history
"""

import logging
import math

from flask import Blueprint, jsonify
from sqlalchemy.exc import SQLAlchemyError

from credguard.models import db
from credguard.models.identity import EncryptedIdentity
from credguard.models.loan import LoanApplication
from credguard.models.profile import Profile
from credguard.models.verification import VerificationHistory
from credguard.utils.auth import token_required
from credguard.utils.helpers import sanitize_input, log_action, get_json_body, handle_database_error
from credguard.utils.scoring import PROCESSING_STEPS, assess_loan
from credguard.utils.vectors import generate_compliance_proof, generate_fraud_signal

logger = logging.getLogger(__name__)

loans_bp = Blueprint('loans', __name__)

ASSESSMENT_INSTITUTION = 'CREDGUARD Network'

def _encrypted_inputs(user_id):
    """Inputs fed to the assessment, or None when identity or profile is missing"""
    identity = EncryptedIdentity.get_by_user(user_id)
    profile = Profile.get_by_user(user_id)
    if identity is None or profile is None:
        return None

    return {
        'encrypted_vector': identity.encrypted_vector,
        'trust_score': profile.effective_trust_score,
        'fraud_signal': generate_fraud_signal(),
        'compliance_proof': generate_compliance_proof()
    }

def _parse_application(data):
    """Validate the application form; returns (amount, purpose, tenure, error_message)"""
    if data.get('consent_granted') is not True:
        return None, None, None, 'Consent must be granted before applying'

    try:
        amount = float(data.get('amount'))
    except (TypeError, ValueError):
        return None, None, None, 'Loan amount must be a number'
    if not math.isfinite(amount) or amount <= 0:
        return None, None, None, 'Loan amount must be greater than zero'

    tenure = data.get('tenure')
    if tenure not in (None, ''):
        try:
            tenure = int(tenure)
        except (TypeError, ValueError):
            return None, None, None, 'Tenure must be a whole number of months'
        if tenure <= 0:
            return None, None, None, 'Tenure must be a whole number of months'
    else:
        tenure = None

    purpose = sanitize_input(data.get('purpose'), max_length=255) or None
    return amount, purpose, tenure, None

@loans_bp.route('/inputs', methods=['GET'])
@token_required
def get_inputs(current_user):
    inputs = _encrypted_inputs(current_user.id)
    if inputs is None:
        return jsonify({'message': 'Encrypted identity not found'}), 404
    return jsonify(inputs), 200

@loans_bp.route('/assess', methods=['POST'])
@token_required
def assess(current_user):
    """Run the privacy-preserving assessment and record the outcome"""
    data = get_json_body()
    if not data:
        return jsonify({'message': 'No data provided'}), 400

    amount, purpose, tenure, error = _parse_application(data)
    if error:
        return jsonify({'message': error}), 400

    inputs = _encrypted_inputs(current_user.id)
    if inputs is None:
        return jsonify({'message': 'Encrypted identity not found'}), 404

    trust_score = inputs['trust_score']
    assessment = assess_loan(amount, trust_score)

    try:
        application = LoanApplication.from_assessment(current_user.id, amount, purpose, tenure, assessment)
        db.session.add(application)

        db.session.add(VerificationHistory(
            user_id=current_user.id,
            verification_type='loan_assessment',
            institution_name=ASSESSMENT_INSTITUTION,
            country='Global',
            status=assessment.eligibility,
            score=trust_score,
            zk_proof=assessment.cryptographic_proof
        ))
        db.session.commit()

    except SQLAlchemyError as e:
        db.session.rollback()
        logger.error("Assessment could not be saved for %s: %s", current_user.id, e)
        error_message, status_code = handle_database_error(e)
        return jsonify({'message': 'Unable to complete privacy-preserving assessment', 'error': error_message}), status_code

    log_action(current_user.id, 'Loan assessment', 'loan_application', application.id,
               f'{ASSESSMENT_INSTITUTION}: {assessment.eligibility}',
               status='success' if assessment.eligibility != 'rejected' else 'failed')

    return jsonify({
        'message': f'Your loan application has been {assessment.eligibility}',
        'application': application.to_dict(),
        'assessment': assessment.to_dict(),
        'encrypted_inputs': inputs,
        'processing_steps': PROCESSING_STEPS
    }), 201

@loans_bp.route('', methods=['GET'])
@token_required
def list_applications(current_user):
    applications = LoanApplication.get_by_user(current_user.id)
    return jsonify({'applications': [a.to_dict() for a in applications]}), 200

@loans_bp.route('/<application_id>', methods=['GET'])
@token_required
def get_application(current_user, application_id):
    application = LoanApplication.get_for_user(application_id, current_user.id)
    if not application:
        return jsonify({'message': 'Loan application not found'}), 404
    return jsonify(application.to_dict()), 200

@loans_bp.route('/<application_id>', methods=['DELETE'])
@token_required
def delete_application(current_user, application_id):
    application = LoanApplication.get_for_user(application_id, current_user.id)
    if not application:
        return jsonify({'message': 'Loan application not found'}), 404

    try:
        db.session.delete(application)
        db.session.commit()
    except SQLAlchemyError as e:
        db.session.rollback()
        logger.error("Error deleting loan application %s: %s", application_id, e)
        return jsonify({'message': 'Error deleting loan application'}), 500

    return jsonify({'message': 'Loan application deleted successfully'}), 200
