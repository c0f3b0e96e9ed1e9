"""
Generators for the hex strings shown as vectors, proofs and signals
None of these are derived from user data; they are random identifiers
"""

import re
import secrets
import time

VECTOR_HEX_LENGTH = 64
_NON_HEX = re.compile(r'[^a-fA-F0-9]')

def random_hex(length):
    """`length` random lowercase hex characters"""
    return secrets.token_hex((length + 1) // 2)[:length]

def generate_local_vector():
    """0x-prefixed 64-character random hex vector"""
    return '0x' + random_hex(VECTOR_HEX_LENGTH)

def normalize_vector(vector):
    """
    Coerce a vendor or LLM reply into 0x-hex form
    Values already prefixed with 0x are kept as-is; anything else is reduced
    to its hex characters and truncated to 64
    """
    vector = (vector or '').strip()
    if vector.startswith('0x'):
        return vector
    return '0x' + _NON_HEX.sub('', vector)[:VECTOR_HEX_LENGTH]

def generate_zk_proof():
    return '0x' + random_hex(VECTOR_HEX_LENGTH)

def epoch_millis():
    return int(time.time() * 1000)

def generate_fraud_signal():
    return '0x' + random_hex(16)

def generate_compliance_proof(now_ms=None):
    now_ms = epoch_millis() if now_ms is None else now_ms
    return f'GDPR-CCPA-FCRA-{now_ms:x}'

def generate_decision_proof(now_ms=None):
    """Loan decision proof string: zkSNARK::<hex ms>::SHA256(decision||inputs)::<32 hex>"""
    now_ms = epoch_millis() if now_ms is None else now_ms
    return f'zkSNARK::{now_ms:x}::SHA256(decision||inputs)::{random_hex(32)}'

def index_id_for(user_id, now_ms=None):
    """Index id recorded when a vector is (re)indexed"""
    now_ms = epoch_millis() if now_ms is None else now_ms
    return f'cyborg_{user_id[:8]}_{now_ms}'
