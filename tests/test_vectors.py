"""
Tests for the random hex identifiers.
"""

import re

from credguard.utils.vectors import (
    generate_compliance_proof,
    generate_decision_proof,
    generate_fraud_signal,
    generate_local_vector,
    index_id_for,
    normalize_vector,
    random_hex,
)


def test_random_hex_length():
    assert len(random_hex(32)) == 32
    assert len(random_hex(7)) == 7
    assert re.fullmatch(r"[0-9a-f]+", random_hex(16))


def test_local_vector_shape():
    vector = generate_local_vector()
    assert re.fullmatch(r"0x[0-9a-f]{64}", vector)
    assert vector != generate_local_vector()


def test_normalize_keeps_prefixed_values():
    assert normalize_vector("  0xabc  ") == "0xabc"


def test_normalize_strips_non_hex_and_truncates():
    assert normalize_vector("deadBEEF!") == "0xdeadBEEF"
    assert normalize_vector("a" * 100) == "0x" + "a" * 64


def test_normalize_empty():
    assert normalize_vector(None) == "0x"


def test_fraud_signal():
    assert re.fullmatch(r"0x[0-9a-f]{16}", generate_fraud_signal())


def test_compliance_proof_uses_hex_millis():
    assert generate_compliance_proof(255) == "GDPR-CCPA-FCRA-ff"


def test_decision_proof_embeds_timestamp():
    assert generate_decision_proof(4096).startswith("zkSNARK::1000::SHA256(decision||inputs)::")


def test_index_id():
    assert index_id_for("1234567890abcdef", 1700000000000) == "cyborg_12345678_1700000000000"
