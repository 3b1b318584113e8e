"""Tests for Web Meeting SDK join signatures."""
import base64
import hashlib
import hmac

import pytest

from meeting_proxy.services import signature_service
from meeting_proxy.services.signature_service import SignatureService, decode_signature, generate_signature

FIXED_MS = 1_700_000_000_000


def test_known_signature_layout():
	signature = generate_signature('K1', 'S1', '123456789', 0, now_ms=FIXED_MS)

	timestamp = FIXED_MS - 30000
	message = base64.b64encode(f'K1123456789{timestamp}0'.encode()).decode()
	expected_hash = base64.b64encode(hmac.new(b'S1', message.encode(), hashlib.sha256).digest()).decode()

	assert base64.b64decode(signature).decode() == f'K1.123456789.{timestamp}.0.{expected_hash}'


def test_signature_matches_sdk_reference_value():
	# Produced by the Node.js Web Meeting SDK sample signer for the same inputs.
	expected = (
		'SzEuMTIzNDU2Nzg5LjE2OTk5OTk5NzAwMDAuMC5XOUZ2TUZPT1Q2SGZkOUJxeVdRampW'
		'bEpaU3paekFEUllSTy80clh5enBnPQ=='
	)

	assert generate_signature('K1', 'S1', '123456789', 0, now_ms=FIXED_MS) == expected


def test_signature_is_deterministic_for_fixed_clock():
	first = generate_signature('key', 'secret', 987654321, 1, now_ms=FIXED_MS)
	second = generate_signature('key', 'secret', 987654321, 1, now_ms=FIXED_MS)

	assert first == second
	assert first != generate_signature('key', 'secret', 987654321, 0, now_ms=FIXED_MS)


@pytest.mark.parametrize('role', [0, 1])
def test_decode_recovers_fields(role):
	signature = generate_signature('api-key', 'api-secret', 5551234, role, now_ms=FIXED_MS)

	decoded = decode_signature(signature)

	assert decoded.api_key == 'api-key'
	assert decoded.meeting_number == '5551234'
	assert decoded.timestamp == str(FIXED_MS - 30000)
	assert decoded.role == str(role)
	assert decoded.hash


def test_decode_rejects_wrong_field_count():
	bogus = base64.b64encode(b'a.b.c').decode()

	with pytest.raises(ValueError):
		decode_signature(bogus)


def test_service_uses_injected_clock():
	service = SignatureService('K1', 'S1', clock=lambda: FIXED_MS / 1000)

	signature = service.generate_signature(meeting_number='123456789', role=signature_service.HOST_ROLE)

	assert signature == generate_signature('K1', 'S1', '123456789', 0, now_ms=FIXED_MS)
	assert decode_signature(signature).timestamp == str(FIXED_MS - 30000)


def test_service_rejects_unknown_role():
	service = SignatureService('K1', 'S1')

	with pytest.raises(ValueError):
		service.generate_signature(meeting_number='123', role=2)
