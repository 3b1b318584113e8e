import base64
import hashlib
import hmac
import logging
import time
from typing import Callable, NamedTuple

logger = logging.getLogger(__name__)

HOST_ROLE = 0
ATTENDEE_ROLE = 1

# Signatures are backdated so a verifier whose clock runs behind still accepts them.
CLOCK_SKEW_MS = 30000


class DecodedSignature(NamedTuple):
	api_key: str
	meeting_number: str
	timestamp: str
	role: str
	hash: str


def _b64(data: bytes) -> str:
	return base64.b64encode(data).decode('utf-8')


def generate_signature(api_key: str, api_secret: str, meeting_number, role: int, *, now_ms: int | None = None) -> str:
	"""Build a Web Meeting SDK join signature.

	The signature is base64("{key}.{meeting}.{timestamp}.{role}.{hash}") where hash is
	base64(HMAC-SHA256(secret, base64(key + meeting + timestamp + role))).
	"""
	if now_ms is None:
		now_ms = int(time.time() * 1000)
	timestamp = now_ms - CLOCK_SKEW_MS
	message = _b64(f'{api_key}{meeting_number}{timestamp}{role}'.encode('utf-8'))
	digest = hmac.new(api_secret.encode('utf-8'), message.encode('utf-8'), hashlib.sha256).digest()
	hash_ = _b64(digest)
	return _b64(f'{api_key}.{meeting_number}.{timestamp}.{role}.{hash_}'.encode('utf-8'))


def decode_signature(signature: str) -> DecodedSignature:
	raw = base64.b64decode(signature).decode('utf-8')
	parts = raw.split('.')
	if len(parts) != 5:
		raise ValueError(f'signature has {len(parts)} fields, expected 5')
	return DecodedSignature(*parts)


class SignatureService:

	def __init__(self, api_key: str, api_secret: str, clock: Callable[[], float] = time.time) -> None:
		self._api_key = api_key
		self._api_secret = api_secret
		self._clock = clock

	def generate_signature(self, *, meeting_number, role: int) -> str:
		if role not in (HOST_ROLE, ATTENDEE_ROLE):
			raise ValueError('role must be 0 or 1')
		now_ms = int(self._clock() * 1000)
		logger.info('Generating join signature for meeting=%s role=%s', meeting_number, role)
		return generate_signature(self._api_key, self._api_secret, meeting_number, role, now_ms=now_ms)
