from enum import Enum

from fastapi import status


class ErrorKind(str, Enum):
	NOT_CONFIGURED = 'not_configured'
	UPSTREAM_UNAVAILABLE = 'upstream_unavailable'
	UPSTREAM_ERROR = 'upstream_error'
	INVALID_RESPONSE = 'invalid_response'
	NO_MEETING = 'no_meeting'
	INVALID_REQUEST = 'invalid_request'
	INTERNAL = 'internal_error'


STATUS_CODES = {
	ErrorKind.INTERNAL: status.HTTP_500_INTERNAL_SERVER_ERROR,
	ErrorKind.NOT_CONFIGURED: status.HTTP_500_INTERNAL_SERVER_ERROR,
	ErrorKind.UPSTREAM_UNAVAILABLE: status.HTTP_503_SERVICE_UNAVAILABLE,
	ErrorKind.UPSTREAM_ERROR: status.HTTP_502_BAD_GATEWAY,
	ErrorKind.INVALID_RESPONSE: status.HTTP_502_BAD_GATEWAY,
	ErrorKind.NO_MEETING: status.HTTP_404_NOT_FOUND,
	ErrorKind.INVALID_REQUEST: status.HTTP_422_UNPROCESSABLE_ENTITY,
}


class ZoomAPIError(Exception):
	"""Failure from the Zoom proxy layer, tagged with the kind of failure."""

	def __init__(self, kind: ErrorKind, message: str = '') -> None:
		super().__init__(message or kind.value)
		self.kind = kind
		self.message = message or kind.value

	@property
	def status_code(self) -> int:
		return STATUS_CODES[self.kind]
