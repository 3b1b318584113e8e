import logging
import threading
import time
from typing import Callable, Optional

import jwt

from meeting_proxy.core.errors import ErrorKind, ZoomAPIError

logger = logging.getLogger(__name__)


class ZoomTokenProvider:
	"""Mints the bearer JWT used for Zoom REST calls, re-minting it just before it expires."""

	ALGORITHM = 'HS256'
	REFRESH_MARGIN_SECONDS = 1.0

	def __init__(
		self,
		api_key: str,
		api_secret: str,
		ttl_seconds: int = 5,
		clock: Callable[[], float] = time.time,
	) -> None:
		self._api_key = api_key
		self._api_secret = api_secret
		self._ttl_seconds = ttl_seconds
		self._clock = clock
		self._token: Optional[str] = None
		self._expires_at: float = 0.0
		# requests run on worker threads
		self._lock = threading.Lock()

	@property
	def expires_at(self) -> float:
		return self._expires_at

	def _mint(self) -> None:
		if not self._api_key or not self._api_secret:
			raise ZoomAPIError(ErrorKind.NOT_CONFIGURED, 'Zoom API key/secret are not configured')
		now = self._clock()
		expires_at = int(now) + self._ttl_seconds
		payload = {
			'iss': self._api_key,
			'exp': expires_at,
		}
		self._token = jwt.encode(payload, self._api_secret, algorithm=self.ALGORITHM)
		self._expires_at = float(expires_at)
		logger.info('Minted Zoom bearer token; expires at %s', expires_at)

	def get_token(self) -> str:
		with self._lock:
			if self._token and self._clock() < self._expires_at - self.REFRESH_MARGIN_SECONDS:
				return self._token
			self._mint()
			return self._token or ''

	def authorization_header(self) -> str:
		return f'Bearer {self.get_token()}'
