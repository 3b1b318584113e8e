import asyncio
import logging
from dataclasses import dataclass
from typing import Any, Dict, List
from urllib.parse import quote

import requests
from requests import RequestException

from meeting_proxy.core.errors import ErrorKind, ZoomAPIError
from meeting_proxy.core.security import ZoomTokenProvider

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MeetingRecord:
	id: int | str
	password: str | None
	join_url: str | None

	def to_dict(self) -> Dict[str, Any]:
		return {
			'id': self.id,
			'password': self.password,
			'join_url': self.join_url,
		}


class ZoomService:
	"""Authenticated calls against the Zoom REST API."""

	MEETING_TOPIC = 'test create meeting'
	INSTANT_MEETING = 1
	BASIC_USER = 1

	def __init__(self, token_provider: ZoomTokenProvider, base_url: str, timeout: float = 15.0) -> None:
		self._token_provider = token_provider
		self._base_url = base_url.rstrip('/')
		self._timeout = timeout

	def _url(self, path: str) -> str:
		return f'{self._base_url}{path}'

	@staticmethod
	def _user_path(email: str) -> str:
		return '/users/' + quote(email, safe='@')

	def _request(self, method: str, path: str, **kwargs) -> Any:
		headers = {
			'Authorization': self._token_provider.authorization_header(),
			'Content-Type': 'application/json',
		}
		try:
			resp = requests.request(method, self._url(path), headers=headers, timeout=self._timeout, **kwargs)
		except RequestException as exc:
			logger.error('Zoom %s %s failed: %s', method, path, exc)
			raise ZoomAPIError(ErrorKind.UPSTREAM_UNAVAILABLE, f'Zoom request failed: {exc}') from exc
		if resp.status_code < 200 or resp.status_code >= 300:
			logger.error('Zoom %s %s returned %s %s', method, path, resp.status_code, resp.text)
			raise ZoomAPIError(ErrorKind.UPSTREAM_ERROR, f'Zoom returned HTTP {resp.status_code}')
		try:
			return resp.json()
		except ValueError as exc:
			logger.error('Zoom %s %s returned a non-JSON body', method, path)
			raise ZoomAPIError(ErrorKind.INVALID_RESPONSE, 'Zoom returned a non-JSON body') from exc

	def _create_user_sync(self, first_name: str, last_name: str, email: str) -> Dict[str, Any]:
		payload = {
			'action': 'custCreate',
			'user_info': {
				'email': email,
				'type': self.BASIC_USER,
				'first_name': first_name,
				'last_name': last_name,
			},
		}
		data = self._request('POST', '/users', json=payload)
		if not isinstance(data, dict):
			raise ZoomAPIError(ErrorKind.INVALID_RESPONSE, 'Unexpected user payload from Zoom')
		logger.info('Zoom user created email=%s id=%s', email, data.get('id'))
		return data

	def _list_live_meetings_sync(self, email: str) -> List[Dict[str, Any]]:
		data = self._request('GET', self._user_path(email) + '/meetings', params={'type': 'live'})
		meetings = data.get('meetings') if isinstance(data, dict) else None
		if not isinstance(meetings, list):
			raise ZoomAPIError(ErrorKind.INVALID_RESPONSE, 'Zoom live meetings response has no meetings list')
		return meetings

	def _create_meeting_sync(self, email: str) -> MeetingRecord:
		payload = {
			'topic': self.MEETING_TOPIC,
			'type': self.INSTANT_MEETING,
			'settings': {
				'host_video': False,
				'waiting_room': True,
			},
		}
		data = self._request('POST', self._user_path(email) + '/meetings', json=payload)
		meeting_id = data.get('id') if isinstance(data, dict) else None
		if meeting_id is None:
			raise ZoomAPIError(ErrorKind.INVALID_RESPONSE, 'Zoom meeting response has no id')
		record = MeetingRecord(id=meeting_id, password=data.get('password'), join_url=data.get('join_url'))
		logger.info('Zoom meeting created id=%s for %s', record.id, email)
		return record

	async def create_user(self, *, first_name: str, last_name: str, email: str) -> Dict[str, Any]:
		return await asyncio.to_thread(self._create_user_sync, first_name, last_name, email)

	async def list_live_meetings(self, email: str) -> List[Dict[str, Any]]:
		return await asyncio.to_thread(self._list_live_meetings_sync, email)

	async def create_meeting(self, email: str) -> MeetingRecord:
		return await asyncio.to_thread(self._create_meeting_sync, email)
