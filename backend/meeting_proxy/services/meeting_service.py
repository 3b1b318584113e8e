import logging
from typing import Tuple

from meeting_proxy.core.errors import ErrorKind, ZoomAPIError
from meeting_proxy.services.meeting_store import CURRENT_SCOPE, CachedMeeting, MeetingStore
from meeting_proxy.services.signature_service import ATTENDEE_ROLE, HOST_ROLE, SignatureService
from meeting_proxy.services.zoom_service import MeetingRecord, ZoomService

logger = logging.getLogger(__name__)


class MeetingService:
	"""Keeps the current meeting and its join signatures in step with Zoom."""

	def __init__(self, zoom: ZoomService, signer: SignatureService, store: MeetingStore, scope: str = CURRENT_SCOPE) -> None:
		self._zoom = zoom
		self._signer = signer
		self._store = store
		self._scope = scope

	async def get_or_create_meeting(self, email: str) -> Tuple[MeetingRecord, str]:
		"""Return the current meeting and its attendee signature, creating one when none is live."""
		async with self._store.lock:
			live_meetings = await self._zoom.list_live_meetings(email)
			cached = self._store.get(self._scope)
			# Zoom decides whether the meeting is still live.
			if not live_meetings and cached:
				logger.info('No live meetings for %s; dropping cached meeting %s', email, cached.record.id)
				self._store.clear(self._scope)
				cached = None

			if cached:
				return cached.record, cached.attendee_signature

			record = await self._zoom.create_meeting(email)
			entry = CachedMeeting(
				record=record,
				host_signature=self._signer.generate_signature(meeting_number=record.id, role=HOST_ROLE),
				attendee_signature=self._signer.generate_signature(meeting_number=record.id, role=ATTENDEE_ROLE),
				host_email=email,
			)
			self._store.save(entry, self._scope)
			return entry.record, entry.attendee_signature

	def get_host_join_info(self) -> Tuple[MeetingRecord, str]:
		cached = self._store.get(self._scope)
		if not cached:
			raise ZoomAPIError(ErrorKind.NO_MEETING, 'No meeting has been created yet')
		return cached.record, cached.host_signature
