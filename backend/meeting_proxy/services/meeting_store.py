import asyncio
import logging
from dataclasses import dataclass
from typing import Dict, Optional

from meeting_proxy.services.zoom_service import MeetingRecord

logger = logging.getLogger(__name__)

CURRENT_SCOPE = 'current'


@dataclass(frozen=True)
class CachedMeeting:
	"""A meeting together with the two join signatures minted for it."""

	record: MeetingRecord
	host_signature: str
	attendee_signature: str
	host_email: str


class MeetingStore:
	"""In-memory meeting store, keyed by scope. Entries are saved and cleared whole."""

	def __init__(self) -> None:
		self._entries: Dict[str, CachedMeeting] = {}
		self.lock = asyncio.Lock()

	def get(self, scope: str = CURRENT_SCOPE) -> Optional[CachedMeeting]:
		return self._entries.get(scope)

	def save(self, entry: CachedMeeting, scope: str = CURRENT_SCOPE) -> None:
		self._entries[scope] = entry
		logger.info('Cached meeting %s under scope %s', entry.record.id, scope)

	def clear(self, scope: str = CURRENT_SCOPE) -> None:
		entry = self._entries.pop(scope, None)
		if entry:
			logger.info('Evicted meeting %s from scope %s', entry.record.id, scope)
