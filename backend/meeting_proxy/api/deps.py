from functools import lru_cache

from fastapi import Depends

from meeting_proxy.core.config import Settings, get_settings
from meeting_proxy.core.security import ZoomTokenProvider
from meeting_proxy.services.meeting_service import MeetingService
from meeting_proxy.services.meeting_store import MeetingStore
from meeting_proxy.services.signature_service import SignatureService
from meeting_proxy.services.zoom_service import ZoomService


@lru_cache
def _build_zoom_service(settings: Settings) -> ZoomService:
	token_provider = ZoomTokenProvider(
		settings.zoom_api_key,
		settings.zoom_api_secret,
		ttl_seconds=settings.zoom_token_ttl_seconds,
	)
	return ZoomService(token_provider, settings.zoom_api_base_url, timeout=settings.zoom_request_timeout)


@lru_cache
def _build_meeting_service(settings: Settings) -> MeetingService:
	signer = SignatureService(settings.zoom_api_key, settings.zoom_api_secret)
	return MeetingService(_build_zoom_service(settings), signer, MeetingStore())


def get_zoom_service(settings: Settings = Depends(get_settings)) -> ZoomService:
	return _build_zoom_service(settings)


def get_meeting_service(settings: Settings = Depends(get_settings)) -> MeetingService:
	"""One meeting service (and store) per process, shared across requests."""
	return _build_meeting_service(settings)
