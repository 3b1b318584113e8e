import os
from dataclasses import dataclass
from functools import lru_cache
from typing import List

DEFAULT_ZOOM_API_BASE_URL = 'https://api.zoom.us/v2'


def _parse_csv(value: str | None) -> List[str]:
	if not value:
		return []
	return [item.strip().rstrip('/') for item in value.split(',') if item.strip()]


@dataclass(frozen=True)
class Settings:
	zoom_api_key: str = ''
	zoom_api_secret: str = ''
	zoom_api_base_url: str = DEFAULT_ZOOM_API_BASE_URL
	zoom_token_ttl_seconds: int = 5
	zoom_request_timeout: float = 15.0
	cors_allow_origins: tuple[str, ...] = ('*',)
	api_host: str = '0.0.0.0'
	port: int = 4000

	@property
	def zoom_configured(self) -> bool:
		return bool(self.zoom_api_key and self.zoom_api_secret)


@lru_cache
def get_settings() -> Settings:
	origins: list[str] = []
	for origin in _parse_csv(os.getenv('CORS_ALLOW_ORIGINS')):
		if origin not in origins:
			origins.append(origin)

	return Settings(
		zoom_api_key=os.getenv('ZOOM_JWT_API_KEY', ''),
		zoom_api_secret=os.getenv('ZOOM_JWT_API_SECRET', ''),
		zoom_api_base_url=(os.getenv('ZOOM_API_BASE_URL') or DEFAULT_ZOOM_API_BASE_URL).rstrip('/'),
		zoom_token_ttl_seconds=int(os.getenv('ZOOM_TOKEN_TTL_SECONDS', '5')),
		zoom_request_timeout=float(os.getenv('ZOOM_REQUEST_TIMEOUT', '15')),
		cors_allow_origins=tuple(origins) or ('*',),
		api_host=os.getenv('API_HOST', '0.0.0.0'),
		port=int(os.getenv('PORT') or '4000'),
	)
