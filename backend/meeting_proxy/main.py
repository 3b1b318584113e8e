import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from dotenv import load_dotenv

# Load environment variables from .env file BEFORE reading settings
load_dotenv()

from meeting_proxy.core.config import get_settings
from meeting_proxy.api import meetings as meeting_routes
from meeting_proxy.core.errors import ErrorKind, ZoomAPIError

# Configure logging
logging.basicConfig(
	level=logging.INFO,
	format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
	"""FastAPI lifespan event handler for startup/shutdown."""
	settings = get_settings()
	if not settings.zoom_configured:
		logger.warning('ZOOM_JWT_API_KEY / ZOOM_JWT_API_SECRET are not set. Zoom calls and signatures will fail.')
	logger.info('Zoom meeting proxy ready on port %s (upstream %s)', settings.port, settings.zoom_api_base_url)
	yield
	logger.info('Zoom meeting proxy shutting down')


app = FastAPI(
	title='Zoom Meeting Proxy',
	description='Zoom REST proxy and Web Meeting SDK signature service',
	version='1.0.0',
	lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
	CORSMiddleware,
	allow_origins=list(settings.cors_allow_origins),
	allow_methods=['*'],
	allow_headers=['*'],
)

app.include_router(meeting_routes.router)


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
	"""Malformed or incomplete request bodies get the same failure shape as upstream errors."""
	logger.warning('Invalid request to %s: %s', request.url.path, exc.errors())
	error = ZoomAPIError(ErrorKind.INVALID_REQUEST, 'Request body is missing fields or is not valid JSON')
	return meeting_routes.failure_response(request.url.path, error)


@app.get('/health')
async def health_check():
	"""Health check endpoint."""
	return {'status': 'healthy'}


if __name__ == '__main__':
	import uvicorn
	uvicorn.run(
		'meeting_proxy.main:app',
		host=settings.api_host,
		port=settings.port,
	)
