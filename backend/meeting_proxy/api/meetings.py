import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from meeting_proxy.api.deps import get_meeting_service, get_zoom_service
from meeting_proxy.core.errors import ErrorKind, ZoomAPIError
from meeting_proxy.services.meeting_service import MeetingService
from meeting_proxy.services.zoom_service import ZoomService

logger = logging.getLogger(__name__)

router = APIRouter(tags=['meetings'])


class CreateUserRequest(BaseModel):
	first_name: str
	last_name: str
	email: str


class JoinInfoResponse(BaseModel):
	id: int | str
	password: str | None = None
	join_url: str | None = None
	signature: str


def failure_response(route: str, exc: Exception) -> JSONResponse:
	if isinstance(exc, ZoomAPIError):
		logger.error('Error: %s %s (%s)', route, exc.message, exc.kind.value)
	else:
		logger.exception('Error: %s unexpected failure', route)
		exc = ZoomAPIError(ErrorKind.INTERNAL, str(exc))
	return JSONResponse(status_code=exc.status_code, content={'status': False, 'error': exc.kind.value})


@router.post('/create-user')
async def create_user(request: CreateUserRequest, zoom: ZoomService = Depends(get_zoom_service)):
	try:
		result = await zoom.create_user(
			first_name=request.first_name,
			last_name=request.last_name,
			email=request.email,
		)
	except Exception as exc:
		return failure_response('/create-user', exc)
	return {'status': True, **result}


@router.get('/create-meeting/{email}', response_model=JoinInfoResponse)
async def create_meeting(email: str, meetings: MeetingService = Depends(get_meeting_service)):
	try:
		record, signature = await meetings.get_or_create_meeting(email)
	except Exception as exc:
		return failure_response('/create-meeting/:email', exc)
	return JoinInfoResponse(**record.to_dict(), signature=signature)


@router.get('/join-meeting', response_model=JoinInfoResponse)
async def join_meeting(meetings: MeetingService = Depends(get_meeting_service)):
	try:
		record, signature = meetings.get_host_join_info()
	except Exception as exc:
		return failure_response('/join-meeting', exc)
	return JoinInfoResponse(**record.to_dict(), signature=signature)
