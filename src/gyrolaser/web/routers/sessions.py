from fastapi import APIRouter, Response

from gyrolaser.core.modules.session.models import Session
from gyrolaser.web.deps import AppDep
from gyrolaser.web.openapi import ErrorResponse

router = APIRouter(tags=["sessions"])


@router.get(
    "/sessions",
    summary="List sessions",
    description="Get all sessions created since the server started, oldest first.",
    operation_id="listSessions",
    responses={200: {"description": "List of all sessions"}},
)
async def list_sessions(app: AppDep) -> list[Session]:
    return await app.list_sessions()


@router.post(
    "/sessions",
    summary="Create session",
    description="Create a new session with a random 6-character room code.",
    operation_id="createSession",
    responses={200: {"description": "Session created successfully"}},
)
async def create_session(app: AppDep) -> Session:
    return await app.create_session()


@router.get(
    "/sessions/{room_id}",
    summary="Get session by room code",
    description="Look up a session by its room code. The code is case-insensitive and surrounding whitespace is ignored.",
    operation_id="getSession",
    responses={
        200: {"description": "Session details"},
        400: {"model": ErrorResponse, "description": "Malformed room code"},
        404: {"model": ErrorResponse, "description": "Session not found"},
    },
)
async def get_session(room_id: str, app: AppDep) -> Session:
    return await app.get_session(room_id)


@router.get(
    "/sessions/{room_id}/qrcode",
    summary="Get join QR code",
    description="PNG QR code linking to the phone controller page for the given room code.",
    operation_id="getSessionQrCode",
    response_class=Response,
    responses={
        200: {"content": {"image/png": {}}, "description": "QR code image"},
        400: {"model": ErrorResponse, "description": "Malformed room code"},
    },
)
async def get_session_qrcode(room_id: str, app: AppDep) -> Response:
    png = await app.get_session_qrcode(room_id)
    return Response(content=png, media_type="image/png")
