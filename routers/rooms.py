from typing import List, Type, TypeVar

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from pydantic import BaseModel, ValidationError

from logging_config import get_logger
from rooms import RoomManager
from schemas.rooms import CreateRoomRequest, DestroyRoomRequest, DestroyRoomResponse, Room

logger = get_logger(__name__)

rooms_router = APIRouter(prefix="/room", tags=["rooms"])

RequestModel = TypeVar("RequestModel", bound=BaseModel)


def get_room_manager(request: Request) -> RoomManager:
    return request.app.state.room_manager


async def decode_body(request: Request, model: Type[RequestModel]) -> RequestModel:
    """Decode the raw body as JSON whatever the content-type header says.

    A JSON null body decodes to an empty request.
    """
    raw = await request.body()
    if raw.strip() == b"null":
        return model()
    try:
        return model.model_validate_json(raw)
    except ValidationError as e:
        raise RequestValidationError(e.errors())


async def create_room_request(request: Request) -> CreateRoomRequest:
    return await decode_body(request, CreateRoomRequest)


async def destroy_room_request(request: Request) -> DestroyRoomRequest:
    return await decode_body(request, DestroyRoomRequest)


# Handlers are plain functions, so FastAPI runs each one on its threadpool.

@rooms_router.post("/create", response_model=Room)
def create_room(
    request: Request,
    room: CreateRoomRequest = Depends(create_room_request),
    manager: RoomManager = Depends(get_room_manager),
):
    # { "userid": "5", "room_type": "Live" }
    # Response 200: { "room_id": "rm_5", "owner_userid": "5", "create_time": 1731840000, "room_type": "Live", "rtc_type": "TRTC" }
    client_host = request.client.host if request.client else "unknown"
    logger.info(f"Room creation request from {client_host}, userid: {room.userid}, room_type: {room.room_type}")
    return manager.create_room(room.userid, room.room_type)


@rooms_router.post("/destroy", response_model=DestroyRoomResponse)
def destroy_room(
    request: Request,
    destroy_request: DestroyRoomRequest = Depends(destroy_room_request),
    manager: RoomManager = Depends(get_room_manager),
):
    # { "room_id": "rm_5" }
    # Response 200: { "result": "ok" }, 404 if the room does not exist
    client_host = request.client.host if request.client else "unknown"
    logger.info(f"Destroy room request for {destroy_request.room_id} from {client_host}")
    if not manager.destroy_room(destroy_request.room_id):
        raise HTTPException(status_code=404, detail="room not found")
    return DestroyRoomResponse(result="ok")


@rooms_router.get("/list", response_model=List[Room])
def list_rooms(manager: RoomManager = Depends(get_room_manager)):
    """List every live room, most recently created first."""
    rooms = manager.list_rooms()
    logger.debug(f"Listing {len(rooms)} rooms")
    return rooms
