from enum import Enum

from pydantic import BaseModel, ConfigDict


class RoomType(str, Enum):
    LIVE = "Live"
    AUDIO = "Audio"


class RTCType(str, Enum):
    TRTC = "TRTC"
    AGORA = "Agora"


class Room(BaseModel):
    model_config = ConfigDict(frozen=True)

    room_id: str
    owner_userid: str
    create_time: int
    room_type: RoomType
    rtc_type: RTCType


class CreateRoomRequest(BaseModel):
    userid: str = ""
    room_type: str = ""  # "Live" or "Audio", anything else means Live


class DestroyRoomRequest(BaseModel):
    room_id: str = ""


class DestroyRoomResponse(BaseModel):
    result: str = "ok"


class HealthResponse(BaseModel):
    status: str
    rooms: int
