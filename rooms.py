# rooms.py
import random
import time
from typing import Callable, List, Optional

from backend import RoomStore
from constants import ROOM_ID_PREFIX, RTC_DRAW_RANGE, TRTC_THRESHOLD
from logging_config import get_logger
from schemas.rooms import Room, RoomType, RTCType

logger = get_logger(__name__)


def normalize_room_type(value: Optional[str]) -> RoomType:
    # Unrecognized or empty values fall back to Live without an error
    if value and value.lower() == "audio":
        return RoomType.AUDIO
    return RoomType.LIVE


def generate_room_id(userid: str) -> str:
    # Same owner always maps to the same id; a repeat create overwrites
    return ROOM_ID_PREFIX + userid


def choose_rtc(rng: random.Random) -> RTCType:
    """Pick the RTC backend for a new room: 0-5 is TRTC, 6-9 is Agora."""
    draw = rng.randint(0, RTC_DRAW_RANGE - 1)
    if draw < TRTC_THRESHOLD:
        return RTCType.TRTC
    return RTCType.AGORA


class RoomManager:
    def __init__(
        self,
        store: Optional[RoomStore] = None,
        rng: Optional[random.Random] = None,
        clock: Callable[[], float] = time.time,
    ):
        self.store = store if store is not None else RoomStore()
        self.rng = rng if rng is not None else random.Random()
        self.clock = clock

    def create_room(self, userid: str, room_type: Optional[str] = None) -> Room:
        room = Room(
            room_id=generate_room_id(userid),
            owner_userid=userid,
            create_time=int(self.clock()),
            room_type=normalize_room_type(room_type),
            rtc_type=choose_rtc(self.rng),
        )
        self.store.insert(room.room_id, room)
        logger.info(
            f"Room {room.room_id} created: owner={userid}, room_type={room.room_type.value}, rtc_type={room.rtc_type.value}"
        )
        return room

    def destroy_room(self, room_id: str) -> bool:
        removed = self.store.delete(room_id)
        if removed:
            logger.info(f"Room {room_id} destroyed")
        else:
            logger.warning(f"Destroy room failed: Room {room_id} not found")
        return removed

    def list_rooms(self) -> List[Room]:
        rooms = self.store.snapshot()
        # newest first; equal timestamps keep snapshot order
        return sorted(rooms, key=lambda room: room.create_time, reverse=True)

    def count(self) -> int:
        return len(self.store)
