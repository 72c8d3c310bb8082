import threading
from contextlib import contextmanager
from typing import Dict, List

from schemas.rooms import Room
from logging_config import get_logger

logger = get_logger(__name__)


class RWLock:
    """Multi-reader / single-writer lock.

    Any number of readers may hold the lock together. A writer waits for
    active readers to drain and holds it alone. Once a writer is waiting,
    new readers queue behind it so a steady stream of list calls cannot
    starve create/destroy.
    """

    def __init__(self):
        self._cond = threading.Condition(threading.Lock())
        self._readers = 0
        self._writer = False
        self._writers_waiting = 0

    def acquire_read(self):
        with self._cond:
            while self._writer or self._writers_waiting:
                self._cond.wait()
            self._readers += 1

    def release_read(self):
        with self._cond:
            self._readers -= 1
            if self._readers == 0:
                self._cond.notify_all()

    def acquire_write(self):
        with self._cond:
            self._writers_waiting += 1
            try:
                while self._writer or self._readers:
                    self._cond.wait()
            finally:
                self._writers_waiting -= 1
            self._writer = True

    def release_write(self):
        with self._cond:
            self._writer = False
            self._cond.notify_all()

    @contextmanager
    def read_lock(self):
        self.acquire_read()
        try:
            yield
        finally:
            self.release_read()

    @contextmanager
    def write_lock(self):
        self.acquire_write()
        try:
            yield
        finally:
            self.release_write()


class RoomStore:
    """In-memory room registry keyed by room id. State is lost on restart."""

    def __init__(self):
        self._rooms: Dict[str, Room] = {}
        self._lock = RWLock()
        logger.info("Initializing in-memory RoomStore")

    def insert(self, room_id: str, room: Room):
        with self._lock.write_lock():
            replaced = room_id in self._rooms
            self._rooms[room_id] = room
        if replaced:
            logger.debug(f"Room {room_id} overwritten in store")
        else:
            logger.debug(f"Room {room_id} inserted into store")

    def delete(self, room_id: str) -> bool:
        with self._lock.write_lock():
            removed = self._rooms.pop(room_id, None) is not None
        logger.debug(f"Room {room_id} delete from store: removed={removed}")
        return removed

    def snapshot(self) -> List[Room]:
        """Return every live room in no particular order."""
        with self._lock.read_lock():
            rooms = list(self._rooms.values())
        logger.debug(f"Store snapshot taken with {len(rooms)} rooms")
        return rooms

    def __len__(self) -> int:
        with self._lock.read_lock():
            return len(self._rooms)
