"""In-memory room registry.

Holds every live room keyed by its code, plus a player id -> room code index
so buzz and answer events resolve their room without scanning. All
structural changes go through the registry and happen under ``lock``;
callers that read a room and then mutate it hold the same lock for the
whole sequence::

    with registry.lock:
        found = registry.find_room_containing(player_id)
        ...
"""

import logging
import threading
from typing import Dict, List, Optional, Tuple

from flask import current_app

from gamenight.models import Player, Room, generate_room_code

logger = logging.getLogger(__name__)

MAX_CODE_ATTEMPTS = 50


class RoomRegistry:
    """Process-wide collection of rooms."""

    def __init__(self, code_generator=generate_room_code):
        self.lock = threading.RLock()
        self._rooms: Dict[str, Room] = {}
        self._player_rooms: Dict[str, str] = {}  # player_id -> room code
        self._generate_code = code_generator

    def __len__(self):
        with self.lock:
            return len(self._rooms)

    def create(self, host_sid: str) -> Room:
        """Create an empty LOBBY room owned by ``host_sid``."""
        with self.lock:
            for _ in range(MAX_CODE_ATTEMPTS):
                code = self._generate_code().upper()
                if code not in self._rooms:
                    break
                logger.debug(f"Room code {code} already taken, retrying")
            else:
                raise RuntimeError('Could not allocate a free room code')
            room = Room(code, host_sid)
            self._rooms[code] = room
            logger.info(f"Created room {code} for host {host_sid}")
            return room

    def lookup(self, code: Optional[str]) -> Optional[Room]:
        if not code or not isinstance(code, str):
            return None
        with self.lock:
            return self._rooms.get(code.strip().upper())

    def delete(self, code: str) -> Optional[Room]:
        with self.lock:
            room = self._rooms.pop(code.upper(), None)
            if room is None:
                return None
            for player_id in room.players:
                if self._player_rooms.get(player_id) == room.code:
                    del self._player_rooms[player_id]
            logger.info(f"Deleted room {room.code}")
            return room

    def rooms(self) -> List[Room]:
        """Snapshot of live rooms in creation order."""
        with self.lock:
            return list(self._rooms.values())

    def add_player(self, room: Room, player: Player) -> None:
        """Add ``player`` to ``room``, replacing any record with the same id."""
        with self.lock:
            room.players[player.id] = player
            # A player id lives in one room at a time as far as lookups go: the latest join wins
            self._player_rooms[player.id] = room.code

    def remove_player(self, room: Room, player_id: str) -> Optional[Player]:
        with self.lock:
            player = room.players.pop(player_id, None)
            if player is None:
                return None
            if room.buzzed_player == player_id:
                room.buzzed_player = None
            if self._player_rooms.get(player_id) == room.code:
                del self._player_rooms[player_id]
            return player

    def find_room_containing(self, player_id) -> Optional[Tuple[str, Room]]:
        # Resolves through the index, so a player id present in two rooms maps to the
        # room it joined last, not the first room found by scanning in creation order.
        if player_id is None:
            return None
        with self.lock:
            code = self._player_rooms.get(player_id)
            if code is None:
                return None
            room = self._rooms.get(code)
            if room is None or player_id not in room.players:
                return None
            return code, room


def get_registry(app=None) -> RoomRegistry:
    """Registry bound to ``app`` (or the current app) by ``create_app``."""
    app = app or current_app
    return app.extensions['gamenight_rooms']
