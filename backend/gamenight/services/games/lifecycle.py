import logging
from dataclasses import dataclass, field
from typing import List

from .registry import RoomRegistry

logger = logging.getLogger(__name__)


@dataclass
class Departure:
    room_code: str
    host_sid: str
    player_id: str
    player_name: str


@dataclass
class DisconnectOutcome:
    closed_rooms: List[str] = field(default_factory=list)
    departures: List[Departure] = field(default_factory=list)


def drop_connection(registry: RoomRegistry, sid: str) -> DisconnectOutcome:
    """Tear down whatever ``sid`` was attached to.

    Rooms hosted by ``sid`` are deleted outright. In every other room the
    first player bound to ``sid`` is removed.
    """
    outcome = DisconnectOutcome()
    with registry.lock:
        for room in registry.rooms():
            if room.host_sid == sid:
                registry.delete(room.code)
                outcome.closed_rooms.append(room.code)
                logger.info(f"Room closed: {room.code} (host {sid} left)")
                continue
            player = next((p for p in room.players.values() if p.sid == sid), None)
            if player is None:
                continue
            registry.remove_player(room, player.id)
            outcome.departures.append(Departure(room.code, room.host_sid, player.id, player.name))
            logger.info(f"Player {player.name} left room {room.code}")
    return outcome
