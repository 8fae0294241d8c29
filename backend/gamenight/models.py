import random
from typing import Dict, Optional

LOBBY = 'LOBBY'
PLAYING = 'PLAYING'
ROUND_END = 'ROUND_END'

DEFAULT_AVATAR = '🎮'

ROOM_CODE_ADJECTIVES = ('COOL', 'FAST', 'MEGA', 'EPIC', 'WILD', 'FIRE', 'STAR', 'BOLT', 'DASH', 'ZOOM')


def generate_room_code():
    """Generate a short, human readable room code such as ``EPIC-4821``.

    Collisions are possible; the registry retries on a clash.
    """
    adjective = random.choice(ROOM_CODE_ADJECTIVES)
    number = random.randint(1000, 9999)
    return f"{adjective}-{number}"


class Player:
    def __init__(self, id, name, sid, avatar=None, score=0):
        self.id = id
        self.name = name
        self.avatar = avatar or DEFAULT_AVATAR
        self.sid = sid
        self.score = score

    def to_dict(self):
        return {
            'id': self.id,
            'name': self.name,
            'avatar': self.avatar,
            'socketId': self.sid,
            'score': self.score,
        }

    def __repr__(self):
        return f"<Player {self.id} {self.name!r} score={self.score}>"


class Room:
    def __init__(self, code: str, host_sid: str):
        self.code = code
        self.host_sid = host_sid
        self.players: Dict[str, Player] = {}
        self.game_state = LOBBY
        self.current_game: Optional[str] = None
        self.current_question: Optional[dict] = None
        self.question_number = 0
        self.buzzed_player: Optional[str] = None
        self.answers: Dict[str, dict] = {}
        self.question_start_time: Optional[float] = None
        # Bumped on every start so timers from a previous game can tell they are stale
        self.game_epoch = 0

    def roster(self):
        return [p.to_dict() for p in self.players.values()]

    def clear_round(self):
        self.current_question = None
        self.buzzed_player = None
        self.answers.clear()
        self.question_start_time = None

    def to_dict(self):
        return {
            'code': self.code,
            'players': len(self.players),
            'gameState': self.game_state,
            'currentGame': self.current_game,
        }

    def __repr__(self):
        return f"<Room {self.code} state={self.game_state} players={len(self.players)}>"
