"""Domain errors for room and round handling.

The socket layer catches these and turns them into ``error`` events for the
sender; nothing here is fatal to the process. Benign races (late buzzes,
answers with no active question, rooms that vanished) are not errors and
are reported as ``None`` results instead.
"""


class GameNightError(Exception):
    """Base class for all game errors."""
    message = 'Game error'

    def __init__(self, message=None):
        if message:
            self.message = message
        super().__init__(self.message)


class RoomNotFound(GameNightError):
    message = 'Room not found'

    def __init__(self, room_code=None):
        self.room_code = room_code
        super().__init__()


class Unauthorized(GameNightError):
    """Only the host connection may perform this action."""
    message = 'Not authorized'

    def __init__(self, room_code=None, sid=None):
        self.room_code = room_code
        self.sid = sid
        super().__init__()
