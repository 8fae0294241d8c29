from typing import Set, Tuple

from gamenight import socketio
from gamenight.models import PLAYING
from . import trivia
from .registry import get_registry
from .trivia import QuestionDispatched, RoundEnded


def _scheduled_keys(app) -> Set[Tuple[str, int, int]]:
    return app.extensions.setdefault('gamenight_timers', set())


def emit_advance(result) -> None:
    """Fan out the result of ``trivia.advance_question``."""
    if isinstance(result, QuestionDispatched):
        socketio.emit('new_question', {
            'questionNumber': result.question_number,
            'question': trivia.host_view(result.question),
        }, to=result.host_sid)
        redacted = {
            'questionNumber': result.question_number,
            'question': trivia.player_view(result.question),
        }
        for sid in result.player_sids:
            socketio.emit('new_question', redacted, to=sid)
    elif isinstance(result, RoundEnded):
        socketio.emit('round_end', {'leaderboard': result.leaderboard}, to=result.room_code)


def schedule_advance(app, room_code: str, game_epoch: int, question_number: int, delay: float) -> None:
    """Advance ``room_code`` past ``question_number`` after ``delay`` seconds.

    - Ensures a single timer per (room, game, question)
    - Holds only the room code; the room is looked up again when the timer
      fires and the timer no-ops if the room is gone or has moved on
    - Runs inline in TESTING mode
    """
    key = (room_code, game_epoch, question_number)
    scheduled = _scheduled_keys(app)
    with get_registry(app).lock:
        if key in scheduled:
            app.logger.debug(f"[timer-skip] room={room_code} game={game_epoch} question={question_number} already scheduled")
            return
        scheduled.add(key)
    app.logger.info(f"[timer-set] room={room_code} game={game_epoch} question={question_number} delay={delay}s")

    def _worker(code: str, expected_epoch: int, expected_question: int, wait: float):
        if wait > 0:
            socketio.sleep(wait)
        registry = get_registry(app)
        with registry.lock:
            scheduled.discard((code, expected_epoch, expected_question))
            room = registry.lookup(code)
            if room is None:
                app.logger.info(f"[timer-abort] room={code} no longer exists")
                return
            if (room.game_state != PLAYING or room.game_epoch != expected_epoch
                    or room.question_number != expected_question):
                app.logger.info(
                    f"[timer-abort] room={code} expected game={expected_epoch} question={expected_question} "
                    f"actual state={room.game_state} game={room.game_epoch} question={room.question_number}"
                )
                return
            result = trivia.advance_question(room, int(app.config.get('QUESTIONS_PER_ROUND', 5)))
        app.logger.info(f"[timer-fire] room={code} -> {type(result).__name__} question={expected_question + 1}")
        emit_advance(result)

    if app.config.get('TESTING'):
        _worker(room_code, game_epoch, question_number, delay)
    else:
        socketio.start_background_task(_worker, room_code, game_epoch, question_number, delay)
