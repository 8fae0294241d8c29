from gamenight.models import Player
from gamenight.services.games import trivia
from gamenight.services.games.scheduler import schedule_advance


def playing_room(registry):
    room = registry.create('host-sid')
    registry.add_player(room, Player('p1', 'Alice', 'sid-a'))
    trivia.start_game(room, 'trivia', 'host-sid')
    return room


def test_timer_advances_live_room(flask_app, registry):
    room = playing_room(registry)
    schedule_advance(flask_app, room.code, room.game_epoch, 0, 0)
    assert room.question_number == 1
    assert room.current_question is not None


def test_timer_for_deleted_room_is_noop(flask_app, registry):
    room = playing_room(registry)
    registry.delete(room.code)
    schedule_advance(flask_app, room.code, room.game_epoch, 0, 0)
    assert room.question_number == 0
    assert registry.lookup(room.code) is None


def test_stale_timer_does_not_skip_a_question(flask_app, registry):
    room = playing_room(registry)
    schedule_advance(flask_app, room.code, room.game_epoch, 0, 0)
    schedule_advance(flask_app, room.code, room.game_epoch, 1, 0)
    assert room.question_number == 2
    # A second timer for question 1 arrives late
    schedule_advance(flask_app, room.code, room.game_epoch, 1, 0)
    assert room.question_number == 2


def test_timer_from_previous_game_is_ignored(flask_app, registry):
    room = playing_room(registry)
    old_epoch = room.game_epoch
    trivia.start_game(room, 'trivia', 'host-sid')
    schedule_advance(flask_app, room.code, old_epoch, 0, 0)
    assert room.question_number == 0


def test_pending_timer_is_not_scheduled_twice(flask_app, registry):
    room = playing_room(registry)
    pending = flask_app.extensions.setdefault('gamenight_timers', set())
    pending.add((room.code, room.game_epoch, 0))
    schedule_advance(flask_app, room.code, room.game_epoch, 0, 0)
    assert room.question_number == 0


def test_round_end_via_timer(flask_app, registry):
    room = playing_room(registry)
    for number in range(6):
        schedule_advance(flask_app, room.code, room.game_epoch, number, 0)
    assert room.game_state == 'ROUND_END'
    assert room.question_number == 6
