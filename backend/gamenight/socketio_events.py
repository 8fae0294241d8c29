from flask import current_app, request
from flask_socketio import emit, join_room

from gamenight import socketio
from gamenight.models import Player
from gamenight.services.games import lifecycle, trivia
from gamenight.services.games.exceptions import GameNightError, RoomNotFound, Unauthorized
from gamenight.services.games.registry import get_registry
from gamenight.services.games.scheduler import schedule_advance


def _get_sid() -> str:
    # type: ignore: request.sid exists in Socket.IO context
    return request.sid  # type: ignore


def _emit_error(exc: GameNightError) -> None:
    emit('error', {'message': exc.message})


def _scoring_rules() -> dict:
    cfg = current_app.config
    return {
        'window_ms': int(cfg.get('ANSWER_WINDOW_MS', 15000)),
        'base_points': int(cfg.get('BASE_POINTS', 100)),
        'multiplier': int(cfg.get('BONUS_MULTIPLIER', 10)),
    }


def handle_create_room(data=None):
    registry = get_registry()
    room = registry.create(_get_sid())
    join_room(room.code)
    current_app.logger.info(f"[room-created] room={room.code} host={room.host_sid}")
    # Returned value is delivered as the acknowledgement when the client asked for one
    return {'success': True, 'roomCode': room.code}


def handle_join_room(data):
    data = data or {}
    registry = get_registry()
    sid = _get_sid()
    try:
        with registry.lock:
            room = registry.lookup(data.get('roomCode'))
            if room is None:
                raise RoomNotFound(data.get('roomCode'))
            player = Player(
                id=data.get('playerId'),
                name=data.get('playerName'),
                sid=sid,
                avatar=data.get('avatar'),
            )
            registry.add_player(room, player)
            code, host_sid, roster = room.code, room.host_sid, room.roster()
            joined = player.to_dict()
    except RoomNotFound as exc:
        current_app.logger.info(f"[join-rejected] room={exc.room_code} sid={sid}")
        _emit_error(exc)
        return

    join_room(code)
    current_app.logger.info(f"[player-joined] room={code} player={player.id} name={player.name}")
    socketio.emit('player_joined', joined, to=host_sid)
    socketio.emit('player_list', roster, to=code)
    emit('joined_room', {'success': True, 'roomCode': code, 'players': roster})


def handle_start_game(data):
    data = data or {}
    registry = get_registry()
    sid = _get_sid()
    game = data.get('game')
    try:
        with registry.lock:
            room = registry.lookup(data.get('roomCode'))
            if room is None:
                raise Unauthorized(data.get('roomCode'), sid)
            trivia.start_game(room, game, sid)
            code, epoch = room.code, room.game_epoch
    except Unauthorized as exc:
        current_app.logger.warning(f"[start-rejected] room={exc.room_code} sid={sid}")
        _emit_error(exc)
        return

    current_app.logger.info(f"[game-started] room={code} game={game}")
    socketio.emit('game_started', {'game': game}, to=code)
    app = current_app._get_current_object()
    schedule_advance(app, code, epoch, 0, float(app.config.get('GAME_START_DELAY_SEC', 2)))


def handle_buzz_in(data):
    player_id = (data or {}).get('playerId')
    registry = get_registry()
    with registry.lock:
        found = registry.find_room_containing(player_id)
        if not found:
            return
        code, room = found
        player = trivia.buzz_in(room, player_id)
        if player is None:
            return
        host_sid = room.host_sid

    current_app.logger.info(f"[buzz] room={code} player={player_id}")
    payload = {'playerId': player_id, 'playerName': player.name}
    socketio.emit('player_buzzed', payload, to=code)
    socketio.emit('player_buzzed', payload, to=host_sid)


def handle_submit_answer(data):
    data = data or {}
    player_id = data.get('playerId')
    registry = get_registry()
    with registry.lock:
        found = registry.find_room_containing(player_id)
        if not found:
            return
        code, room = found
        outcome = trivia.submit_answer(room, player_id, data.get('answer'), **_scoring_rules())
        if outcome is None:
            return
        host_sid, epoch, question_number = room.host_sid, room.game_epoch, room.question_number

    current_app.logger.info(
        f"[answer] room={code} player={player_id} correct={outcome.correct} points={outcome.points}"
    )
    emit('answer_result', {
        'correct': outcome.correct,
        'points': outcome.points,
        'correctAnswer': outcome.correct_answer,
        'totalScore': outcome.total_score,
    })
    socketio.emit('answer_submitted', {
        'playerId': outcome.player_id,
        'playerName': outcome.player_name,
        'correct': outcome.correct,
        'points': outcome.points,
        'answer': outcome.answer,
    }, to=host_sid)

    if outcome.advance:
        app = current_app._get_current_object()
        schedule_advance(app, code, epoch, question_number, float(app.config.get('ADVANCE_DELAY_SEC', 3)))


def handle_disconnect(reason=None):
    sid = _get_sid()
    current_app.logger.info(f"[disconnect] sid={sid} reason={reason}")
    outcome = lifecycle.drop_connection(get_registry(), sid)
    for code in outcome.closed_rooms:
        socketio.emit('room_closed', to=code)
        socketio.close_room(code)
    for departure in outcome.departures:
        socketio.emit('player_left', {'playerId': departure.player_id}, to=departure.host_sid)


def register_socketio_handlers() -> None:
    """Register Socket.IO event handlers on the default namespace."""
    socketio.on_event('create_room', handle_create_room)
    socketio.on_event('join_room', handle_join_room)
    socketio.on_event('start_game', handle_start_game)
    socketio.on_event('buzz_in', handle_buzz_in)
    socketio.on_event('submit_answer', handle_submit_answer)
    socketio.on_event('disconnect', handle_disconnect)
