"""Trivia round state machine.

LOBBY -> PLAYING -> ROUND_END, with ROUND_END -> PLAYING on a new start.
Each question runs buzz-in then answer submission; the round advances when
the buzzed player answers or when everyone has answered.

Functions here only mutate the room they are given and return outcome
snapshots; socket fan-out and timers live in the router and scheduler.
Callers hold the registry lock around every call.
"""

import time
from dataclasses import dataclass, field
from typing import List, Optional

from gamenight.models import PLAYING, ROUND_END, Player, Room
from . import questions
from .exceptions import Unauthorized
from .scoring import score_answer


@dataclass
class QuestionDispatched:
    room_code: str
    question_number: int
    question: dict
    host_sid: str
    player_sids: List[str] = field(default_factory=list)


@dataclass
class RoundEnded:
    room_code: str
    leaderboard: List[dict] = field(default_factory=list)


@dataclass
class AnswerOutcome:
    player_id: str
    player_name: str
    answer: str
    correct: bool
    points: int
    correct_answer: str
    total_score: int
    advance: bool


def now_ms() -> float:
    return time.time() * 1000


def host_view(question: dict) -> dict:
    return {'q': question['q'], 'a': question['a'], 'choices': list(question['choices'])}


def player_view(question: dict) -> dict:
    """Question as shown on phones, without the answer."""
    return {'q': question['q'], 'choices': list(question['choices'])}


def leaderboard(room: Room) -> List[dict]:
    # sorted() is stable, so ties keep roster order
    ranked = sorted(room.players.values(), key=lambda p: p.score, reverse=True)
    return [p.to_dict() for p in ranked]


def start_game(room: Room, game: Optional[str], requester_sid: str) -> None:
    if requester_sid != room.host_sid:
        raise Unauthorized(room.code, requester_sid)
    for player in room.players.values():
        player.score = 0
    room.current_game = game
    room.game_state = PLAYING
    room.question_number = 0
    room.clear_round()
    room.game_epoch += 1


def advance_question(room: Room, questions_per_round: int = 5, now: Optional[float] = None):
    """Move to the next question or end the round.

    Returns a ``QuestionDispatched`` or ``RoundEnded`` describing what the
    clients need to be told.
    """
    room.question_number += 1
    if room.question_number > questions_per_round:
        room.game_state = ROUND_END
        room.clear_round()
        return RoundEnded(room.code, leaderboard(room))

    question = questions.draw(1)[0]
    room.current_question = question
    room.buzzed_player = None
    room.answers.clear()
    room.question_start_time = now_ms() if now is None else now
    return QuestionDispatched(
        room_code=room.code,
        question_number=room.question_number,
        question=question,
        host_sid=room.host_sid,
        player_sids=[p.sid for p in room.players.values()],
    )


def buzz_in(room: Room, player_id: str) -> Optional[Player]:
    """Lock the current question to ``player_id``; later buzzes are ignored."""
    if room.buzzed_player is not None:
        return None
    player = room.players.get(player_id)
    if player is None:
        return None
    room.buzzed_player = player_id
    return player


def submit_answer(room: Room, player_id: str, answer, now: Optional[float] = None,
                  **scoring) -> Optional[AnswerOutcome]:
    """Score an answer for the active question.

    ``scoring`` is passed through to ``score_answer`` (window_ms,
    base_points, multiplier). Returns None when there is no active question
    or the player is not in the room.
    """
    question = room.current_question
    player = room.players.get(player_id)
    if question is None or player is None:
        return None

    now = now_ms() if now is None else now
    correct = answer == question['a']
    elapsed = now - (room.question_start_time or now)
    points = score_answer(correct, elapsed, **scoring)
    if correct:
        player.score += points

    room.answers[player_id] = {'answer': answer, 'correct': correct, 'points': points}
    everyone_answered = all(pid in room.answers for pid in room.players)
    advance = room.buzzed_player == player_id or everyone_answered
    return AnswerOutcome(
        player_id=player_id,
        player_name=player.name,
        answer=answer,
        correct=correct,
        points=points,
        correct_answer=question['a'],
        total_score=player.score,
        advance=advance,
    )
