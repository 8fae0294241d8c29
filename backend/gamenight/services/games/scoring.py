import math


def score_answer(correct: bool, elapsed_ms: float, window_ms: int = 15000,
                 base_points: int = 100, multiplier: int = 10) -> int:
    """Points for one answer.

    A correct answer earns ``base_points`` plus a time bonus that decays
    linearly from ``window_ms / 1000`` to zero over the answer window, scaled
    by ``multiplier``. With the defaults a correct answer is worth 100-250
    points; a wrong answer is worth nothing.
    """
    if not correct:
        return 0
    elapsed_ms = max(0, elapsed_ms)
    bonus = max(0, window_ms - elapsed_ms) / 1000
    return math.floor(base_points + bonus * multiplier)
