import os

class Config:
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'gamenight-dev-secret'
    # Comma separated list, '*' allows any origin (TV display and phones on the LAN)
    CORS_ORIGINS = os.environ.get('CORS_ORIGINS', '*')
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')
    PORT = int(os.environ.get('PORT', '3001'))
    # Round structure
    QUESTIONS_PER_ROUND = int(os.environ.get('QUESTIONS_PER_ROUND', '5'))
    # Deferred transitions (seconds)
    GAME_START_DELAY_SEC = float(os.environ.get('GAME_START_DELAY_SEC', '2'))
    ADVANCE_DELAY_SEC = float(os.environ.get('ADVANCE_DELAY_SEC', '3'))
    # Scoring: floor(BASE_POINTS + bonus * BONUS_MULTIPLIER), bonus decays over the window
    ANSWER_WINDOW_MS = int(os.environ.get('ANSWER_WINDOW_MS', '15000'))
    BASE_POINTS = int(os.environ.get('BASE_POINTS', '100'))
    BONUS_MULTIPLIER = int(os.environ.get('BONUS_MULTIPLIER', '10'))
