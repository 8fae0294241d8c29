import os
import sys
import pytest

# Ensure the backend root (containing the `gamenight` package) is on sys.path
CURRENT_DIR = os.path.dirname(__file__)
BACKEND_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, '..'))
if BACKEND_ROOT not in sys.path:
    sys.path.insert(0, BACKEND_ROOT)

from gamenight import create_app, socketio
from gamenight.services.games import trivia
from gamenight.services.games.registry import get_registry


class TestConfig:
    TESTING = True
    SECRET_KEY = os.environ.get('SECRET_KEY', 'test-secret')
    CORS_ORIGINS = '*'
    LOG_LEVEL = 'DEBUG'
    QUESTIONS_PER_ROUND = 5
    # Timers fire inline and immediately under TESTING
    GAME_START_DELAY_SEC = 0
    ADVANCE_DELAY_SEC = 0
    ANSWER_WINDOW_MS = 15000
    BASE_POINTS = 100
    BONUS_MULTIPLIER = 10


@pytest.fixture()
def flask_app():
    application = create_app(TestConfig)
    with application.app_context():
        yield application


@pytest.fixture()
def app_factory():
    """Builds an app from TestConfig with some settings overridden."""

    def _make(**overrides):
        return create_app(type('OverrideConfig', (TestConfig,), overrides))

    return _make


@pytest.fixture()
def client(flask_app):
    return flask_app.test_client()


@pytest.fixture()
def registry(flask_app):
    return get_registry(flask_app)


@pytest.fixture()
def sio_client(flask_app):
    """Factory for connected Socket.IO test clients; all are disconnected on teardown."""
    created = []

    def _make():
        test_client = socketio.test_client(flask_app, flask_test_client=flask_app.test_client())
        created.append(test_client)
        return test_client

    yield _make
    for test_client in created:
        try:
            if test_client.is_connected():
                test_client.disconnect()
        except Exception:
            pass


@pytest.fixture()
def clock(monkeypatch):
    """Freezes trivia's millisecond clock; tests move it with ``clock.advance``."""

    class _Clock:
        def __init__(self):
            self.now = 1_700_000_000_000.0

        def advance(self, ms):
            self.now += ms

    frozen = _Clock()
    monkeypatch.setattr(trivia, 'now_ms', lambda: frozen.now)
    return frozen


def named(received, name):
    """Payloads (first arg) of the received packets called ``name``."""
    return [pkt['args'][0] if pkt['args'] else None
            for pkt in received if pkt['name'] == name]
