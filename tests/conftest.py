import os
import sys
import random
import pytest

# Ensure the project root (containing the `connect5` package) is on sys.path
CURRENT_DIR = os.path.dirname(__file__)
PROJECT_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, '..'))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from connect5 import create_app, socketio
from connect5.services.game import GameSession


class TestConfig:
    TESTING = True
    SECRET_KEY = os.environ.get('SECRET_KEY', 'test-secret')
    CORS_ORIGINS = ['http://localhost:5173']
    LOG_LEVEL = 'DEBUG'
    FIRST_MOVER_SEED = 1234
    SOCKETIO_NOTIFY = True


class FixedChoice(random.Random):
    """Random source whose choice() always returns the named player."""

    def __init__(self, name):
        super().__init__(0)
        self.name = name

    def choice(self, seq):
        assert self.name in seq
        return self.name


@pytest.fixture()
def flask_app():
    application = create_app(TestConfig)
    with application.app_context():
        yield application


@pytest.fixture()
def client(flask_app):
    return flask_app.test_client()


@pytest.fixture()
def game_session(flask_app):
    return flask_app.extensions['game_session']


@pytest.fixture()
def make_session():
    """Build a bare GameSession whose first waiting player is fixed."""
    def _make(waiting=None):
        rng = FixedChoice(waiting) if waiting else random.Random(0)
        return GameSession(rng=rng)
    return _make


@pytest.fixture()
def sio_client(flask_app):
    test_client = socketio.test_client(
        flask_app,
        flask_test_client=flask_app.test_client(),
        namespace='/ws'
    )
    yield test_client
    try:
        test_client.disconnect(namespace='/ws')
    except Exception:
        pass
