import os
import sys
from datetime import datetime, timedelta
import pytest

# Ensure the project root (containing the `countdown` package) is on sys.path
CURRENT_DIR = os.path.dirname(__file__)
PROJECT_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, '..'))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from countdown import create_app, db, socketio
from countdown.services.timers import clock


class TestConfig:
    TESTING = True
    SECRET_KEY = os.environ.get('SECRET_KEY', 'test-secret')
    SQLALCHEMY_DATABASE_URI = 'sqlite://'
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    DEFAULT_DURATION_SEC = 240
    TIMER_MAX_WRITE_ATTEMPTS = 3
    CORS_ORIGINS = ['http://localhost:5173']


class FrozenClock:
    """Stands in for the wall clock; time only moves when a test says so."""

    def __init__(self, start):
        self.now = start

    def __call__(self):
        return self.now

    def advance(self, seconds):
        self.now = self.now + timedelta(seconds=seconds)


@pytest.fixture()
def flask_app():
    application = create_app(TestConfig)
    with application.app_context():
        # Ensure models are imported so tables are created
        import countdown.models  # noqa: F401
        db.create_all()
        yield application
        db.session.remove()
        db.drop_all()


@pytest.fixture()
def client(flask_app):
    return flask_app.test_client()


@pytest.fixture()
def frozen_clock(monkeypatch):
    fake = FrozenClock(datetime(2026, 1, 1, 12, 0, 0))
    monkeypatch.setattr(clock, 'utcnow', fake)
    return fake


@pytest.fixture()
def sio_client(flask_app):
    test_client = socketio.test_client(
        flask_app,
        flask_test_client=flask_app.test_client(),
        namespace='/ws'
    )
    yield test_client
    if test_client.is_connected('/ws'):
        test_client.disconnect(namespace='/ws')
