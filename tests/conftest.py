import sys, os
import random

import pytest

# Ensure the project root is on path for test imports
ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def app():
    from main import app as flask_app, SESSIONS
    flask_app.config.update(TESTING=True, SEED=7)
    SESSIONS.clear()
    yield flask_app
    flask_app.config.update(SEED=None)
    SESSIONS.clear()


@pytest.fixture
def client(app):
    return app.test_client()
