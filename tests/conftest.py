import pytest

import helpers
from app import app as flask_app


@pytest.fixture
def app():
    flask_app.config.update(TESTING=True, RATE_LIMIT=60, RATE_WINDOW=60, MAX_KEY_LENGTH=256)
    helpers.reset_rate_limits()
    yield flask_app
    helpers.reset_rate_limits()


@pytest.fixture
def client(app):
    return app.test_client()
