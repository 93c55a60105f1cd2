import os
import sys
import uuid
from datetime import datetime, timedelta, timezone

import pytest

# Ensure the backend root (containing the `hiscore` package) is on sys.path
CURRENT_DIR = os.path.dirname(__file__)
BACKEND_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, '..'))
if BACKEND_ROOT not in sys.path:
    sys.path.insert(0, BACKEND_ROOT)

from hiscore import RULES_EXTENSION, create_app, db


class TestConfig:
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite://'
    SQLALCHEMY_TRACK_MODIFICATIONS = False


@pytest.fixture()
def flask_app():
    application = create_app(TestConfig)
    with application.app_context():
        # Ensure models are imported so tables are created
        import hiscore.models  # noqa: F401
        db.create_all()
        yield application
        db.session.remove()
        db.drop_all()


@pytest.fixture()
def client(flask_app):
    return flask_app.test_client()


@pytest.fixture()
def rules(flask_app):
    return flask_app.extensions[RULES_EXTENSION]


@pytest.fixture()
def make_session(flask_app):
    """Insert a play session issued `age_sec` seconds ago and return its token."""
    from hiscore.models import PlaySession

    def _make(age_sec=60, token=None):
        session = PlaySession(
            token=token or str(uuid.uuid4()),
            issued_at=datetime.now(timezone.utc) - timedelta(seconds=age_sec),
        )
        db.session.add(session)
        db.session.commit()
        return session.token

    return _make


@pytest.fixture()
def make_score(flask_app):
    from hiscore.models import HiScore

    def _make(score, gig_id=1, shift_id=1, player_name='ABC'):
        row = HiScore(gig_id=gig_id, shift_id=shift_id, player_name=player_name, score=score, ip_addr='10.0.0.1')
        db.session.add(row)
        db.session.commit()
        return row.id

    return _make
