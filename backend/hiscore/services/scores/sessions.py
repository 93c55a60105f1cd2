import uuid
from datetime import datetime, timedelta, timezone
from typing import Optional

from flask import current_app

from hiscore import db
from hiscore.models import PlaySession, as_utc
from .errors import INVALID_SESSION, SubmissionRejected
from .rules import SubmissionRules


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def issue_session(now: Optional[datetime] = None) -> PlaySession:
    """Create and persist a fresh single-use play session."""
    session = PlaySession(token=str(uuid.uuid4()), issued_at=now or utcnow())
    db.session.add(session)
    db.session.commit()
    current_app.logger.info(f"[session-start] token={session.token}")
    return session


def purge_stale_sessions(purge_age: timedelta, now: Optional[datetime] = None) -> int:
    """Delete sessions issued more than purge_age ago. Caller commits."""
    cutoff = (now or utcnow()) - purge_age
    removed = PlaySession.query.filter(PlaySession.issued_at < cutoff).delete(synchronize_session=False)
    if removed:
        current_app.logger.info(f"[session-purge] removed={removed} cutoff={cutoff.isoformat()}")
    return removed


def consume_session(token: str, rules: SubmissionRules, now: Optional[datetime] = None) -> datetime:
    """Redeem a session token and return its issuance time.

    The row is deleted as soon as it is found and the delete is committed
    before the age window is checked, so a token never gets a second try.
    If the delete finds nothing, another request redeemed the token first.
    """
    now = now or utcnow()
    session = db.session.get(PlaySession, token)
    if session is None:
        current_app.logger.warning(f"[session-reject] no session for token={token}")
        raise SubmissionRejected(INVALID_SESSION)

    issued_at = session.issued_at
    deleted = PlaySession.query.filter_by(token=token).delete(synchronize_session=False)
    db.session.expunge(session)
    purge_stale_sessions(rules.purge_age, now)
    db.session.commit()

    if not deleted:
        current_app.logger.warning(f"[session-reject] token={token} already redeemed")
        raise SubmissionRejected(INVALID_SESSION)

    return check_session_age(token, issued_at, rules, now)


def check_session_age(token: str, issued_at, rules: SubmissionRules, now: datetime) -> datetime:
    if not isinstance(issued_at, datetime):
        current_app.logger.warning(f"[session-reject] token={token} unreadable issued_at={issued_at!r}")
        raise SubmissionRejected(INVALID_SESSION)

    issued_at = as_utc(issued_at)
    age = now - issued_at
    age_ms = int(age.total_seconds() * 1000)

    if age < rules.min_age:
        current_app.logger.warning(
            f"[session-reject] token={token} used too quickly age_ms={age_ms} issued_at={issued_at.isoformat()}"
        )
        raise SubmissionRejected(INVALID_SESSION)

    if age > rules.max_age:
        current_app.logger.warning(
            f"[session-reject] token={token} expired age_ms={age_ms} issued_at={issued_at.isoformat()}"
        )
        raise SubmissionRejected(INVALID_SESSION)

    return issued_at
