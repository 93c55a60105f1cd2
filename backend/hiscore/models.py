from datetime import timezone

from hiscore import db


def as_utc(value):
    """SQLite hands back naive datetimes; everything stored here is UTC."""
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class PlaySession(db.Model):
    __tablename__ = 'sessions'
    token = db.Column(db.String(64), primary_key=True)
    issued_at = db.Column(db.DateTime(timezone=True), nullable=False, index=True)

    def to_dict(self):
        issued_at = as_utc(self.issued_at)
        return {
            'token': self.token,
            'issued_at': issued_at.isoformat() if issued_at else None,
        }


class HiScore(db.Model):
    __tablename__ = 'hi_scores'
    id = db.Column(db.Integer, primary_key=True)
    gig_id = db.Column(db.Integer, nullable=False, index=True)
    shift_id = db.Column(db.Integer, nullable=False, index=True)
    player_name = db.Column(db.String(3), nullable=False)
    score = db.Column(db.Integer, nullable=False, index=True)
    ip_addr = db.Column(db.String(64), nullable=False)

    def to_dict(self):
        # ip_addr is kept for auditing only and never leaves the server
        return {
            'id': self.id,
            'gig_id': self.gig_id,
            'shift_id': self.shift_id,
            'player_name': self.player_name,
            'score': self.score,
        }
