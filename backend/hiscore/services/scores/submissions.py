from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from flask import current_app

from hiscore import db
from hiscore.models import HiScore
from .errors import SubmissionRejected
from .parsing import parse_integer, parse_number
from .rules import SubmissionRules
from .sessions import consume_session

UNKNOWN_ADDR = 'unknown'
# hi_scores.gig_id and shift_id are 32-bit INTEGER columns
INT32_MIN = -2 ** 31
INT32_MAX = 2 ** 31 - 1


def _fits_int32(value: int) -> bool:
    return INT32_MIN <= value <= INT32_MAX


@dataclass(frozen=True)
class ScoreSubmission:
    token: str
    player_name: str
    score: int
    gig_id: int
    shift_id: int


def validate_payload(body, rules: SubmissionRules) -> ScoreSubmission:
    """Check the shape of a submission body, cheapest checks first.

    Nothing here touches the database; the session token is only checked
    for presence. Raises SubmissionRejected on the first failure.
    """
    if not isinstance(body, dict):
        raise SubmissionRejected('Request body must be an object')

    token = body.get('token')
    if not isinstance(token, str) or not token.strip():
        raise SubmissionRejected('Missing or invalid token')

    raw_name = body.get('player_name')
    player_name = raw_name.strip().lower() if isinstance(raw_name, str) else ''
    # upper-casing can change the length ('ß' becomes 'SS'), so check both forms
    display_name = player_name.upper()
    if (len(player_name) != rules.name_length or len(display_name) != rules.name_length
            or rules.is_banned(player_name)):
        raise SubmissionRejected('Missing or invalid player_name')

    score = parse_number(body.get('score'))
    if score is None or score < rules.score_min or score > rules.score_max:
        raise SubmissionRejected(f'Score must be between {rules.score_min:,} and {rules.score_max:,}')
    if isinstance(score, float):
        if not score.is_integer():
            raise SubmissionRejected('Score must be a whole number')
        score = int(score)

    gig_id = parse_integer(body.get('gig_id'))
    shift_id = parse_integer(body.get('shift_id'))
    if gig_id is None or shift_id is None or not _fits_int32(gig_id) or not _fits_int32(shift_id):
        raise SubmissionRejected('gig_id and shift_id must be integers')

    return ScoreSubmission(
        token=token,
        player_name=display_name,
        score=score,
        gig_id=gig_id,
        shift_id=shift_id,
    )


def submit_score(body, rules: SubmissionRules, ip_addr: Optional[str] = None,
                 now: Optional[datetime] = None) -> HiScore:
    """Validate a submission, redeem its session and store the score."""
    submission = validate_payload(body, rules)
    consume_session(submission.token, rules, now)

    hi_score = HiScore(
        gig_id=submission.gig_id,
        shift_id=submission.shift_id,
        player_name=submission.player_name,
        score=submission.score,
        ip_addr=ip_addr or UNKNOWN_ADDR,
    )
    db.session.add(hi_score)
    db.session.commit()
    current_app.logger.info(
        f"[score-accept] id={hi_score.id} gig={hi_score.gig_id} shift={hi_score.shift_id} "
        f"player={hi_score.player_name} score={hi_score.score} ip={hi_score.ip_addr}"
    )
    return hi_score
