from typing import List, Optional

from hiscore.models import HiScore


def list_scores(limit: int, gig_id: Optional[float] = None, shift_id: Optional[float] = None) -> List[HiScore]:
    """Top scores, highest first, narrowed by whichever filters are given."""
    query = HiScore.query
    if gig_id is not None:
        query = query.filter(HiScore.gig_id == gig_id)
    if shift_id is not None:
        query = query.filter(HiScore.shift_id == shift_id)
    return query.order_by(HiScore.score.desc(), HiScore.id.asc()).limit(limit).all()
