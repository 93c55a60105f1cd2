import json
import os
from dataclasses import dataclass
from datetime import timedelta
from typing import FrozenSet, Tuple

WORDS_PATH = os.path.normpath(os.path.join(os.path.dirname(__file__), '..', '..', 'words.json'))


def load_words(path: str = WORDS_PATH) -> Tuple[str, ...]:
    """Read the disallowed player names, lowercased, in file order."""
    with open(path, encoding='utf-8') as fh:
        words = json.load(fh)
    return tuple(str(w).strip().lower() for w in words)


@dataclass(frozen=True)
class SubmissionRules:
    min_age: timedelta
    max_age: timedelta
    purge_age: timedelta
    score_min: int
    score_max: int
    name_length: int
    result_limit: int
    words: Tuple[str, ...]
    banned: FrozenSet[str]

    def is_banned(self, name: str) -> bool:
        return name.lower() in self.banned


def rules_from_config(config, words: Tuple[str, ...] = None) -> SubmissionRules:
    if words is None:
        words = load_words()
    return SubmissionRules(
        min_age=timedelta(seconds=int(config.get('MIN_SESSION_AGE_SEC', 45))),
        max_age=timedelta(seconds=int(config.get('MAX_SESSION_AGE_SEC', 20 * 60))),
        purge_age=timedelta(seconds=int(config.get('SESSION_PURGE_AGE_SEC', 25 * 60))),
        score_min=int(config.get('SCORE_MIN', 10)),
        score_max=int(config.get('SCORE_MAX', 10000)),
        name_length=int(config.get('PLAYER_NAME_LENGTH', 3)),
        result_limit=int(config.get('RESULT_LIMIT', 1000)),
        words=words,
        banned=frozenset(words),
    )
