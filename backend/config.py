import os


def _database_url():
    url = os.environ.get('DATABASE_URL')
    # Hosted Postgres providers still hand out the legacy scheme
    if url and url.startswith('postgres://'):
        url = 'postgresql://' + url[len('postgres://'):]
    return url


class Config:
    SQLALCHEMY_DATABASE_URI = _database_url()
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    # Session age window (seconds)
    MIN_SESSION_AGE_SEC = int(os.environ.get('MIN_SESSION_AGE_SEC', '45'))
    MAX_SESSION_AGE_SEC = int(os.environ.get('MAX_SESSION_AGE_SEC', str(20 * 60)))
    # Sessions older than this are purged on submission
    SESSION_PURGE_AGE_SEC = int(os.environ.get('SESSION_PURGE_AGE_SEC', str(25 * 60)))
    # Accepted score range (inclusive)
    SCORE_MIN = int(os.environ.get('SCORE_MIN', '10'))
    SCORE_MAX = int(os.environ.get('SCORE_MAX', '10000'))
    PLAYER_NAME_LENGTH = int(os.environ.get('PLAYER_NAME_LENGTH', '3'))
    # Max rows returned by the listing endpoint
    RESULT_LIMIT = int(os.environ.get('RESULT_LIMIT', '1000'))
    CORS_ORIGINS = os.environ.get('CORS_ORIGINS', '*')
    # Number of trusted reverse proxies in front of the app. 0 disables.
    PROXY_FIX_X_FOR = int(os.environ.get('PROXY_FIX_X_FOR', '0'))
