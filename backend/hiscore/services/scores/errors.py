INVALID_SESSION = 'Invalid or expired session token'


class SubmissionRejected(ValueError):
    """A score submission failed a check. The message is safe to show clients."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message
