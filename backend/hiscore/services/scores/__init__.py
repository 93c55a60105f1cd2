"""Score domain services: session tokens, submission checks and storage.

HTTP routes import from here; nothing in this package touches the request
object, so the rules can be exercised directly in tests.
"""
