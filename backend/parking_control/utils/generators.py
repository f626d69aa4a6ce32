"""ID generation utilities."""

import uuid


def generate_request_id() -> str:
    """Generate a request ID for callers that did not send ``X-Request-ID``."""
    return str(uuid.uuid4())
