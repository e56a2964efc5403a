"""Request origin and freshness checks."""

import logging
from datetime import datetime, timezone

from ..exceptions import AuthenticationError, StaleRequestError
from ..models.request import RequestEnvelope

logger = logging.getLogger(__name__)

# Alexa rejects anything older than 150 seconds
DEFAULT_TOLERANCE_SECONDS = 150


def validate_application_id(envelope: RequestEnvelope, application_id: str) -> None:
    """Raise AuthenticationError unless the request targets ``application_id``."""
    declared = envelope.application_id
    if declared != application_id:
        logger.warning(f"Application id mismatch: expected {application_id!r}, got {declared!r}")
        raise AuthenticationError(f"Invalid application id: {declared}")


def validate_timestamp(
    envelope: RequestEnvelope,
    tolerance: int = DEFAULT_TOLERANCE_SECONDS,
    now: datetime | None = None,
) -> None:
    """Raise StaleRequestError when the request timestamp is missing or too far off."""
    timestamp = envelope.request.timestamp
    if timestamp is None:
        raise StaleRequestError("Request timestamp is missing")

    if timestamp.tzinfo is None:
        timestamp = timestamp.replace(tzinfo=timezone.utc)
    now = now or datetime.now(timezone.utc)
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)

    skew = abs((now - timestamp).total_seconds())
    if skew > tolerance:
        logger.warning(f"Stale request {envelope.request.requestId}: {skew:.0f}s old")
        raise StaleRequestError(f"Request timestamp is {skew:.0f}s outside tolerance")


def validate_request(
    envelope: RequestEnvelope,
    application_id: str,
    tolerance: int = DEFAULT_TOLERANCE_SECONDS,
    now: datetime | None = None,
) -> None:
    """
    Check that a request is addressed to this skill and is recent.

    Args:
        envelope: Decoded request envelope
        application_id: Expected skill id
        tolerance: Accepted clock skew in seconds
        now: Current time, defaults to the system clock

    Raises:
        AuthenticationError: Application id does not match
        StaleRequestError: Timestamp is missing or outside the tolerance
    """
    validate_application_id(envelope, application_id)
    validate_timestamp(envelope, tolerance=tolerance, now=now)
