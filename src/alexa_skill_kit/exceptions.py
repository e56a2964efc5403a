"""Errors raised while processing a skill request."""


class SkillError(Exception):
    """Base class for request processing errors."""

    status_code: int = 500


class DecodeError(SkillError):
    """Inbound payload is not valid JSON or does not match the request schema."""

    status_code = 400


class AuthenticationError(SkillError):
    """Request does not originate from the configured skill."""

    status_code = 403


class SignatureError(AuthenticationError):
    """Request signature or signing certificate chain is invalid."""


class StaleRequestError(SkillError):
    """Request timestamp is outside the accepted tolerance."""

    status_code = 400


class EncodeError(SkillError):
    """Outgoing response could not be serialized."""

    status_code = 500
