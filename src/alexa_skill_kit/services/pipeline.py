"""Decode, validate, dispatch and encode a single skill request."""

import json
import logging
from collections.abc import Mapping
from datetime import datetime
from typing import Any

from pydantic import ValidationError
from pydantic_core import PydanticSerializationError

from ..exceptions import DecodeError, EncodeError
from ..models.request import RequestEnvelope
from ..models.response import OutgoingResponse
from ..skill import Skill
from .dispatcher import handle_request
from .signature import verify_request_signature
from .validator import validate_request

logger = logging.getLogger(__name__)


def decode_request(body: bytes | str | dict[str, Any]) -> RequestEnvelope:
    """Parse a raw JSON body (or an already-parsed dict) into a RequestEnvelope."""
    try:
        if isinstance(body, dict):
            return RequestEnvelope.model_validate(body)
        return RequestEnvelope.model_validate_json(body)
    except ValidationError as e:
        logger.warning(f"Could not decode request: {e.error_count()} error(s)")
        raise DecodeError(f"Invalid request envelope: {e}") from e


def encode_response(outgoing: OutgoingResponse) -> dict[str, Any]:
    """Serialize a response envelope to JSON-compatible data, omitting unset fields."""
    try:
        return outgoing.model_dump(mode="json", exclude_none=True)
    except (PydanticSerializationError, TypeError, ValueError) as e:
        raise EncodeError(f"Could not encode response: {e}") from e


def _body_text(body: bytes | str | dict[str, Any]) -> str:
    if isinstance(body, dict):
        return json.dumps(body)
    if isinstance(body, bytes):
        return body.decode("utf-8", errors="replace")
    return body


async def process_request(
    skill: Skill,
    body: bytes | str | dict[str, Any],
    headers: Mapping[str, str] | None = None,
    now: datetime | None = None,
) -> dict[str, Any]:
    """
    Run one request through the skill.

    Args:
        skill: Skill configuration and handlers
        body: Raw request body or a parsed event
        headers: HTTP headers, needed for signature verification
        now: Current time for validation, defaults to the system clock

    Returns:
        Response envelope as a JSON-compatible dict

    Raises:
        DecodeError: Body is not a valid request envelope
        AuthenticationError: Wrong application id or invalid signature
        StaleRequestError: Request timestamp outside tolerance
        EncodeError: Response could not be serialized
    """
    if skill.verbose:
        logger.info(f"--> Request: {_body_text(body)}")

    envelope = decode_request(body)

    if not skill.skip_validation:
        if skill.verify_signature and headers is not None:
            lowered = {key.lower(): value for key, value in headers.items()}
            await verify_request_signature(
                _body_text(body).encode("utf-8") if not isinstance(body, bytes) else body,
                cert_url=lowered.get("signaturecertchainurl"),
                signature_256=lowered.get("signature-256"),
                signature=lowered.get("signature"),
                now=now,
                timeout=skill.cert_fetch_timeout,
            )
        validate_request(
            envelope,
            skill.application_id,
            tolerance=skill.timestamp_tolerance,
            now=now,
        )

    outgoing = await handle_request(envelope, skill)
    payload = encode_response(outgoing)

    if skill.verbose:
        logger.info(f"--> Response: {json.dumps(payload)}")

    return payload
