"""Request processing services."""

from .dispatcher import handle_request
from .pipeline import decode_request, encode_response, process_request
from .signature import validate_cert_url, verify_request_signature
from .validator import validate_request

__all__ = [
    "handle_request",
    "decode_request",
    "encode_response",
    "process_request",
    "validate_request",
    "validate_cert_url",
    "verify_request_signature",
]
