"""Verification of the Alexa request signature and signing certificate chain.

Alexa signs the raw HTTPS body and sends two headers with every request:

- ``SignatureCertChainUrl``: where to download the PEM certificate chain
- ``Signature-256``: base64 RSA/SHA-256 signature of the body
  (older requests only carry ``Signature``, RSA/SHA-1)
"""

import base64
import logging
import posixpath
from datetime import datetime, timezone
from functools import lru_cache
from pathlib import Path
from urllib.parse import urlparse

import certifi
import httpx
from cryptography import x509
from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.asymmetric import padding
from cryptography.x509.verification import PolicyBuilder, Store, VerificationError

from ..exceptions import SignatureError

logger = logging.getLogger(__name__)

CERT_URL_HOST = "s3.amazonaws.com"
CERT_URL_PATH_PREFIX = "/echo.api/"
SIGNING_CERT_DOMAIN = "echo-api.amazon.com"

DEFAULT_TIMEOUT = 5.0

# Downloaded chains keyed by URL, kept for the life of the process
_cert_chain_cache: dict[str, list[x509.Certificate]] = {}


def validate_cert_url(url: str) -> None:
    """Raise SignatureError unless ``url`` points at Amazon's echo.api bucket."""
    parsed = urlparse(url)

    if parsed.scheme.lower() != "https":
        raise SignatureError(f"Certificate URL must use https: {url}")
    if (parsed.hostname or "").lower() != CERT_URL_HOST:
        raise SignatureError(f"Certificate URL host is not {CERT_URL_HOST}: {url}")

    try:
        port = parsed.port
    except ValueError as e:
        raise SignatureError(f"Certificate URL has an invalid port: {url}") from e
    if port not in (None, 443):
        raise SignatureError(f"Certificate URL port must be 443: {url}")

    path = posixpath.normpath(parsed.path) if parsed.path else ""
    if not path.startswith(CERT_URL_PATH_PREFIX):
        raise SignatureError(f"Certificate URL path must start with {CERT_URL_PATH_PREFIX}: {url}")


@lru_cache(maxsize=1)
def _trusted_roots() -> tuple[x509.Certificate, ...]:
    """Load the certifi root store (cached)."""
    return tuple(x509.load_pem_x509_certificates(Path(certifi.where()).read_bytes()))


async def fetch_cert_chain(url: str, timeout: float = DEFAULT_TIMEOUT) -> list[x509.Certificate]:
    """Download and parse the PEM chain at ``url``, leaf certificate first."""
    if url in _cert_chain_cache:
        return _cert_chain_cache[url]

    try:
        async with httpx.AsyncClient(timeout=timeout) as client:
            response = await client.get(url)
            response.raise_for_status()
    except httpx.HTTPError as e:
        logger.warning(f"Failed to download certificate chain {url}: {e}")
        raise SignatureError(f"Could not download certificate chain: {e}") from e

    try:
        chain = x509.load_pem_x509_certificates(response.content)
    except ValueError as e:
        raise SignatureError(f"Certificate chain is not valid PEM: {e}") from e

    _cert_chain_cache[url] = chain
    return chain


def verify_cert_chain(
    chain: list[x509.Certificate],
    now: datetime | None = None,
    roots: list[x509.Certificate] | None = None,
) -> x509.Certificate:
    """
    Check the signing certificate chain.

    The leaf must be currently valid, carry ``echo-api.amazon.com`` in its
    subject alternative names and chain up to a trusted root.

    Args:
        chain: Certificates as downloaded, leaf first
        now: Validation time, defaults to the system clock
        roots: Trusted roots, defaults to the certifi bundle

    Returns:
        The leaf certificate
    """
    if not chain:
        raise SignatureError("Certificate chain is empty")

    leaf, intermediates = chain[0], chain[1:]
    store = Store(list(roots) if roots is not None else list(_trusted_roots()))
    verifier = (
        PolicyBuilder()
        .store(store)
        .time(now or datetime.now(timezone.utc))
        .build_server_verifier(x509.DNSName(SIGNING_CERT_DOMAIN))
    )

    try:
        verifier.verify(leaf, intermediates)
    except (VerificationError, ValueError) as e:
        raise SignatureError(f"Certificate chain verification failed: {e}") from e

    return leaf


def verify_signature(
    body: bytes,
    signature: str,
    certificate: x509.Certificate,
    algorithm: hashes.HashAlgorithm | None = None,
) -> None:
    """Raise SignatureError unless ``signature`` is the certificate's signature of ``body``."""
    try:
        certificate.public_key().verify(
            base64.b64decode(signature),
            body,
            padding.PKCS1v15(),
            algorithm or hashes.SHA256(),
        )
    except (InvalidSignature, ValueError, TypeError) as e:
        raise SignatureError(f"Request signature is invalid: {e}") from e


async def verify_request_signature(
    body: bytes,
    cert_url: str | None,
    signature_256: str | None = None,
    signature: str | None = None,
    now: datetime | None = None,
    timeout: float = DEFAULT_TIMEOUT,
) -> None:
    """
    Verify that ``body`` was signed by Alexa.

    Args:
        body: Raw request body, exactly as received
        cert_url: Value of the SignatureCertChainUrl header
        signature_256: Value of the Signature-256 header
        signature: Value of the legacy Signature header (SHA-1)
        now: Validation time, defaults to the system clock
        timeout: Certificate download timeout in seconds

    Raises:
        SignatureError: Any part of the verification failed
    """
    if not cert_url:
        raise SignatureError("Missing SignatureCertChainUrl header")
    if not (signature_256 or signature):
        raise SignatureError("Missing Signature header")

    validate_cert_url(cert_url)
    chain = await fetch_cert_chain(cert_url, timeout=timeout)
    leaf = verify_cert_chain(chain, now=now)

    if signature_256:
        verify_signature(body, signature_256, leaf, hashes.SHA256())
    else:
        verify_signature(body, signature, leaf, hashes.SHA1())
