"""
Bearer token helpers.

Tokens are compact JWTs signed with HMAC-SHA256: three base64url
segments ``header.payload.signature``.  The payload must carry a ``sub``
claim (the authenticated subject) and an ``exp`` UNIX timestamp.

``TokenValidator`` holds an immutable ``TokenConfig`` and verifies
tokens; it never deals with the ``Authorization`` header itself.
``extract_bearer_token`` does that job and fails closed: anything that
is not exactly ``Bearer <token>`` counts as a missing token.
"""

import base64
import binascii
import hashlib
import hmac
import json
import time
from typing import Any, Dict, Optional

from .config import TokenConfig
from .errors import InvalidToken, MissingToken

BEARER_PREFIX = "Bearer "
SUPPORTED_ALGORITHMS = {"HS256"}

AuthSubject = str


def _b64_url_encode(data: bytes) -> str:
    """Base64-url encode bytes without padding."""
    return base64.urlsafe_b64encode(data).rstrip(b"=").decode("utf-8")


def _b64_url_decode(data: str) -> bytes:
    """Decode base64-url encoded string, adding padding if necessary."""
    padding = "=" * (-len(data) % 4)
    return base64.urlsafe_b64decode(data + padding)


def _sign(message: bytes, secret: str) -> bytes:
    """Compute HMAC-SHA256 signature of a message using the given secret."""
    return hmac.new(secret.encode("utf-8"), message, hashlib.sha256).digest()


def create_access_token(
    config: TokenConfig,
    subject: AuthSubject,
    expires_in: Optional[int] = None,
    extra_claims: Optional[Dict[str, Any]] = None,
) -> str:
    """Create a signed token for ``subject``.

    Parameters
    ----------
    config : TokenConfig
        Key material used to sign the token.
    subject : str
        Value of the ``sub`` claim.
    expires_in : Optional[int]
        Lifetime in seconds.  Defaults to ``config.expire_seconds``.
        Negative values produce an already expired token.
    extra_claims : Optional[dict]
        Additional claims merged into the payload.

    Returns
    -------
    str
        A ``header.payload.signature`` token string.
    """
    claims: Dict[str, Any] = dict(extra_claims or {})
    claims["sub"] = str(subject)
    lifetime = config.expire_seconds if expires_in is None else expires_in
    claims["exp"] = int(time.time()) + lifetime
    header = {"alg": config.algorithm, "typ": "JWT"}
    header_b64 = _b64_url_encode(json.dumps(header, separators=(",", ":")).encode("utf-8"))
    payload_b64 = _b64_url_encode(json.dumps(claims, separators=(",", ":")).encode("utf-8"))
    signing_input = f"{header_b64}.{payload_b64}".encode("utf-8")
    signature_b64 = _b64_url_encode(_sign(signing_input, config.secret_key))
    return f"{header_b64}.{payload_b64}.{signature_b64}"


def extract_bearer_token(authorization: Optional[str]) -> str:
    """Strip the ``Bearer`` scheme marker from an ``Authorization`` value.

    Raises ``MissingToken`` when the header is absent, does not start
    with the exact ``"Bearer "`` prefix, or carries nothing after it.
    """
    if authorization is None or not authorization.startswith(BEARER_PREFIX):
        raise MissingToken()
    token = authorization[len(BEARER_PREFIX):].strip()
    if not token:
        raise MissingToken()
    return token


class TokenValidator:
    """Verifies access tokens against a fixed ``TokenConfig``."""

    def __init__(self, config: TokenConfig) -> None:
        if config.algorithm not in SUPPORTED_ALGORITHMS:
            raise ValueError(f"Unsupported token algorithm: {config.algorithm}")
        self._config = config

    @property
    def config(self) -> TokenConfig:
        return self._config

    def validate(self, token: str) -> AuthSubject:
        """Return the subject of ``token`` or raise ``InvalidToken``."""
        parts = token.split(".")
        if len(parts) != 3:
            raise InvalidToken("Malformed token")
        header_b64, payload_b64, signature_b64 = parts

        # Nothing is parsed until the signature matches.
        try:
            actual_sig = _b64_url_decode(signature_b64)
            signing_input = f"{header_b64}.{payload_b64}".encode("utf-8")
        except (binascii.Error, UnicodeError, ValueError) as exc:
            raise InvalidToken("Malformed token") from exc
        expected_sig = _sign(signing_input, self._config.secret_key)
        if not hmac.compare_digest(expected_sig, actual_sig):
            raise InvalidToken("Invalid token signature")

        try:
            header = json.loads(_b64_url_decode(header_b64).decode("utf-8"))
            claims = json.loads(_b64_url_decode(payload_b64).decode("utf-8"))
        except (binascii.Error, UnicodeError, ValueError, RecursionError) as exc:
            raise InvalidToken("Malformed token") from exc

        if not isinstance(header, dict) or header.get("alg") != self._config.algorithm:
            raise InvalidToken("Unexpected token algorithm")
        if not isinstance(claims, dict):
            raise InvalidToken("Malformed token")
        try:
            expires_at = int(claims["exp"])
        except (KeyError, TypeError, ValueError, OverflowError) as exc:
            raise InvalidToken("Token has no valid expiry") from exc
        if expires_at < int(time.time()):
            raise InvalidToken("Token expired")

        subject = claims.get("sub")
        if subject is None or str(subject) == "":
            raise InvalidToken("Token has no subject")
        return str(subject)
