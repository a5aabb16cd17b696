"""Ed25519 request signature verification."""

import logging

from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives.asymmetric.ed25519 import Ed25519PublicKey

from pkgsearch.domain.interaction.port.signature_verifier import SignatureVerifier
from pkgsearch.domain.shared.error import ConfigurationError

logger = logging.getLogger(__name__)


class Ed25519SignatureVerifier(SignatureVerifier):
    """Verifies ``signature`` over ``timestamp + body`` with the application public key."""

    def __init__(self, public_key_hex: str) -> None:
        try:
            self._key = Ed25519PublicKey.from_public_bytes(bytes.fromhex(public_key_hex))
        except ValueError as e:
            raise ConfigurationError(f"Invalid application public key: {e}") from e

    def verify(self, body: bytes, signature: str, timestamp: str) -> bool:
        try:
            signature_bytes = bytes.fromhex(signature)
        except ValueError:
            return False
        try:
            self._key.verify(signature_bytes, timestamp.encode() + body)
        except InvalidSignature:
            return False
        return True


class AllowAllSignatureVerifier(SignatureVerifier):
    """Accepts every request. Only for local development without a public key."""

    def __init__(self) -> None:
        logger.warning("No public key configured; interaction signatures are NOT verified")

    def verify(self, body: bytes, signature: str, timestamp: str) -> bool:
        return True
