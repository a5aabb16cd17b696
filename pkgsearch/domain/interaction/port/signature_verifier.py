"""Port for authenticating inbound interaction requests."""

from abc import abstractmethod
from typing import Protocol

from pkgsearch.domain.shared.port import Port


class SignatureVerifier(Port, Protocol):
    """Checks the request signature headers against the raw body."""

    @abstractmethod
    def verify(self, body: bytes, signature: str, timestamp: str) -> bool: ...
