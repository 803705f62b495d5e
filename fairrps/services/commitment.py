import hashlib
import hmac
import logging
import secrets
from typing import Final

from fairrps.errors import InvalidInput, InvalidLength, UnsupportedAlgorithm


logger = logging.getLogger(__name__)

HMAC_ALGORITHM: Final[str] = "sha256"
KEY_LENGTH: Final[int] = 32


class HashCommitment:
    """Keyed-hash commitments: HMAC(key, message) as lowercase hex."""

    def __init__(self, algorithm: str = HMAC_ALGORITHM) -> None:
        # shake_* digests have no fixed size and cannot back an HMAC
        if algorithm not in hashlib.algorithms_available or algorithm.startswith("shake_"):
            raise UnsupportedAlgorithm(
                f"Invalid algorithm {algorithm!r}. You must provide a supported hash algorithm."
            )
        self.algorithm = algorithm

    def generate_key(self, length: int = KEY_LENGTH) -> str:
        if isinstance(length, bool) or not isinstance(length, int) or length < 1:
            raise InvalidLength(f"Invalid length {length!r}. You must provide a positive integer.")
        return secrets.token_hex(length)

    def commit(self, message: str, key: str) -> str:
        if not isinstance(message, str) or not isinstance(key, str):
            raise InvalidInput("Invalid message or key. You must provide strings.")
        # The hex key string itself is the HMAC key, not the bytes it encodes.
        mac = hmac.new(key.encode("utf-8"), message.encode("utf-8"), self.algorithm)
        return mac.hexdigest()

    def verify(self, digest: str, message: str, key: str) -> bool:
        computed = self.commit(message, key)
        return hmac.compare_digest(digest.strip().lower().encode("utf-8"), computed.encode("ascii"))


def verify_commitment(digest: str, message: str, key: str, algorithm: str = HMAC_ALGORITHM) -> bool:
    ok = HashCommitment(algorithm).verify(digest, message, key)
    logger.debug("verify %s -> %s", digest, ok)
    return ok
