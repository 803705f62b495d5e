import hashlib
import hmac
import re

import pytest

from fairrps.errors import InvalidInput, InvalidLength, UnsupportedAlgorithm
from fairrps.services.commitment import HMAC_ALGORITHM, KEY_LENGTH, HashCommitment, verify_commitment


def test_defaults_to_sha256_and_32_byte_keys() -> None:
    assert HMAC_ALGORITHM == "sha256"
    assert KEY_LENGTH == 32
    assert HashCommitment().algorithm == "sha256"


@pytest.mark.parametrize("name", ["md17", "", "shake_128", "SHA-256-nope"])
def test_unsupported_algorithm(name: str) -> None:
    with pytest.raises(UnsupportedAlgorithm):
        HashCommitment(name)


def test_generate_key_is_lowercase_hex() -> None:
    hasher = HashCommitment()
    key = hasher.generate_key(32)
    assert re.fullmatch(r"[0-9a-f]{64}", key)
    assert hasher.generate_key(1) != "" and len(hasher.generate_key(1)) == 2
    assert hasher.generate_key(32) != key


@pytest.mark.parametrize("length", [0, -1, 1.5, "32", None, True])
def test_generate_key_rejects_bad_length(length) -> None:
    with pytest.raises(InvalidLength):
        HashCommitment().generate_key(length)


def test_commit_known_vector() -> None:
    digest = HashCommitment().commit("The quick brown fox jumps over the lazy dog", "key")
    assert digest == "f7bc83f430538424b13298e6aa6fb143ef4d59a14946175997479dbc2d1a3cd8"


def test_commit_is_deterministic_and_independently_reproducible() -> None:
    hasher = HashCommitment()
    key = hasher.generate_key(32)
    digest = hasher.commit("lizard", key)
    assert digest == hasher.commit("lizard", key)
    assert digest == HashCommitment().commit("lizard", key)
    assert digest == hmac.new(key.encode(), b"lizard", hashlib.sha256).hexdigest()


def test_commit_depends_on_message_and_key() -> None:
    hasher = HashCommitment()
    key = hasher.generate_key(32)
    assert hasher.commit("rock", key) != hasher.commit("paper", key)
    assert hasher.commit("rock", key) != hasher.commit("rock", hasher.generate_key(32))


@pytest.mark.parametrize("message, key", [(b"rock", "k"), ("rock", b"k"), (None, "k"), ("rock", 42)])
def test_commit_requires_strings(message, key) -> None:
    with pytest.raises(InvalidInput):
        HashCommitment().commit(message, key)


def test_verify_detects_tampering() -> None:
    hasher = HashCommitment()
    key = hasher.generate_key(32)
    digest = hasher.commit("spock", key)

    assert hasher.verify(digest, "spock", key)
    assert hasher.verify(digest.upper(), "spock", key)
    assert not hasher.verify(digest, "rock", key)
    assert not hasher.verify(digest, "spock", hasher.generate_key(32))


def test_verify_commitment_function() -> None:
    key = "00" * 32
    digest = HashCommitment().commit("paper", key)
    assert verify_commitment(digest, "paper", key)
    assert not verify_commitment(digest, "paper", "11" * 32)
