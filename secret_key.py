# secret_key.py

import json
import logging

import base58
from solders.keypair import Keypair

logger = logging.getLogger(__name__)

SEED_LENGTH = 32
FULL_KEY_LENGTH = 64


class SecretKeyError(ValueError):
    """Base class for wallet secret keys that can't be used."""


class KeyFormatError(SecretKeyError):
    pass


class KeyLengthError(SecretKeyError):
    def __init__(self, length):
        super().__init__(
            f"Invalid secret key length: {length} bytes. Expected {SEED_LENGTH} or {FULL_KEY_LENGTH} bytes."
        )
        self.length = length


def _from_base58(secret_key_string):
    try:
        return base58.b58decode(secret_key_string)
    except ValueError:
        return None


def _from_json_array(secret_key_string):
    try:
        values = json.loads(secret_key_string)
    except (ValueError, RecursionError):
        return None
    if not isinstance(values, list):
        return None
    for value in values:
        if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= 255:
            return None
    return bytes(values)


def decode_secret_key(secret_key_string: str) -> bytes:
    """
    Decode a wallet export into raw bytes.

    Base58 is tried first (wallet export tools), then a JSON array of
    integers (e.g. the contents of a ``id.json`` keypair file).
    Raises KeyFormatError when neither encoding matches.
    """
    logger.debug("Received secret key string length: %d", len(secret_key_string))

    decoded = _from_base58(secret_key_string)
    if decoded is not None:
        logger.debug("Decoded as base58. Decoded length: %d", len(decoded))
        return decoded

    logger.debug("Failed to decode as base58, attempting JSON parse.")
    decoded = _from_json_array(secret_key_string)
    if decoded is not None:
        logger.debug("Parsed as JSON. Array length: %d", len(decoded))
        return decoded

    logger.debug("Failed to parse as JSON.")
    raise KeyFormatError(
        "Invalid secret key format: neither base58 nor JSON-array encoding recognized."
    )


def normalize(secret_key_string: str) -> bytes:
    """
    Turn a trimmed secret key string into 64 bytes of key material.

    A 32-byte seed is right-padded with 32 zero bytes. The padding is a
    placeholder, not the derived public key.
    """
    secret_key = decode_secret_key(secret_key_string)

    if len(secret_key) not in (SEED_LENGTH, FULL_KEY_LENGTH):
        logger.debug("Unexpected secret key length: %d", len(secret_key))
        raise KeyLengthError(len(secret_key))

    if len(secret_key) == SEED_LENGTH:
        logger.debug("Expanding 32-byte key to 64 bytes")
        return secret_key + bytes(FULL_KEY_LENGTH - SEED_LENGTH)

    return secret_key


def keypair_from_secret_key(secret_key_string: str) -> Keypair:
    material = normalize(secret_key_string)
    seed, public_half = material[:SEED_LENGTH], material[SEED_LENGTH:]

    # zero-filled half means we were given a bare seed
    if public_half == bytes(FULL_KEY_LENGTH - SEED_LENGTH):
        return Keypair.from_seed(seed)
    try:
        return Keypair.from_bytes(material)
    except ValueError as e:
        raise KeyFormatError("Invalid secret key: the 64 bytes do not form a valid keypair.") from e
