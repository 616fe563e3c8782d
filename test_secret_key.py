# test_secret_key.py

import json
import os

import base58
import pytest
from solders.keypair import Keypair

from secret_key import (
    KeyFormatError,
    KeyLengthError,
    SecretKeyError,
    decode_secret_key,
    keypair_from_secret_key,
    normalize,
)


def b58(raw):
    return base58.b58encode(raw).decode("ascii")


def test_base58_full_key_is_returned_unchanged():
    raw = os.urandom(64)
    assert normalize(b58(raw)) == raw


def test_json_array_full_key_is_returned_unchanged():
    raw = os.urandom(64)
    assert normalize(json.dumps(list(raw))) == raw


def test_compact_json_array_is_accepted():
    raw = bytes(range(64))
    assert normalize("[" + ",".join(str(b) for b in raw) + "]") == raw


def test_seed_is_padded_with_zeros():
    seed = os.urandom(32)
    material = normalize(b58(seed))
    assert len(material) == 64
    assert material[:32] == seed
    assert material[32:] == bytes(32)


def test_json_seed_is_padded_with_zeros():
    seed = bytes(range(1, 33))
    material = normalize(json.dumps(list(seed)))
    assert material == seed + bytes(32)


def test_unrecognized_encoding():
    with pytest.raises(KeyFormatError):
        normalize("not base58 and not json")


@pytest.mark.parametrize("text", ["null", '{"key": [1, 2]}', "[1, 256]", "[1, -1]", '["1", "2"]', "[true, false]"])
def test_json_that_is_not_a_byte_array(text):
    with pytest.raises(KeyFormatError):
        normalize(text)


def test_wrong_length_base58():
    with pytest.raises(KeyLengthError) as excinfo:
        normalize(b58(os.urandom(10)))
    assert excinfo.value.length == 10
    assert "10 bytes" in str(excinfo.value)


def test_wrong_length_json():
    with pytest.raises(KeyLengthError) as excinfo:
        normalize("[1,2,3]")
    assert excinfo.value.length == 3


def test_empty_string_decodes_to_nothing():
    with pytest.raises(KeyLengthError) as excinfo:
        normalize("")
    assert excinfo.value.length == 0


def test_errors_share_a_base_class():
    assert issubclass(KeyFormatError, SecretKeyError)
    assert issubclass(KeyLengthError, SecretKeyError)
    assert issubclass(SecretKeyError, ValueError)


def test_renormalizing_a_full_key_is_idempotent():
    for raw in (os.urandom(64), os.urandom(32)):
        once = normalize(b58(raw))
        assert normalize(b58(once)) == once


def test_decode_returns_any_length():
    assert decode_secret_key("[1,2,3]") == b"\x01\x02\x03"


def test_keypair_from_full_key():
    keypair = Keypair()
    assert keypair_from_secret_key(b58(bytes(keypair))).pubkey() == keypair.pubkey()
    assert keypair_from_secret_key(json.dumps(list(bytes(keypair)))).pubkey() == keypair.pubkey()


def test_keypair_from_seed_derives_public_key():
    seed = os.urandom(32)
    expected = Keypair.from_seed(seed)
    assert keypair_from_secret_key(b58(seed)).pubkey() == expected.pubkey()


def test_keypair_from_bad_key():
    with pytest.raises(SecretKeyError):
        keypair_from_secret_key("[1,2,3]")


def test_keypair_from_mismatched_full_key():
    keypair, other = Keypair(), Keypair()
    mismatched = bytes(keypair)[:32] + bytes(other.pubkey())
    with pytest.raises(KeyFormatError):
        keypair_from_secret_key(b58(mismatched))


def test_keypair_from_random_full_key():
    with pytest.raises(SecretKeyError):
        keypair_from_secret_key(b58(os.urandom(64)))


def test_deeply_nested_json_is_a_format_error():
    with pytest.raises(KeyFormatError):
        normalize("[" * 100000 + "]" * 100000)
