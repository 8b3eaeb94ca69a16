import pytest
from nacl.public import PublicKey
from nacl.signing import VerifyKey

from doticon.crypto import (
    ZERO_DIGEST,
    ZERO_SEED,
    blake2b_512,
    build_id,
    id_vector,
    public_key_seed,
    seed_bytes,
)

ALICE_HEX = "d43593c715fdd31c61141abd04a99fd6822c8558854ccde39a5684e7a56da27d"

EMPTY_DIGEST = (
    "786a02f742015903c6c6fd852552d272912f4740e15847618a86e217f71f5419"
    "d25e1031afee585313896444934eb04b903a685b1448b755d56f701afe9be2ce"
)
ZERO_DIGEST_HEX = (
    "9ab7a73a97a1a3031406b6c169634a9c06cfb81dec3323bb4de5ce6f4b7ca107"
    "de534442a7eaeafbaf366ccfdde1cb97d7c884e4344cd0a23039de71a56d630a"
)


def test_blake2b_512_empty_input():
    assert blake2b_512(b"").hex() == EMPTY_DIGEST


def test_blake2b_512_known_prefixes():
    assert blake2b_512(b"abc").hex().startswith("ba80a53f981c4d0d6a2797b69f12f6e94c212f14")
    assert blake2b_512(bytes.fromhex(ALICE_HEX)).hex().startswith("6ec3412cbbcf7b2874f11f311a955436")


def test_zero_digest_constant():
    assert len(ZERO_SEED) == 32
    assert ZERO_DIGEST.hex() == ZERO_DIGEST_HEX
    assert blake2b_512(ZERO_SEED) == ZERO_DIGEST


def test_build_id_wraps_instead_of_clamping():
    assert build_id(bytes(64), bytes([1] * 64)) == bytes([255] * 64)
    assert build_id(bytes([5] * 64), bytes([250] * 64)) == bytes([11] * 64)
    assert build_id(bytes(range(64)), bytes(64)) == bytes(range(64))


def test_build_id_rejects_short_digests():
    with pytest.raises(ValueError):
        build_id(bytes(32), ZERO_DIGEST)


def test_zero_seed_gives_zero_id():
    assert id_vector(ZERO_SEED) == bytes(64)


def test_seed_bytes_normalisation():
    assert seed_bytes("abc") == b"abc"
    assert seed_bytes("ü") == "ü".encode("utf-8")
    assert seed_bytes(bytearray(b"\x00\x01")) == b"\x00\x01"
    assert seed_bytes(memoryview(b"xy")) == b"xy"
    with pytest.raises(TypeError):
        seed_bytes(42)


def test_public_key_seed_accepts_keys_and_hex():
    raw = bytes.fromhex(ALICE_HEX)
    assert public_key_seed(ALICE_HEX) == raw
    assert public_key_seed("0x" + ALICE_HEX.upper()) == raw
    assert public_key_seed(raw) == raw
    assert public_key_seed(PublicKey(raw)) == raw
    assert public_key_seed(VerifyKey(raw)) == raw


def test_public_key_seed_rejects_bad_hex():
    with pytest.raises(ValueError):
        public_key_seed("not-a-key")
