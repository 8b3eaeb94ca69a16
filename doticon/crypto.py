from nacl.encoding import RawEncoder
from nacl.hash import blake2b
from nacl.public import PublicKey
from nacl.signing import VerifyKey

DIGEST_SIZE = 64
ZERO_SEED = bytes(32)


# -------------------------
# --- Hashing -------------
# -------------------------
def blake2b_512(data: bytes) -> bytes:
    """Plain BLAKE2b with a 64-byte digest (no key, salt or personalisation)."""
    return blake2b(bytes(data), digest_size=DIGEST_SIZE, encoder=RawEncoder)


# Digest of the 32-byte zero buffer, subtracted from every seed digest
ZERO_DIGEST = blake2b_512(ZERO_SEED)


def build_id(seed_digest: bytes, zero_digest: bytes = ZERO_DIGEST) -> bytes:
    """Subtract `zero_digest` from `seed_digest` byte by byte, wrapping mod 256."""
    if len(seed_digest) != DIGEST_SIZE or len(zero_digest) != DIGEST_SIZE:
        raise ValueError(f"Digests must be {DIGEST_SIZE} bytes long.")
    return bytes((s - z) % 256 for s, z in zip(seed_digest, zero_digest))


def id_vector(seed) -> bytes:
    return build_id(blake2b_512(seed_bytes(seed)), blake2b_512(ZERO_SEED))


# -------------------------
# --- Seeds ---------------
# -------------------------
def seed_bytes(seed) -> bytes:
    """Normalise a seed: text is UTF-8 encoded, bytes-like values pass through."""
    if isinstance(seed, str):
        return seed.encode("utf-8")
    if isinstance(seed, (bytes, bytearray, memoryview)):
        return bytes(seed)
    raise TypeError(f"Unsupported seed type: {type(seed).__name__}")


def public_key_seed(key) -> bytes:
    """Return the raw public key bytes used as an identicon seed.

    Accepts PyNaCl `PublicKey`/`VerifyKey` objects, raw bytes or a hex
    string (an optional ``0x`` prefix is stripped).
    """
    if isinstance(key, (PublicKey, VerifyKey)):
        return key.encode()
    if isinstance(key, str):
        text = key.strip().lower()
        if text.startswith("0x"):
            text = text[2:]
        try:
            return bytes.fromhex(text)
        except ValueError:
            raise ValueError(f"Invalid hex public key: {key!r}")
    return seed_bytes(key)
