"""Base58 public keys and program-derived address derivation."""

from __future__ import annotations

import hashlib
from collections.abc import Iterable

ALPHABET = "123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"
_INDEX = {char: value for value, char in enumerate(ALPHABET)}

PUBKEY_BYTES = 32
MAX_BASE58_LEN = 44
MAX_SEEDS = 16
MAX_SEED_LEN = 32
PDA_MARKER = b"ProgramDerivedAddress"

_P = 2**255 - 19
_D = (-121665 * pow(121666, -1, _P)) % _P


class PubkeyError(ValueError):
    """Raised for malformed keys or seeds that cannot yield an address."""


def b58encode(data: bytes) -> str:
    """Encode bytes as a base58 string, keeping leading zero bytes as '1'."""
    raw = bytes(data)
    stripped = raw.lstrip(b"\0")
    zeros = len(raw) - len(stripped)
    number = int.from_bytes(stripped, "big")
    digits = []
    while number:
        number, remainder = divmod(number, 58)
        digits.append(ALPHABET[remainder])
    return "1" * zeros + "".join(reversed(digits))


def b58decode(text: str) -> bytes:
    """Decode a base58 string into bytes."""
    number = 0
    for char in text:
        try:
            number = number * 58 + _INDEX[char]
        except KeyError:
            raise PubkeyError(f"invalid base58 character {char!r}") from None
    zeros = len(text) - len(text.lstrip("1"))
    body = number.to_bytes((number.bit_length() + 7) // 8, "big")
    return b"\0" * zeros + body


def is_on_curve(data: bytes) -> bool:
    """Tell whether 32 bytes decompress to a point on the ed25519 curve."""
    raw = bytes(data)
    if len(raw) != PUBKEY_BYTES:
        return False
    y = (int.from_bytes(raw, "little") & ((1 << 255) - 1)) % _P
    y2 = y * y % _P
    u = (y2 - 1) % _P
    v = (_D * y2 + 1) % _P
    if u == 0:
        return True
    ratio = u * pow(v, -1, _P) % _P
    return pow(ratio, (_P - 1) // 2, _P) == 1


class Pubkey:
    """A 32-byte public key, built from base58 text or raw bytes."""

    __slots__ = ("_bytes",)

    def __init__(self, value: "str | bytes | bytearray | Pubkey") -> None:
        if isinstance(value, Pubkey):
            raw = value._bytes
        elif isinstance(value, str):
            if len(value) > MAX_BASE58_LEN:
                raise PubkeyError(f"string too long for a public key: {value!r}")
            raw = b58decode(value)
        elif isinstance(value, (bytes, bytearray, memoryview)):
            raw = bytes(value)
        else:
            raise TypeError(f"cannot build a public key from {type(value).__name__}")
        if len(raw) != PUBKEY_BYTES:
            raise PubkeyError(
                f"public key must be {PUBKEY_BYTES} bytes, got {len(raw)}"
            )
        self._bytes = raw

    def __bytes__(self) -> bytes:
        return self._bytes

    def __str__(self) -> str:
        return b58encode(self._bytes)

    def __repr__(self) -> str:
        return f"Pubkey({str(self)!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Pubkey):
            return self._bytes == other._bytes
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._bytes)

    def is_on_curve(self) -> bool:
        """Tell whether this key is a valid ed25519 point."""
        return is_on_curve(self._bytes)


def _seed_bytes(seed: "bytes | bytearray | Pubkey") -> bytes:
    if isinstance(seed, Pubkey):
        return bytes(seed)
    if isinstance(seed, (bytes, bytearray, memoryview)):
        return bytes(seed)
    raise TypeError(f"seed must be bytes or a Pubkey, not {type(seed).__name__}")


def _check_seeds(seeds: list[bytes], extra: int = 0) -> None:
    if len(seeds) + extra > MAX_SEEDS:
        raise PubkeyError(f"at most {MAX_SEEDS} seeds are allowed")
    for seed in seeds:
        if len(seed) > MAX_SEED_LEN:
            raise PubkeyError(f"seed longer than {MAX_SEED_LEN} bytes")


def _hash_address(seeds: list[bytes], program_id: Pubkey) -> bytes:
    digest = hashlib.sha256()
    for seed in seeds:
        digest.update(seed)
    digest.update(bytes(program_id))
    digest.update(PDA_MARKER)
    return digest.digest()


def create_program_address(
    seeds: Iterable["bytes | Pubkey"], program_id: "Pubkey | str"
) -> Pubkey:
    """Derive the address for exactly these seeds; it must lie off the curve."""
    seed_list = [_seed_bytes(seed) for seed in seeds]
    program = Pubkey(program_id)
    _check_seeds(seed_list)
    candidate = _hash_address(seed_list, program)
    if is_on_curve(candidate):
        raise PubkeyError("invalid seeds, address must fall off the curve")
    return Pubkey(candidate)


def find_program_address(
    seeds: Iterable["bytes | Pubkey"], program_id: "Pubkey | str"
) -> tuple[Pubkey, int]:
    """Find the first off-curve address, trying bump seeds from 255 down."""
    seed_list = [_seed_bytes(seed) for seed in seeds]
    program = Pubkey(program_id)
    _check_seeds(seed_list, extra=1)
    for bump in range(255, 0, -1):
        candidate = _hash_address([*seed_list, bytes([bump])], program)
        if not is_on_curve(candidate):
            return Pubkey(candidate), bump
    raise PubkeyError("unable to find a viable program address bump seed")