import pytest

from pdascope.pubkey import (
    Pubkey,
    PubkeyError,
    b58decode,
    b58encode,
    create_program_address,
    find_program_address,
    is_on_curve,
)

SYSTEM_PLUS_ONE = "11111111111111111111111111111112"
WALLET = "9WzDXwBbmkg8ZTbNMqUxvQRAyrZzDsGYdLVL9zYtAWWM"
TOKEN_PROGRAM = "TokenkegQfeZyiNwAJbNbGKPFXCWuBvf9Ss623VQ5DA"


@pytest.mark.parametrize(
    "data",
    [b"", b"\x00", b"\x00\x00\xff", b"hello world", bytes(range(32))],
)
def test_base58_round_trip(data):
    assert b58decode(b58encode(data)) == data


def test_leading_zero_bytes_become_ones():
    encoded = b58encode(bytes(32))
    assert set(encoded) == {"1"}
    assert len(encoded) == 32


def test_decode_rejects_invalid_character():
    with pytest.raises(PubkeyError):
        b58decode("0OIl")


def test_pubkey_from_string_round_trip():
    key = Pubkey(TOKEN_PROGRAM)
    assert str(key) == TOKEN_PROGRAM
    assert len(bytes(key)) == 32
    assert Pubkey(bytes(key)) == key


def test_pubkey_bytes_of_small_key():
    assert bytes(Pubkey(SYSTEM_PLUS_ONE)) == bytes(31) + b"\x01"


def test_pubkey_rejects_wrong_size():
    with pytest.raises(PubkeyError):
        Pubkey("1111")
    with pytest.raises(PubkeyError):
        Pubkey(b"\x01" * 31)


def test_pubkey_rejects_overlong_string():
    with pytest.raises(PubkeyError):
        Pubkey("1" * 45)


def test_pubkey_equality_and_hash():
    a = Pubkey(WALLET)
    b = Pubkey(WALLET)
    assert a == b
    assert len({a, b, Pubkey(TOKEN_PROGRAM)}) == 2


def test_identity_and_basepoint_are_on_curve():
    identity = bytes([1]) + bytes(31)
    basepoint = bytes.fromhex("58" + "66" * 31)
    assert is_on_curve(identity)
    assert is_on_curve(basepoint)


def test_wrong_length_is_not_on_curve():
    assert is_on_curve(b"\x01" * 31) is False


def test_find_program_address_is_consistent():
    address, bump = find_program_address([b"state"], SYSTEM_PLUS_ONE)
    assert 1 <= bump <= 255
    assert not address.is_on_curve()
    assert create_program_address([b"state", bytes([bump])], SYSTEM_PLUS_ONE) == address


def test_find_program_address_is_deterministic():
    first = find_program_address([b"pool", Pubkey(WALLET)], TOKEN_PROGRAM)
    second = find_program_address([b"pool", bytes(Pubkey(WALLET))], TOKEN_PROGRAM)
    assert first == second


def test_different_seeds_give_different_addresses():
    a, _ = find_program_address([b"state"], SYSTEM_PLUS_ONE)
    b, _ = find_program_address([b"config"], SYSTEM_PLUS_ONE)
    assert a != b


def test_too_many_seeds_rejected():
    with pytest.raises(PubkeyError):
        find_program_address([b"x"] * 16, SYSTEM_PLUS_ONE)
    with pytest.raises(PubkeyError):
        create_program_address([b"x"] * 17, SYSTEM_PLUS_ONE)


def test_overlong_seed_rejected():
    with pytest.raises(PubkeyError):
        find_program_address([b"x" * 33], SYSTEM_PLUS_ONE)


def test_non_bytes_seed_rejected():
    with pytest.raises(TypeError):
        find_program_address([5], SYSTEM_PLUS_ONE)