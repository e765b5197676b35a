import pytest

from pdascope.pubkey import Pubkey, PubkeyError, find_program_address
from pdascope.working_examples import (
    create_ata_example,
    create_authority_pda_example,
    create_authority_pubkey_pda_example,
    create_config_pda_example,
    create_governance_pda_example,
    create_metaplex_metadata_example,
    create_sequential_pda_example,
    create_state_pda_example,
    run_working_examples,
)

TEST_PROGRAM = "11111111111111111111111111111112"
WALLET = "9WzDXwBbmkg8ZTbNMqUxvQRAyrZzDsGYdLVL9zYtAWWM"
MINT = "EPjFWdd5AufqSSqeM2qN1xzybapC8G4wEGGkZwyTDt1v"
REALM = "DPiH3H3c7t47BMxqTxLsuPQpEC6Kne8GA9VXbxpnZxFE"


def test_state_pda_creation():
    pda, prog = create_state_pda_example(TEST_PROGRAM)
    assert prog == TEST_PROGRAM
    assert pda


def test_ata_creation():
    pda, prog = create_ata_example(WALLET, MINT)
    assert prog == "ATokenGPvbdGVxr1b2hvZbsiqW5xWH25efTNsLJA8knL"
    assert pda


def test_metaplex_creation():
    pda, prog = create_metaplex_metadata_example(MINT)
    assert prog == "metaqbxxUerdq28cj1RbAWkYQm3ybzjb6a8bt518x1s"
    assert pda


def test_state_pda_matches_direct_derivation():
    pda, _ = create_state_pda_example(TEST_PROGRAM)
    expected, _ = find_program_address([b"state"], TEST_PROGRAM)
    assert pda == str(expected)
    assert not Pubkey(pda).is_on_curve()


def test_singletons_differ():
    state, _ = create_state_pda_example(TEST_PROGRAM)
    config, _ = create_config_pda_example(TEST_PROGRAM)
    authority, _ = create_authority_pda_example(TEST_PROGRAM)
    assert len({state, config, authority}) == 3


def test_sequential_depends_on_index():
    five, _ = create_sequential_pda_example(TEST_PROGRAM, 5)
    six, _ = create_sequential_pda_example(TEST_PROGRAM, 6)
    expected, _ = find_program_address(
        [b"pool", (5).to_bytes(8, "little")], TEST_PROGRAM
    )
    assert five == str(expected)
    assert five != six


def test_sequential_rejects_negative_index():
    with pytest.raises(OverflowError):
        create_sequential_pda_example(TEST_PROGRAM, -1)


def test_authority_pubkey_example_uses_authority_key():
    pda, prog = create_authority_pubkey_pda_example(TEST_PROGRAM, WALLET)
    expected, _ = find_program_address([b"authority", Pubkey(WALLET)], TEST_PROGRAM)
    assert prog == TEST_PROGRAM
    assert pda == str(expected)


def test_governance_example_matches_seeds():
    pda, _ = create_governance_pda_example(TEST_PROGRAM, REALM, 1)
    expected, _ = find_program_address(
        [b"governance", Pubkey(REALM), b"proposal", (1).to_bytes(4, "little")],
        TEST_PROGRAM,
    )
    assert pda == str(expected)


def test_invalid_program_id_raises():
    with pytest.raises(PubkeyError):
        create_state_pda_example("not-a-key")


def test_run_working_examples_prints_all(capsys):
    run_working_examples()
    out = capsys.readouterr().out
    assert out.count("   PDA: ") == 8
    assert "Expected Pattern: WALLET_TOKEN_MINT" in out
    ata, _ = create_ata_example(WALLET, MINT)
    assert ata in out