import pytest

from pdascope import metaplex_examples as mx
from pdascope.pubkey import Pubkey, PubkeyError


@pytest.mark.parametrize(
    "program_id",
    [
        mx.METAPLEX_METADATA_PROGRAM_ID,
        mx.CANDY_MACHINE_PROGRAM_ID,
        mx.AUCTION_HOUSE_PROGRAM_ID,
    ],
)
def test_metaplex_program_ids(program_id):
    key = Pubkey(program_id)
    assert len(bytes(key)) == 32
    assert str(key) == program_id


def test_nft_metadata_seeds():
    seeds = mx.nft_metadata_seeds()
    assert len(seeds) == 3
    assert seeds[0] == b"metadata"
    assert len(seeds[1]) == 32
    assert len(seeds[2]) == 32


def test_nft_metadata_seed_contents():
    seeds = mx.nft_metadata_seeds()
    assert seeds[1] == bytes(Pubkey(mx.METAPLEX_METADATA_PROGRAM_ID))
    assert seeds[2] == bytes(Pubkey(mx.NFT_MINT))


def test_master_edition_seeds():
    seeds = mx.master_edition_seeds()
    assert len(seeds) == 4
    assert seeds[3] == b"edition"
    assert seeds[:3] == mx.nft_metadata_seeds()


def test_edition_account_seeds():
    seeds = mx.edition_account_seeds()
    assert len(seeds) == 5
    assert seeds[4] == b"\x01\x00\x00\x00\x00\x00\x00\x00"
    assert seeds[3] == b"edition"


def test_collection_mint_is_not_base58():
    with pytest.raises(PubkeyError):
        mx.collection_metadata_seeds()


def test_run_examples_output(capsys):
    mx.run_metaplex_examples()
    out = capsys.readouterr().out
    assert out.startswith("=== Metaplex NFT PDA Analysis Examples ===\n")
    assert "1. NFT Metadata Account" in out
    assert "7. Creator Verification" in out
    assert f"   PDA: {mx.METADATA_PDA}" in out
    assert f"   Program: {mx.AUCTION_HOUSE_PROGRAM_ID}" in out
    assert "   Expected seeds: ['candy_machine', candy_machine_id]" in out


def test_examples_catalogue_matches_output(capsys):
    mx.run_metaplex_examples()
    out = capsys.readouterr().out
    assert len(mx.EXAMPLES) == 7
    assert mx.EXAMPLES[2].name == "Edition Account"
    for number, example in enumerate(mx.EXAMPLES, start=1):
        assert f"{number}. {example.name}\n" in out