"""Examples that derive real program-derived addresses."""

from __future__ import annotations

from pdascope.pubkey import Pubkey, find_program_address

TOKEN_PROGRAM_ID = "TokenkegQfeZyiNwAJbNbGKPFXCWuBvf9Ss623VQ5DA"
ASSOCIATED_TOKEN_PROGRAM_ID = "ATokenGPvbdGVxr1b2hvZbsiqW5xWH25efTNsLJA8knL"
METADATA_PROGRAM_ID = "metaqbxxUerdq28cj1RbAWkYQm3ybzjb6a8bt518x1s"

TEST_PROGRAM = "11111111111111111111111111111112"
TEST_WALLET = "9WzDXwBbmkg8ZTbNMqUxvQRAyrZzDsGYdLVL9zYtAWWM"
TEST_MINT = "EPjFWdd5AufqSSqeM2qN1xzybapC8G4wEGGkZwyTDt1v"
TEST_REALM = "DPiH3H3c7t47BMxqTxLsuPQpEC6Kne8GA9VXbxpnZxFE"


def _derive(seeds: list[bytes], program_id: str) -> str:
    address, _bump = find_program_address(seeds, Pubkey(program_id))
    return str(address)


def create_state_pda_example(program_id: str) -> tuple[str, str]:
    """Derive the "state" singleton address for a program."""
    return _derive([b"state"], program_id), program_id


def create_config_pda_example(program_id: str) -> tuple[str, str]:
    """Derive the "config" singleton address for a program."""
    return _derive([b"config"], program_id), program_id


def create_authority_pda_example(program_id: str) -> tuple[str, str]:
    """Derive the "authority" singleton address for a program."""
    return _derive([b"authority"], program_id), program_id


def create_sequential_pda_example(program_id: str, index: int) -> tuple[str, str]:
    """Derive a pool address numbered by a 64-bit little-endian index."""
    seeds = [b"pool", index.to_bytes(8, "little")]
    return _derive(seeds, program_id), program_id


def create_authority_pubkey_pda_example(
    program_id: str, authority: str
) -> tuple[str, str]:
    """Derive an address from "authority" and an authority key."""
    seeds = [b"authority", bytes(Pubkey(authority))]
    return _derive(seeds, program_id), program_id


def create_governance_pda_example(
    program_id: str, realm: str, proposal_id: int
) -> tuple[str, str]:
    """Derive a governance proposal address for a realm and 32-bit id."""
    seeds = [
        b"governance",
        bytes(Pubkey(realm)),
        b"proposal",
        proposal_id.to_bytes(4, "little"),
    ]
    return _derive(seeds, program_id), program_id


def create_ata_example(wallet: str, mint: str) -> tuple[str, str]:
    """Derive the associated token account for a wallet and mint."""
    seeds = [
        bytes(Pubkey(wallet)),
        bytes(Pubkey(TOKEN_PROGRAM_ID)),
        bytes(Pubkey(mint)),
    ]
    ata_program = Pubkey(ASSOCIATED_TOKEN_PROGRAM_ID)
    return _derive(seeds, str(ata_program)), str(ata_program)


def create_metaplex_metadata_example(mint: str) -> tuple[str, str]:
    """Derive the metadata account of a mint."""
    mint_key = Pubkey(mint)
    metadata_program = Pubkey(METADATA_PROGRAM_ID)
    seeds = [b"metadata", bytes(metadata_program), bytes(mint_key)]
    return _derive(seeds, str(metadata_program)), str(metadata_program)


def run_working_examples() -> None:
    """Derive and print every working example."""
    print("🚀 Running Working PDA Examples")
    print("===============================")

    examples = [
        ("📊 Example 1: State PDA",
         create_state_pda_example(TEST_PROGRAM), "STRING_SINGLETON"),
        ("🔧 Example 2: Config PDA",
         create_config_pda_example(TEST_PROGRAM), "STRING_SINGLETON"),
        ("👑 Example 3: Authority PDA",
         create_authority_pda_example(TEST_PROGRAM), "STRING_SINGLETON"),
        ("🔢 Example 4: Sequential PDA (Pool #5)",
         create_sequential_pda_example(TEST_PROGRAM, 5), "SEQUENTIAL"),
        ("🔐 Example 5: Authority + Pubkey PDA",
         create_authority_pubkey_pda_example(TEST_PROGRAM, TEST_WALLET),
         "STRING_PUBKEY"),
        ("🏛️  Example 6: Governance Proposal PDA",
         create_governance_pda_example(TEST_PROGRAM, TEST_REALM, 1), "COMPLEX"),
        ("💰 Example 7: Associated Token Account",
         create_ata_example(TEST_WALLET, TEST_MINT), "WALLET_TOKEN_MINT"),
        ("🎨 Example 8: Metaplex Metadata",
         create_metaplex_metadata_example(TEST_MINT), "STRING_PROGRAM_MINT"),
    ]
    for heading, (pda, program), pattern in examples:
        print(f"\n{heading}")
        print(f"   PDA: {pda}")
        print(f"   Program: {program}")
        print(f"   Expected Pattern: {pattern}")

    print("\n✅ All working examples generated!")
    print("\n💡 To test these, run:")
    print("   pda-analyzer analyze --address <PDA> --program-id <PROGRAM>")