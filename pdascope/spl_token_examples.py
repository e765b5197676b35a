"""Known addresses around the SPL token programs."""

from __future__ import annotations

from pdascope.catalog import PdaExample, print_examples
from pdascope.pubkey import Pubkey

SPL_TOKEN_PROGRAM_ID = "TokenkegQfeZyiNwAJbNbGKPFXCWuBvf9Ss623VQ5DA"
SPL_ASSOCIATED_TOKEN_PROGRAM_ID = "ATokenGPvbdGVxr1b2hvZbsiqW5xWH25efTNsLJA8knL"

# Associated token account
WALLET_ADDRESS = "9WzDXwBbmkg8ZTbNMqUxvQRAyrZzDsGYdLVL9zYtAWWM"
USDC_MINT = "EPjFWdd5AufqSSqeM2qN1xzybapC8G4wEGGkZwyTDt1v"
ASSOCIATED_TOKEN_ACCOUNT = "Gh9ZwEmdLJ8DscKNTkTqPbNwLNNBjuSzaG9Vp2KGtKJr"

# Mint authority
MINT_AUTHORITY_PDA = "58oQChx4yWmvKdwLLZzBi4ChoCc2fqCUWBkwMihLYQo2"
MINT_AUTHORITY_PROGRAM_ID = "9xQeWvG816bUx9EPjHmaT23yvVM2ZWbrrpZb9PusVFin"

# Vault token account
VAULT_TOKEN_ACCOUNT = "5uqmGfGZy9xhMhPNfJbf9J6dj8KvQFSgQZCf7sQZ6T8k"
VAULT_PROGRAM = "VaultProgram1111111111111111111111111111111"

# Token metadata
METADATA_PROGRAM_ID = "metaqbxxUerdq28cj1RbAWkYQm3ybzjb6a8bt518x1s"
METADATA_PDA = "11111111111111111111111111111112"
TOKEN_MINT = "So11111111111111111111111111111111111111112"

# Authority token account
AUTHORITY_TOKEN_ACCOUNT = "TokenAccount1111111111111111111111111111111"
AUTHORITY_PROGRAM_ID = "Program111111111111111111111111111111111111"
AUTHORITY = "Authority111111111111111111111111111111111"


def associated_token_account_seeds() -> list[bytes]:
    """Seeds of an associated token account: wallet, token program, mint."""
    return [
        bytes(Pubkey(WALLET_ADDRESS)),
        bytes(Pubkey(SPL_TOKEN_PROGRAM_ID)),
        bytes(Pubkey(USDC_MINT)),
    ]


def mint_authority_seeds() -> list[bytes]:
    """Seeds of a program-controlled mint authority."""
    return [b"mint_authority"]


def vault_token_account_seeds() -> list[bytes]:
    """Seeds of a vault holding tokens for a protocol."""
    return [b"vault", b"1"]


def token_metadata_seeds() -> list[bytes]:
    """Seeds of a token's metadata account."""
    return [
        b"metadata",
        bytes(Pubkey(METADATA_PROGRAM_ID)),
        bytes(Pubkey(TOKEN_MINT)),
    ]


def authority_token_account_seeds() -> list[bytes]:
    """Seeds of a token account tied to an authority."""
    return [b"token_account", bytes(Pubkey(AUTHORITY))]


EXAMPLES = [
    PdaExample(
        name="Associated Token Account Example",
        pda=ASSOCIATED_TOKEN_ACCOUNT,
        program=SPL_ASSOCIATED_TOKEN_PROGRAM_ID,
        description=(
            "Associated Token Account - stores tokens for a specific mint "
            "owned by a wallet"
        ),
        expected_seeds="wallet + token_program + mint",
    ),
    PdaExample(
        name="Mint Authority Example",
        pda=MINT_AUTHORITY_PDA,
        program=MINT_AUTHORITY_PROGRAM_ID,
        description="Mint Authority PDA - used as authority for controlled token minting",
        expected_seeds="['mint_authority', ...]",
    ),
    PdaExample(
        name="Vault Token Account Example",
        pda=VAULT_TOKEN_ACCOUNT,
        program=VAULT_PROGRAM,
        description="Vault Token Account - holds tokens in escrow for a DeFi protocol",
        expected_seeds="['vault', vault_id, mint]",
    ),
    PdaExample(
        name="Token Metadata Example",
        pda=METADATA_PDA,
        program=METADATA_PROGRAM_ID,
        description="Token Metadata PDA - stores metadata information for SPL tokens",
        expected_seeds="['metadata', program_id, mint]",
    ),
    PdaExample(
        name="Authority Token Account Example",
        pda=AUTHORITY_TOKEN_ACCOUNT,
        program=AUTHORITY_PROGRAM_ID,
        description="Authority Token Account - token account with specific authority",
        expected_seeds="['token_account', authority, mint]",
    ),
]


def run_spl_token_examples() -> None:
    """Print every SPL token example."""
    print_examples("SPL Token PDA Analysis Examples", EXAMPLES)