"""Known addresses from production DeFi, naming and governance programs."""

from __future__ import annotations

import hashlib

from pdascope.catalog import PdaExample, print_examples
from pdascope.pubkey import Pubkey

SERUM_DEX_PROGRAM_ID = "9xQeWvG816bUx9EPjHmaT23yvVM2ZWbrrpZb9PusVFin"
RAYDIUM_AMM_PROGRAM_ID = "675kPX9MHTjS2zt1qfr1NYHuzeLXfQM9H24wFSUt1Mp8"
NAME_SERVICE_PROGRAM_ID = "namesLPneVptA9Z5rqUDD9tMTWEJwofgaYwp8cawRkX"
MARINADE_PROGRAM_ID = "MarBmsSgKXdrN1egZf5sqe1TMai9K1rChYNDJgjq7aD"

# Serum market authority (SOL/USDC market)
MARKET_ADDRESS = "9wFFyRfZBsuAha4YcuxcXLKwMxJR43S7fPfQLusDBzvT"
MARKET_AUTHORITY_PDA = "5Q544fKrFoe6tsEbD7S8EmxGTJYAKtTVhAW5Q5pge4j1"
VAULT_SIGNER_NONCE = 0

# Raydium pool authority
POOL_ADDRESS = "6UmmUiYoBjSrhakAobJw8BvkmJtDVxaeBtbt7rxWo1mg"
POOL_AUTHORITY_PDA = "5Q544fKrFoe6tsEbD7S8EmxGTJYAKtTVhAW5Q5pge4j1"
POOL_AUTHORITY_BUMP = 255

# Name service record ("solana.sol")
DOMAIN_NAME = "solana"
NAME_RECORD_PDA = "Crf8hzfthWGbGbLTVCiqRqV5MVnbpHB1L9KQMd6gsinb"
SOL_TLD_CLASS_HASH = bytes(
    [
        0x7B, 0x4C, 0x8F, 0x6A, 0xE6, 0x1E, 0x6B, 0x7E,
        0x8A, 0x9D, 0x6C, 0x7F, 0x1A, 0x0B, 0x4C, 0x5D,
        0x2E, 0x8F, 0x9A, 0x6B, 0x3C, 0x7D, 0x8E, 0x1F,
        0x0A, 0x5B, 0x9C, 0x2D, 0x7E, 0x4F, 0x6A, 0x8B,
    ]
)

# Marinade state
MARINADE_STATE_PDA = "8szGkuLTAux9XMgZ2vtY39jVSowEcpBfFfD8hXSEqdGC"

# Validator record
VALIDATOR_VOTE_ACCOUNT = "7Np41oeYqPefeNQEHSv1UDhYrehxin3NStELsSKCT4K2"
VALIDATOR_RECORD_PDA = "ValidatorRecord1111111111111111111111111111"

# Governance proposal
GOVERNANCE_PROGRAM_ID = "GovER5Lthms3bLBqWub97yVrMmEogzX7xNjdXpPPCVZw"
REALM = "DPiH3H3c7t47BMxqTxLsuPQpEC6Kne8GA9VXbxpnZxFE"
PROPOSAL_ID = 1
PROPOSAL_PDA = "ProposalPDA1111111111111111111111111111111"

# Oracle price feed
ORACLE_PROGRAM_ID = "orac1e1111111111111111111111111111111111111"
FEED_NAME = "SOL/USD"
PRICE_FEED_PDA = "PriceFeedPDA111111111111111111111111111111"

# Escrow account
ESCROW_PROGRAM_ID = "EscrowProgram111111111111111111111111111111"
TRADER_A = "TraderA1111111111111111111111111111111111"
TRADER_B = "TraderB1111111111111111111111111111111111"
ESCROW_PDA = "EscrowPDA111111111111111111111111111111111"
ESCROW_TIMESTAMP = 1640995200


def serum_market_authority_seeds() -> list[bytes]:
    """Seeds of a Serum market authority: market, 64-bit signer nonce."""
    return [
        bytes(Pubkey(MARKET_ADDRESS)),
        VAULT_SIGNER_NONCE.to_bytes(8, "little"),
    ]


def raydium_pool_authority_seeds() -> list[bytes]:
    """Seeds of a Raydium pool authority: pool, one-byte bump."""
    return [bytes(Pubkey(POOL_ADDRESS)), bytes([POOL_AUTHORITY_BUMP])]


def name_service_record_seeds() -> list[bytes]:
    """Seeds of a name record: hash of the domain, TLD class hash."""
    domain_hash = hashlib.sha256(DOMAIN_NAME.encode()).digest()
    return [domain_hash, SOL_TLD_CLASS_HASH]


def marinade_state_seeds() -> list[bytes]:
    """Seeds of the Marinade global state account."""
    return [b"state"]


def validator_record_seeds() -> list[bytes]:
    """Seeds of a validator record: "validator", vote account."""
    return [b"validator", bytes(Pubkey(VALIDATOR_VOTE_ACCOUNT))]


def governance_proposal_seeds() -> list[bytes]:
    """Seeds of a governance proposal, ending with its 32-bit id."""
    return [
        b"governance",
        bytes(Pubkey(REALM)),
        b"proposal",
        PROPOSAL_ID.to_bytes(4, "little"),
    ]


def oracle_price_feed_seeds() -> list[bytes]:
    """Seeds of an oracle price feed: "price_feed", hash of the feed name."""
    return [b"price_feed", hashlib.sha256(FEED_NAME.encode()).digest()]


def escrow_account_seeds() -> list[bytes]:
    """Seeds of an escrow: "escrow", both traders, 64-bit timestamp."""
    return [
        b"escrow",
        bytes(Pubkey(TRADER_A)),
        bytes(Pubkey(TRADER_B)),
        ESCROW_TIMESTAMP.to_bytes(8, "little"),
    ]


EXAMPLES = [
    PdaExample(
        name="Serum Market Authority",
        pda=MARKET_AUTHORITY_PDA,
        program=SERUM_DEX_PROGRAM_ID,
        description=(
            "Serum Market Authority - controls token vaults for a trading market"
        ),
        expected_seeds="[market_address, nonce]",
    ),
    PdaExample(
        name="Raydium Pool Authority",
        pda=POOL_AUTHORITY_PDA,
        program=RAYDIUM_AMM_PROGRAM_ID,
        description="Raydium Pool Authority - manages AMM pool operations",
        expected_seeds="[pool_address, bump]",
    ),
    PdaExample(
        name="Solana Name Service Record",
        pda=NAME_RECORD_PDA,
        program=NAME_SERVICE_PROGRAM_ID,
        description="Solana Name Service Record - stores .sol domain information",
        expected_seeds="[domain_hash, class_hash]",
    ),
    PdaExample(
        name="Marinade State Account",
        pda=MARINADE_STATE_PDA,
        program=MARINADE_PROGRAM_ID,
        description=(
            "Marinade State Account - manages liquid staking protocol state"
        ),
        expected_seeds="['state']",
    ),
    PdaExample(
        name="Validator Record",
        pda=VALIDATOR_RECORD_PDA,
        description="Validator Record - stores validator information for staking",
        expected_seeds="['validator', vote_account]",
    ),
    PdaExample(
        name="Governance Proposal",
        pda=PROPOSAL_PDA,
        program=GOVERNANCE_PROGRAM_ID,
        description="Governance Proposal - stores proposal data for DAO voting",
        expected_seeds="['governance', realm, 'proposal', id]",
    ),
    PdaExample(
        name="Oracle Price Feed",
        pda=PRICE_FEED_PDA,
        program=ORACLE_PROGRAM_ID,
        description="Oracle Price Feed - stores price data for trading pairs",
        expected_seeds="['price_feed', feed_hash]",
    ),
    PdaExample(
        name="Escrow Account",
        pda=ESCROW_PDA,
        program=ESCROW_PROGRAM_ID,
        description="Escrow Account - holds tokens during peer-to-peer trades",
        expected_seeds="['escrow', trader_a, trader_b, timestamp]",
    ),
]


def run_real_world_examples() -> None:
    """Print every real-world example."""
    print_examples("Real-World PDA Analysis Examples", EXAMPLES)