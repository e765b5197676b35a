"""Known addresses around the Metaplex NFT programs."""

from __future__ import annotations

from pdascope.catalog import PdaExample, print_examples
from pdascope.pubkey import Pubkey

METAPLEX_METADATA_PROGRAM_ID = "metaqbxxUerdq28cj1RbAWkYQm3ybzjb6a8bt518x1s"
CANDY_MACHINE_PROGRAM_ID = "CndyV3LdqHUfDLmE5naZjVN8rBZz4tqhdefbAnjHG3JR"
AUCTION_HOUSE_PROGRAM_ID = "hausS13jsjafwWwGqZTUQRmWyvyxn9EQpqMwV1PBBmk"

# NFT metadata
NFT_MINT = "7gXKKGLQs2HpzrPTtBP7kkQ3LktDShQPE8VV9PYW9RSh"
METADATA_PDA = "8HYrKZBRZk9CgGfVv5u3r5G4W3dP2Qe2Y7rZRzMhQKkx"

# Master edition
MASTER_EDITION_PDA = "9KYr8ZBRZk9CgGfVv5u3r5G4W3dP2Qe2Y7rZRzMhABcd"

# Print edition
MASTER_MINT = "7gXKKGLQs2HpzrPTtBP7kkQ3LktDShQPE8VV9PYW9RSh"
EDITION_NUMBER = 1
EDITION_PDA = "5hKr8ZBRZk9CgGfVv5u3r5G4W3dP2Qe2Y7rZRzMhEFgh"

# Candy machine config
CANDY_MACHINE_ID = "CandyMachine1111111111111111111111111111111"
CONFIG_PDA = "ConfigPDA1111111111111111111111111111111111"

# Collection metadata
COLLECTION_MINT = "Collection111111111111111111111111111111111"
COLLECTION_METADATA_PDA = "CollectionMeta11111111111111111111111111111"

# Auction house
TREASURY_MINT = "So11111111111111111111111111111111111111112"
AUCTION_AUTHORITY = "AuctionAuthority111111111111111111111111111"
AUCTION_HOUSE_PDA = "AuctionHouse111111111111111111111111111111"

# Creator verification
CREATOR_NFT_MINT = "CreatorNFT111111111111111111111111111111111"
CREATOR = "Creator1111111111111111111111111111111111"
VERIFICATION_PDA = "Verification11111111111111111111111111111"


def nft_metadata_seeds() -> list[bytes]:
    """Seeds of an NFT metadata account: "metadata", program, mint."""
    return [
        b"metadata",
        bytes(Pubkey(METAPLEX_METADATA_PROGRAM_ID)),
        bytes(Pubkey(NFT_MINT)),
    ]


def master_edition_seeds() -> list[bytes]:
    """Seeds of a master edition: "metadata", program, mint, "edition"."""
    return [
        b"metadata",
        bytes(Pubkey(METAPLEX_METADATA_PROGRAM_ID)),
        bytes(Pubkey(NFT_MINT)),
        b"edition",
    ]


def edition_account_seeds() -> list[bytes]:
    """Seeds of a print edition, ending with the 64-bit edition number."""
    return [
        b"metadata",
        bytes(Pubkey(METAPLEX_METADATA_PROGRAM_ID)),
        bytes(Pubkey(MASTER_MINT)),
        b"edition",
        EDITION_NUMBER.to_bytes(8, "little"),
    ]


def candy_machine_config_seeds() -> list[bytes]:
    """Seeds of a candy machine configuration account."""
    return [b"candy_machine", bytes(Pubkey(CANDY_MACHINE_ID))]


def collection_metadata_seeds() -> list[bytes]:
    """Seeds of a collection's metadata account."""
    return [
        b"metadata",
        bytes(Pubkey(METAPLEX_METADATA_PROGRAM_ID)),
        bytes(Pubkey(COLLECTION_MINT)),
    ]


def auction_house_seeds() -> list[bytes]:
    """Seeds of an auction house: "auction_house", authority, treasury mint."""
    return [
        b"auction_house",
        bytes(Pubkey(AUCTION_AUTHORITY)),
        bytes(Pubkey(TREASURY_MINT)),
    ]


def creator_verification_seeds() -> list[bytes]:
    """Seeds of a creator verification record."""
    return [
        b"creator",
        bytes(Pubkey(CREATOR_NFT_MINT)),
        bytes(Pubkey(CREATOR)),
    ]


EXAMPLES = [
    PdaExample(
        name="NFT Metadata Account",
        pda=METADATA_PDA,
        program=METAPLEX_METADATA_PROGRAM_ID,
        description=(
            "NFT Metadata Account - stores name, symbol, URI, and other "
            "metadata for an NFT"
        ),
        expected_seeds="['metadata', program_id, mint]",
    ),
    PdaExample(
        name="Master Edition Account",
        pda=MASTER_EDITION_PDA,
        program=METAPLEX_METADATA_PROGRAM_ID,
        description=(
            "Master Edition Account - controls printing and edition "
            "information for NFTs"
        ),
        expected_seeds="['metadata', program_id, mint, 'edition']",
    ),
    PdaExample(
        name="Edition Account",
        pda=EDITION_PDA,
        program=METAPLEX_METADATA_PROGRAM_ID,
        description="Edition Account - represents a numbered print edition of an NFT",
        expected_seeds=(
            "['metadata', program_id, master_mint, 'edition', edition_number]"
        ),
    ),
    PdaExample(
        name="Candy Machine Config",
        pda=CONFIG_PDA,
        program=CANDY_MACHINE_PROGRAM_ID,
        description=(
            "Candy Machine Config - stores configuration for NFT minting "
            "via candy machine"
        ),
        expected_seeds="['candy_machine', candy_machine_id]",
    ),
    PdaExample(
        name="Collection Metadata",
        pda=COLLECTION_METADATA_PDA,
        program=METAPLEX_METADATA_PROGRAM_ID,
        description="Collection Metadata - stores metadata for an NFT collection",
        expected_seeds="['metadata', program_id, collection_mint]",
    ),
    PdaExample(
        name="Auction House Account",
        pda=AUCTION_HOUSE_PDA,
        program=AUCTION_HOUSE_PROGRAM_ID,
        description="Auction House Account - manages NFT marketplace and trading",
        expected_seeds="['auction_house', authority, treasury_mint]",
    ),
    PdaExample(
        name="Creator Verification",
        pda=VERIFICATION_PDA,
        program=METAPLEX_METADATA_PROGRAM_ID,
        description=(
            "Creator Verification - verifies creator signatures on NFT metadata"
        ),
        expected_seeds="['creator', nft_mint, creator_pubkey]",
    ),
]


def run_metaplex_examples() -> None:
    """Print every Metaplex example."""
    print_examples("Metaplex NFT PDA Analysis Examples", EXAMPLES)