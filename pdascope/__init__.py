"""Derive, catalogue and report on Solana program derived addresses."""

__version__ = "0.1.0"

__all__ = [
    "catalog",
    "display",
    "metaplex_examples",
    "pubkey",
    "real_world_examples",
    "runner",
    "spl_token_examples",
    "working_examples",
]