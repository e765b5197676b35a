"""Command that prints every catalogue of example addresses."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

from pdascope.metaplex_examples import run_metaplex_examples
from pdascope.real_world_examples import run_real_world_examples
from pdascope.spl_token_examples import run_spl_token_examples

_RULE = "=" * 60

_SUMMARY = [
    "Associated Token Accounts (most common)",
    "NFT Metadata and Master Editions",
    "DeFi Protocol Authorities and Vaults",
    "Governance and DAO Structures",
    "Oracle Price Feeds",
    "Escrow and Trading Accounts",
]


def main(argv: Sequence[str] | None = None) -> int:
    """Run the SPL token, Metaplex and real-world example listings."""
    parser = argparse.ArgumentParser(
        prog="pda-examples",
        description="Print example program-derived addresses and their seeds.",
    )
    parser.parse_args(argv)

    print("🚀 Solana PDA Analyzer - Example Analysis Runner\n")
    print(_RULE)

    sections = [
        ("📊 Running SPL Token Examples...", run_spl_token_examples),
        ("🎨 Running Metaplex NFT Examples...", run_metaplex_examples),
        ("🌍 Running Real-World Protocol Examples...", run_real_world_examples),
    ]
    for heading, run in sections:
        print(f"\n{heading}")
        run()
        print(f"\n{_RULE}")

    print("\n✅ All PDA analysis examples completed successfully!")
    print("\n💡 These examples demonstrate common PDA patterns found on Solana:")
    for item in _SUMMARY:
        print(f"   • {item}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())