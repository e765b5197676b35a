import pytest

from pdascope import metaplex_examples, real_world_examples, spl_token_examples
from pdascope.runner import main


def test_main_returns_zero(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out.startswith("🚀 Solana PDA Analyzer - Example Analysis Runner")


def test_main_prints_all_sections_in_order(capsys):
    main([])
    out = capsys.readouterr().out
    spl = out.index("=== SPL Token PDA Analysis Examples ===")
    meta = out.index("=== Metaplex NFT PDA Analysis Examples ===")
    real = out.index("=== Real-World PDA Analysis Examples ===")
    assert spl < meta < real


def test_main_rules(capsys):
    main([])
    lines = capsys.readouterr().out.splitlines()
    assert lines.count("=" * 60) == 4


def test_main_includes_example_addresses(capsys):
    main([])
    out = capsys.readouterr().out
    assert spl_token_examples.ASSOCIATED_TOKEN_ACCOUNT in out
    assert metaplex_examples.METADATA_PDA in out
    assert real_world_examples.ESCROW_PDA in out


def test_main_summary(capsys):
    main([])
    out = capsys.readouterr().out
    assert "✅ All PDA analysis examples completed successfully!" in out
    assert out.rstrip().endswith("   • Escrow and Trading Accounts")


def test_main_rejects_unknown_argument(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["--bogus"])
    assert excinfo.value.code == 2