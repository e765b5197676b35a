"""Formatted report of program-derived address analysis results."""

from __future__ import annotations

import argparse
import math
import sys
from collections.abc import Sequence
from dataclasses import dataclass, field

_WIDE = "═" * 80
_RULE = "─" * 80
_BAR_WIDTH = 20
_VALUE_LIMIT = 50
_VALUE_SHOWN = 47
_ADDRESS_LIMIT = 44

_TYPE_ICONS = {
    "String": "📝",
    "Pubkey": "🔑",
    "U64": "🔢",
    "U32": "🔢",
    "U16": "🔢",
    "U8": "🔢",
    "Hash": "🔒",
    "Bytes": "📦",
}

PATTERN_DESCRIPTIONS = [
    ("WALLET_TOKEN_MINT", "Associated Token Accounts - Standard token ownership pattern"),
    ("STRING_PROGRAM_MINT", "Metaplex Metadata - NFT and token metadata storage"),
    ("STRING_AUTHORITY", "Program Authority - Controlled access and permissions"),
    ("PUBKEY_U64", "Market/Pool Systems - Trading and liquidity protocols"),
    ("STRING_SINGLETON", "Global State - Single instance program state"),
    ("PUBKEY_U8", "Bump Seed Pattern - Canonical bump for deterministic PDAs"),
    ("STRING_PUBKEY_STRING_U32", "Complex Governance - Multi-parameter DAO structures"),
    ("HASH_HASH", "Name Service - Domain registration and resolution"),
]


@dataclass
class SeedInfo:
    """One seed of an analysed address."""

    seed_type: str
    value: str
    byte_length: int
    description: str


@dataclass
class PdaAnalysisResult:
    """The outcome of analysing one address."""

    name: str
    pda_address: str
    program_id: str
    program_name: str
    description: str
    seeds: list[SeedInfo]
    pattern: str
    confidence: float
    analysis_time_ms: int


@dataclass
class PatternStats:
    """How often a seed pattern was seen, with a few examples."""

    count: int
    percentage: float
    examples: list[str] = field(default_factory=list)


@dataclass
class AnalysisSummary:
    """Totals over a whole analysis run."""

    total_pdas: int
    patterns_found: int
    success_rate: float
    total_time_ms: int
    most_common_pattern: str


def _ratio(numerator: float, denominator: float) -> float:
    if denominator == 0:
        if numerator == 0:
            return math.nan
        return math.copysign(math.inf, numerator)
    return numerator / denominator


def _one_decimal(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    return f"{value:.1f}"


def _percent(confidence: float) -> int:
    if math.isnan(confidence):
        return 0
    return int(max(0.0, min(255.0, confidence * 100.0)))


def _status_icon(confidence: float) -> str:
    if confidence > 0.9:
        return "✅"
    if confidence > 0.7:
        return "⚠️"
    return "❌"


def _bar(percentage: float) -> str:
    filled = 0 if math.isnan(percentage) or percentage < 0 else int(percentage / 5.0)
    if filled > _BAR_WIDTH:
        raise ValueError(f"percentage {percentage} does not fit the distribution bar")
    return "█" * filled + "░" * (_BAR_WIDTH - filled)


@dataclass
class AnalysisDisplay:
    """Analysis results, pattern statistics and a summary, ready to report."""

    results: list[PdaAnalysisResult]
    patterns: dict[str, PatternStats]
    summary: AnalysisSummary

    def display_full_report(self) -> None:
        """Print the whole report to standard output, line by line."""
        out = sys.stdout
        for line in self._lines():
            out.write(line)
            out.write("\n")
        out.flush()

    def render(self) -> str:
        """Return the whole report as text."""
        return "".join(line + "\n" for line in self._lines())

    def format_address(self, address: str) -> str:
        """Shorten addresses longer than 44 characters to head...tail."""
        if len(address) > _ADDRESS_LIMIT:
            return f"{address[:8]}...{address[-8:]}"
        return address

    def count_unique_programs(self) -> int:
        """Count the distinct program ids among the results."""
        return len({result.program_id for result in self.results})

    def _lines(self) -> list[str]:
        lines: list[str] = []
        self._header(lines)
        self._detailed_results(lines)
        self._pattern_analysis(lines)
        self._summary(lines)
        self._footer(lines)
        return lines

    def _header(self, lines: list[str]) -> None:
        lines += [
            "",
            _WIDE,
            "🚀 SOLANA PDA ANALYZER - COMPREHENSIVE ANALYSIS REPORT",
            _WIDE,
            "📊 Analyzing Program Derived Addresses from Live Solana Programs",
            "🔍 Reverse Engineering Seed Patterns and Derivation Logic",
            _WIDE,
            "",
        ]

    def _detailed_results(self, lines: list[str]) -> None:
        lines += ["📋 DETAILED ANALYSIS RESULTS", _RULE]
        for index, result in enumerate(self.results, start=1):
            self._pda_result(lines, index, result)

    def _pda_result(
        self, lines: list[str], index: int, result: PdaAnalysisResult
    ) -> None:
        lines += [
            "",
            f"{index}. {_status_icon(result.confidence)} {result.name}",
            f"   🏷️  PDA Address: {self.format_address(result.pda_address)}",
            f"   🔧 Program: {result.program_name} "
            f"({self.format_address(result.program_id)})",
            f"   📝 Description: {result.description}",
            f"   🎯 Pattern: {result.pattern} "
            f"({_percent(result.confidence)}% confidence)",
            f"   ⏱️  Analysis Time: {result.analysis_time_ms}ms",
            "   🌱 Seed Breakdown:",
        ]
        for number, seed in enumerate(result.seeds, start=1):
            icon = _TYPE_ICONS.get(seed.seed_type, "❓")
            lines.append(
                f"      {number}. {icon} {seed.seed_type} "
                f"({seed.byte_length} bytes): {seed.description}"
            )
            if len(seed.value) > _VALUE_LIMIT:
                lines.append(f"         Value: {seed.value[:_VALUE_SHOWN]}...")
            else:
                lines.append(f"         Value: {seed.value}")
        lines.append("   " + "─" * 76)

    def _pattern_analysis(self, lines: list[str]) -> None:
        lines += ["", "📊 PATTERN ANALYSIS & STATISTICS", _RULE]
        ranked = sorted(
            self.patterns.items(), key=lambda item: item[1].percentage, reverse=True
        )
        lines.append("🏆 Pattern Distribution:")
        for rank, (pattern, stats) in enumerate(ranked, start=1):
            lines.append(
                f"   {rank}. {pattern} [{_bar(stats.percentage)}] "
                f"{_one_decimal(stats.percentage)}% ({stats.count} PDAs)"
            )
            if stats.examples:
                lines.append(f"      📌 Examples: {', '.join(stats.examples)}")
        lines += ["", "🔍 Pattern Descriptions:"]
        lines += [
            f"      • {pattern}: {text}"
            for pattern, text in PATTERN_DESCRIPTIONS
            if pattern in self.patterns
        ]

    def _summary(self, lines: list[str]) -> None:
        summary = self.summary
        average = _ratio(summary.total_time_ms, summary.total_pdas)
        diversity = _ratio(summary.patterns_found, summary.total_pdas) * 100.0
        lines += [
            "",
            "📈 EXECUTIVE SUMMARY",
            _RULE,
            "🎯 Analysis Overview:",
            f"   • Total PDAs Analyzed: {summary.total_pdas}",
            f"   • Unique Patterns Detected: {summary.patterns_found}",
            f"   • Overall Success Rate: {_one_decimal(summary.success_rate)}%",
            f"   • Total Processing Time: {summary.total_time_ms}ms",
            f"   • Average Time per PDA: {_one_decimal(average)}ms",
            "",
            "🏅 Key Insights:",
            f"   • Most Common Pattern: {summary.most_common_pattern}",
            f"   • Pattern Diversity: {_one_decimal(diversity)}% unique patterns per PDA",
            f"   • Programs Analyzed: {self.count_unique_programs()} "
            "major Solana protocols",
            "   • Ecosystem Coverage: DeFi, NFTs, Gaming, Infrastructure",
            "",
            "⚡ Performance Metrics:",
            "   • Pattern Recognition: Real-time analysis capability",
            "   • Seed Derivation: 100% accuracy on known patterns",
            "   • Memory Usage: Efficient caching and optimization",
            "   • Scalability: Supports batch analysis of 1000+ PDAs",
        ]

    def _footer(self, lines: list[str]) -> None:
        lines += [
            "",
            _WIDE,
            "🔬 TECHNICAL DETAILS",
            _RULE,
            "   Algorithm: Multi-pattern seed derivation with statistical analysis",
            "   Blockchain: Solana Mainnet & Testnet data sources",
            "   Accuracy: Cryptographically verified PDA derivations",
            "   Coverage: 15+ major Solana program categories",
            "",
            "💼 BUSINESS IMPACT",
            _RULE,
            "   • Security Analysis: Identify PDA pattern vulnerabilities",
            "   • Protocol Research: Understand program architecture",
            "   • Development Aid: Reference for new program design",
            "   • Audit Support: Verify PDA implementation correctness",
            "",
            "🛠️  NEXT STEPS",
            _RULE,
            "   1. Run full analysis: pda-analyzer batch-analyze",
            "   2. Export results: --output json/csv/html",
            "   3. API integration: curl localhost:8080/api/v1/analyze/pda",
            "   4. Web dashboard: http://localhost:8080",
            "",
            _WIDE,
            "✨ Analysis completed successfully! Ready for production use.",
            _WIDE,
            "",
        ]


def create_demo_analysis() -> AnalysisDisplay:
    """Build the demonstration data set."""
    results = [
        PdaAnalysisResult(
            name="USDC Associated Token Account",
            pda_address="Gh9ZwEmdLJ8DscKNTkTqPbNwLNNBjuSzaG9Vp2KGtKJr",
            program_id="ATokenGPvbdGVxr1b2hvZbsiqW5xWH25efTNsLJA8knL",
            program_name="SPL Associated Token",
            description="Stores USDC tokens for wallet 9WzDXwBbmkg8...",
            seeds=[
                SeedInfo("Pubkey", "9WzDXwBbmkg8ZTbNMqUxvQRAyrZzDsGYdLVL9zYtAWWM",
                         32, "Wallet owner address"),
                SeedInfo("Pubkey", "TokenkegQfeZyiNwAJbNbGKPFXCWuBvf9Ss623VQ5DA",
                         32, "SPL Token Program ID"),
                SeedInfo("Pubkey", "EPjFWdd5AufqSSqeM2qN1xzybapC8G4wEGGkZwyTDt1v",
                         32, "USDC mint address"),
            ],
            pattern="WALLET_TOKEN_MINT",
            confidence=0.98,
            analysis_time_ms=12,
        ),
        PdaAnalysisResult(
            name="Bored Ape NFT Metadata",
            pda_address="8HYrKZBRZk9CgGfVv5u3r5G4W3dP2Qe2Y7rZRzMhQKkx",
            program_id="metaqbxxUerdq28cj1RbAWkYQm3ybzjb6a8bt518x1s",
            program_name="Metaplex Token Metadata",
            description="NFT metadata storage for Bored Ape collection",
            seeds=[
                SeedInfo("String", "metadata", 8, "Metaplex metadata identifier"),
                SeedInfo("Pubkey", "metaqbxxUerdq28cj1RbAWkYQm3ybzjb6a8bt518x1s",
                         32, "Metaplex program ID"),
                SeedInfo("Pubkey", "7gXKKGLQs2HpzrPTtBP7kkQ3LktDShQPE8VV9PYW9RSh",
                         32, "NFT mint address"),
            ],
            pattern="STRING_PROGRAM_MINT",
            confidence=0.95,
            analysis_time_ms=15,
        ),
        PdaAnalysisResult(
            name="Serum SOL/USDC Market Authority",
            pda_address="5Q544fKrFoe6tsEbD7S8EmxGTJYAKtTVhAW5Q5pge4j1",
            program_id="9xQeWvG816bUx9EPjHmaT23yvVM2ZWbrrpZb9PusVFin",
            program_name="Serum DEX",
            description="Market authority for SOL/USDC trading pair",
            seeds=[
                SeedInfo("Pubkey", "9wFFyRfZBsuAha4YcuxcXLKwMxJR43S7fPfQLusDBzvT",
                         32, "Market address"),
                SeedInfo("U64", "0", 8, "Vault signer nonce"),
            ],
            pattern="PUBKEY_U64",
            confidence=0.92,
            analysis_time_ms=18,
        ),
        PdaAnalysisResult(
            name="Marinade Liquid Staking State",
            pda_address="8szGkuLTAux9XMgZ2vtY39jVSowEcpBfFfD8hXSEqdGC",
            program_id="MarBmsSgKXdrN1egZf5sqe1TMai9K1rChYNDJgjq7aD",
            program_name="Marinade Finance",
            description="Global state for liquid staking protocol",
            seeds=[SeedInfo("String", "state", 5, "State identifier")],
            pattern="STRING_SINGLETON",
            confidence=0.99,
            analysis_time_ms=8,
        ),
    ]
    patterns = {
        "WALLET_TOKEN_MINT": PatternStats(9, 45.0, ["USDC ATA", "SOL ATA", "USDT ATA"]),
        "STRING_PROGRAM_MINT": PatternStats(4, 20.0, ["NFT Metadata", "Collection Info"]),
        "STRING_AUTHORITY": PatternStats(3, 15.0, ["Mint Authority", "Pool Authority"]),
        "PUBKEY_U64": PatternStats(2, 10.0, ["Serum Market", "Pool Nonce"]),
        "STRING_SINGLETON": PatternStats(2, 10.0, ["Marinade State", "Global Config"]),
    }
    summary = AnalysisSummary(
        total_pdas=20,
        patterns_found=8,
        success_rate=95.0,
        total_time_ms=234,
        most_common_pattern="WALLET_TOKEN_MINT",
    )
    return AnalysisDisplay(results=results, patterns=patterns, summary=summary)


def run_formatted_demo() -> None:
    """Print the report for the demonstration data set."""
    create_demo_analysis().display_full_report()


def demo_main(argv: Sequence[str] | None = None) -> int:
    """Command entry point printing the demonstration report."""
    parser = argparse.ArgumentParser(
        prog="pda-display-demo",
        description="Print a formatted PDA analysis report for demo data.",
    )
    parser.parse_args(argv)
    run_formatted_demo()
    return 0