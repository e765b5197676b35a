"""Catalogue entries describing known program-derived addresses."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass


@dataclass(frozen=True)
class PdaExample:
    """A known address, the program that owns it and its expected seeds."""

    name: str
    pda: str
    description: str
    expected_seeds: str
    program: str | None = None

    def describe(self) -> str:
        """Return the indented detail lines for this example."""
        lines = [f"   PDA: {self.pda}"]
        if self.program is not None:
            lines.append(f"   Program: {self.program}")
        lines.append(f"   Description: {self.description}")
        lines.append(f"   Expected seeds: {self.expected_seeds}")
        return "\n".join(lines)


def print_examples(title: str, examples: Iterable[PdaExample]) -> None:
    """Print a titled, numbered listing of examples."""
    print(f"=== {title} ===\n")
    for number, example in enumerate(examples, start=1):
        print(f"{number}. {example.name}")
        print(example.describe())
        print()