"""Rewriting of L-System strings."""

from __future__ import annotations

from collections.abc import Iterable

from .model import Rule

MIN_GROWTH_FACTOR = 1.5
MAX_BUFFER_SIZE = 1_000_000


def calculate_growth_factor(rules: Iterable[Rule]) -> float:
    """Return the average rule length, never less than 1.5."""
    lengths = [len(r.rule) for r in rules]
    if not lengths:
        return MIN_GROWTH_FACTOR
    return max(sum(lengths) / len(lengths), MIN_GROWTH_FACTOR)


def calculate_buffer_size(axiom_len: int, growth_factor: float, iterations: int) -> int:
    """Estimate the size needed for the parsed string.

    The estimate is capped at one million and never falls below ten times
    the axiom length.
    """
    expected = int(axiom_len * growth_factor**iterations + 1)
    size = min(expected, MAX_BUFFER_SIZE)
    return max(size, axiom_len * 10)


def _rule_table(rules: Iterable[Rule]) -> dict[str, str]:
    table: dict[str, str] = {}
    for r in rules:
        table.setdefault(r.character, r.rule)
    return table


def iterate(text: str, rules: Iterable[Rule]) -> str:
    """Apply one rewriting step; the first rule for a character wins."""
    table = _rule_table(rules)
    return "".join(table.get(ch, ch) for ch in text)


def parse(axiom: str, rules: Iterable[Rule], iterations: int) -> str:
    """Apply the rules to the axiom ``iterations`` times."""
    table = _rule_table(rules)
    current = axiom
    for _ in range(iterations):
        current = "".join(table.get(ch, ch) for ch in current)
    return current