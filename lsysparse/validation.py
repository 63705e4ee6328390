"""Checking and interactive entry of custom L-System settings."""

from __future__ import annotations

import math
from collections.abc import Callable
from enum import Enum
from typing import TextIO

from .model import Rule

MAX_LENGTH = 15
MAX_ITERATIONS = 8
ANGLE_LIMIT = 361.0
ALLOWED_SYMBOLS = frozenset("+-[]")

Ask = Callable[[str], str]


class ValidationError(ValueError):
    """Raised when user-supplied L-System data breaks an input restriction."""


class AngleKind(Enum):
    """Which angle a prompt asks for."""

    TURN = "turn angle"
    START = "starting direction"


def _is_letter(ch: str) -> bool:
    return ch.isascii() and ch.isalpha()


def _only_allowed(text: str) -> bool:
    return all(_is_letter(ch) or ch in ALLOWED_SYMBOLS for ch in text)


def validate_axiom(text: str) -> str:
    """Return ``text`` if it is a valid axiom, otherwise raise ValidationError."""
    if not text:
        raise ValidationError("Axiom must be more than 0 characters long")
    if len(text) > MAX_LENGTH:
        raise ValidationError(
            f"Axiom must be less than or equal to {MAX_LENGTH} characters long"
        )
    if " " in text:
        raise ValidationError("Axiom must not contain spaces")
    if not _only_allowed(text):
        raise ValidationError("Axiom must contain only allowed characters")
    return text


def rules_for(axiom: str) -> list[int]:
    """Return the positions of the first occurrence of each letter in ``axiom``.

    Letters are compared without regard to case.
    """
    seen: set[str] = set()
    indices: list[int] = []
    for index, ch in enumerate(axiom):
        if _is_letter(ch) and ch.upper() not in seen:
            indices.append(index)
            seen.add(ch.upper())
    return indices


def validate_rule(rule: str) -> str:
    """Return ``rule`` if it is a valid replacement string, otherwise raise."""
    if " " in rule:
        raise ValidationError("Rule cannot contain spaces")
    if len(rule) > MAX_LENGTH:
        raise ValidationError(f"Rule cannot be longer than {MAX_LENGTH} characters")
    if not _only_allowed(rule):
        raise ValidationError(
            "Rule can only contain letters and the symbols +, -, [, and ]"
        )
    return rule


def parse_iterations(text: str) -> int:
    """Parse an iteration count between 1 and 8 inclusive."""
    try:
        value = int(text.strip())
    except ValueError:
        raise ValidationError("Invalid input") from None
    if value <= 0:
        raise ValidationError("Iterations must be a positive integer")
    if value > MAX_ITERATIONS:
        raise ValidationError(
            f"Iterations must be less than or equal to {MAX_ITERATIONS}"
        )
    return value


def parse_angle(text: str) -> float:
    """Parse a turn angle or starting direction in degrees."""
    try:
        value = float(text.strip())
    except ValueError:
        raise ValidationError("Invalid input") from None
    if math.isnan(value):
        raise ValidationError("Invalid input")
    if value < 0:
        raise ValidationError("Number must be greater than or equal to 0")
    if value >= ANGLE_LIMIT:
        raise ValidationError("Number must be less than or equal to 360")
    return value


def _ask_until_valid(ask: Ask, out: TextIO, prompt: str, convert):
    reply = ask(prompt)
    while True:
        try:
            return convert(reply)
        except ValidationError as exc:
            out.write(f"\nERROR: {exc}, try again: ")
            out.flush()
            reply = ask("")


def prompt_axiom(ask: Ask, out: TextIO) -> str:
    """Ask for an axiom until a valid one is entered."""
    return _ask_until_valid(
        ask, out, "Enter the axiom (see above key for requirements): ", validate_axiom
    )


def _prompt_single_rule(ch: str, ask: Ask, out: TextIO) -> str:
    while True:
        reply = ask(f"Enter rule for character '{ch}': ")
        try:
            return validate_rule(reply)
        except ValidationError as exc:
            out.write(f"ERROR: {exc}, try again.\n")
            out.flush()


def prompt_rules(axiom: str, ask: Ask, out: TextIO) -> tuple[Rule, ...]:
    """Ask for a rule for every letter reachable from ``axiom``.

    Letters waiting for a rule are asked for in character-code order; letters
    introduced by an entered rule are added to those waiting.
    """
    pending = {axiom[i] for i in rules_for(axiom)}
    has_rule: set[str] = set()
    rules: list[Rule] = []
    while pending:
        ch = min(pending)
        text = _prompt_single_rule(ch, ask, out)
        rules.append(Rule(ch, text))
        has_rule.add(ch)
        pending.discard(ch)
        pending.update(c for c in text if _is_letter(c) and c not in has_rule)
    return tuple(rules)


def prompt_iterations(ask: Ask, out: TextIO) -> int:
    """Ask for an iteration count until a valid one is entered."""
    return _ask_until_valid(
        ask,
        out,
        "Enter the number of iterations (see above key for requirements): ",
        parse_iterations,
    )


def prompt_angle(ask: Ask, out: TextIO, kind: AngleKind | str) -> float:
    """Ask for the turn angle or the starting direction."""
    kind = AngleKind(kind)
    return _ask_until_valid(
        ask,
        out,
        f"Enter the {kind.value} (see above key for requirements): ",
        parse_angle,
    )