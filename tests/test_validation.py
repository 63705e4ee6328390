import io

import pytest

from lsysparse.model import Rule
from lsysparse.validation import (
    AngleKind,
    ValidationError,
    parse_angle,
    parse_iterations,
    prompt_angle,
    prompt_axiom,
    prompt_iterations,
    prompt_rules,
    rules_for,
    validate_axiom,
    validate_rule,
)


def make_ask(answers):
    replies = iter(answers)
    prompts = []

    def ask(prompt):
        prompts.append(prompt)
        return next(replies)

    return ask, prompts


@pytest.mark.parametrize("axiom", ["F", "F+F-[X]", "AbCdEfGhIjKlMnO"])
def test_validate_axiom_accepts(axiom):
    assert validate_axiom(axiom) == axiom


@pytest.mark.parametrize(
    "axiom", ["", "F" * 16, "F F", "F*F", "F1", "Fé"]
)
def test_validate_axiom_rejects(axiom):
    with pytest.raises(ValidationError):
        validate_axiom(axiom)


def test_rules_for_first_occurrences():
    axiom = "X+YX-Y"
    indices = rules_for(axiom)
    assert [axiom[i] for i in indices] == ["X", "Y"]
    assert indices == sorted(indices)


def test_rules_for_ignores_case_and_symbols():
    axiom = "+x[X]"
    indices = rules_for(axiom)
    assert [axiom[i] for i in indices] == ["x"]


def test_rules_for_no_letters():
    assert rules_for("+-[]") == []


@pytest.mark.parametrize("rule", ["", "FF", "F[+X]-Y", "A" * 15])
def test_validate_rule_accepts(rule):
    assert validate_rule(rule) == rule


@pytest.mark.parametrize("rule", ["F F", "A" * 16, "F2", "F&"])
def test_validate_rule_rejects(rule):
    with pytest.raises(ValidationError):
        validate_rule(rule)


@pytest.mark.parametrize("text", ["1", "8", " 5 "])
def test_parse_iterations_accepts(text):
    assert parse_iterations(text) == int(text)


@pytest.mark.parametrize("text", ["0", "-3", "9", "abc", ""])
def test_parse_iterations_rejects(text):
    with pytest.raises(ValidationError):
        parse_iterations(text)


@pytest.mark.parametrize("text", ["0", "25.7", "360"])
def test_parse_angle_accepts(text):
    assert parse_angle(text) == float(text)


@pytest.mark.parametrize("text", ["-0.5", "361", "1000", "nan", "deg"])
def test_parse_angle_rejects(text):
    with pytest.raises(ValidationError):
        parse_angle(text)


def test_validation_error_is_value_error():
    with pytest.raises(ValueError):
        validate_axiom("")


def test_prompt_axiom_retries_until_valid():
    ask, prompts = make_ask(["", "F F", "F+X"])
    out = io.StringIO()
    assert prompt_axiom(ask, out) == "F+X"
    assert len(prompts) == 3
    assert out.getvalue().count("ERROR") == 2


def test_prompt_rules_follows_new_letters_in_code_order():
    ask, prompts = make_ask(["F[+X]Y", "FF", "Y"])
    out = io.StringIO()
    rules = prompt_rules("X", ask, out)
    assert [r.character for r in rules] == ["X", "F", "Y"]
    assert rules[0] == Rule("X", "F[+X]Y")
    assert "'F'" in prompts[1]
    assert "'Y'" in prompts[2]
    assert out.getvalue() == ""


def test_prompt_rules_retries_invalid_rule():
    ask, prompts = make_ask(["A B", "AA"])
    out = io.StringIO()
    rules = prompt_rules("A", ask, out)
    assert rules == (Rule("A", "AA"),)
    assert "ERROR" in out.getvalue()
    assert len(prompts) == 2


def test_prompt_rules_no_letters():
    ask, prompts = make_ask([])
    assert prompt_rules("+-", ask, io.StringIO()) == ()
    assert prompts == []


def test_prompt_iterations_retries():
    ask, _ = make_ask(["x", "12", "4"])
    out = io.StringIO()
    assert prompt_iterations(ask, out) == 4
    assert out.getvalue().count("ERROR") == 2


def test_prompt_angle_kinds():
    ask, prompts = make_ask(["-1", "90"])
    out = io.StringIO()
    assert prompt_angle(ask, out, AngleKind.TURN) == 90.0
    assert "turn angle" in prompts[0]

    ask, prompts = make_ask(["180"])
    assert prompt_angle(ask, out, "starting direction") == 180.0
    assert "starting direction" in prompts[0]


def test_prompt_angle_unknown_kind():
    ask, _ = make_ask(["90"])
    with pytest.raises(ValueError):
        prompt_angle(ask, io.StringIO(), "sideways")