# lsysparse

A small library for Lindenmayer (L-)systems.

An L-system starts from an **axiom** (a short string such as `F`), a set of
**transformation rules** (such as `F -> F+F`) and a number of **iterations**.
Each iteration replaces every character that has a rule with that rule's text;
characters without a rule are copied unchanged. The final string is meant as a
program for a turtle: letters move forward, `+` and `-` turn by the turn angle,
and `[` / `]` save and restore the turtle's state.

## Installation

```
pip install .
```

## Modules

### `lsysparse.model`

- `Rule(character, rule)`: a frozen dataclass; `character` must be exactly one
  character, otherwise `ValueError` is raised.
- `LSystem(axiom, rules, iterations, turn_angle, start_direction)`: a frozen
  dataclass holding a system and its drawing settings. `describe()` returns a
  text summary of the axiom, rules, iterations, and the two angles formatted to
  two decimal places.
- `example_library()`: the ten built-in systems, in this order: fractal tree,
  fractal plant, bush 1, bush 2, bush 4, board, Sierpinski arrowhead,
  pentaplexity, dragon curve, hexagonal Gosper.

### `lsysparse.parser`

- `iterate(text, rules)`: one rewriting step. When several rules share a
  character, the first one wins.
- `parse(axiom, rules, iterations)`: apply the rules `iterations` times.
- `calculate_growth_factor(rules)`: the average rule length, never below 1.5.
- `calculate_buffer_size(axiom_len, growth_factor, iterations)`: an estimate of
  the expanded length plus one, capped at 1,000,000 and never below ten times
  the axiom length.

### `lsysparse.validation`

These checks return the value they accept and raise `ValidationError`, a
subclass of `ValueError`, for anything else:

- `validate_axiom(text)`: 1 to 15 characters, no spaces, only ASCII letters
  and `+ - [ ]`.
- `validate_rule(rule)`: at most 15 characters, no spaces, only ASCII letters
  and `+ - [ ]`.
- `parse_iterations(text)`: an integer from 1 to 8.
- `parse_angle(text)`: a number of at least 0 and below 361.

`rules_for(axiom)` returns the position of the first occurrence of each letter
in the axiom, ignoring case.

The `prompt_*` functions keep asking until they get a valid answer. Each takes
`ask`, a callable that receives a prompt and returns the reply (the built-in
`input` works), and `out`, a text stream that error messages are written to:

- `prompt_axiom(ask, out)`
- `prompt_rules(axiom, ask, out)`: asks for a rule for each letter of the
  axiom, in character-code order, and then for every new letter the entered
  rules introduce; returns a tuple of `Rule`.
- `prompt_iterations(ask, out)`
- `prompt_angle(ask, out, kind)`: `kind` is an `AngleKind` (`TURN` or
  `START`) or its value, `"turn angle"` or `"starting direction"`.

## Example

```python
import sys

from lsysparse.model import LSystem, Rule, example_library
from lsysparse.parser import parse
from lsysparse.validation import AngleKind, prompt_angle, prompt_axiom

print(parse("F", [Rule("F", "F+F-F")], 2))

tree = example_library()[0]
print(tree.describe())
print(len(parse(tree.axiom, tree.rules, tree.iterations)))

axiom = prompt_axiom(input, sys.stdout)
angle = prompt_angle(input, sys.stdout, AngleKind.TURN)
```

## What this package does not do

- It installs no command and has no interactive menu; the prompt functions are
  building blocks for one.
- It does not draw anything. `parse` produces the turtle command string, and
  `LSystem` carries the turn angle and starting direction, but rendering the
  string is left to the caller.

## Running the tests

```
pip install .[test]
pytest
```