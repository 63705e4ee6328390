"""L-System data types and the built-in library of example systems."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Rule:
    """A rewriting rule: every occurrence of ``character`` becomes ``rule``."""

    character: str
    rule: str

    def __post_init__(self) -> None:
        if len(self.character) != 1:
            raise ValueError(
                f"rule character must be a single character, got {self.character!r}"
            )


@dataclass(frozen=True)
class LSystem:
    """An L-System together with the settings used to draw it."""

    axiom: str
    rules: tuple[Rule, ...] = field(default_factory=tuple)
    iterations: int = 0
    turn_angle: float = 0.0
    start_direction: float = 0.0

    def __post_init__(self) -> None:
        object.__setattr__(self, "rules", tuple(self.rules))

    def describe(self) -> str:
        """Return a human-readable summary of the system's details."""
        lines = [
            "",
            "This system has these details:",
            "",
            f"\tAxiom: {self.axiom}",
            "\tRule(s): {",
        ]
        lines.extend(f"\t\t{r.character} -> {r.rule}" for r in self.rules)
        lines.extend(
            [
                "\t\t}",
                f"\tIterations: {self.iterations}",
                f"\tTurn Angle: {self.turn_angle:.2f}",
                f"\tStarting Direction: {self.start_direction:.2f}",
                "",
                "",
            ]
        )
        return "\n".join(lines)


def _system(axiom, rules, iterations, turn_angle, start_direction) -> LSystem:
    return LSystem(
        axiom=axiom,
        rules=tuple(Rule(c, r) for c, r in rules),
        iterations=iterations,
        turn_angle=turn_angle,
        start_direction=start_direction,
    )


_EXAMPLES: tuple[LSystem, ...] = (
    _system("X", [("X", "F[+X][-X]FX"), ("F", "FF")], 10, 45.0, 90.0),
    _system("-X", [("X", "F-[[X]+X]+F[+FX]-X"), ("F", "FF")], 8, 25.0, 90.0),
    _system("Y", [("X", "X[-FFF][+FFF]FX"), ("Y", "YFX[+Y][-Y]")], 10, 25.7, 90.0),
    _system("F", [("F", "FF+[+F-F-F]-[-F+F+F]")], 6, 22.5, 90.0),
    _system(
        "VZFFF",
        [
            ("V", "[+++W][---W]YV"),
            ("W", "+X[-W]Z"),
            ("X", "-W[+X]Z"),
            ("Y", "YZ"),
            ("Z", "[-FFF][+FFF]F"),
        ],
        14,
        20.0,
        90.0,
    ),
    _system("F+F+F+F", [("F", "FF+F+F+F+FF")], 6, 90.0, 0.0),
    _system("YF", [("X", "YF+XF+Y"), ("Y", "XF-YF-X")], 11, 60.0, 180.0),
    _system("F++F++F++F++F", [("F", "F++F++F+++++F-F++F")], 6, 36.0, 0.0),
    _system("FX", [("X", "X+YF+"), ("Y", "-FX-Y")], 18, 90.0, 0.0),
    _system(
        "XF",
        [("X", "X+YF++YF-FX--FXFX-YF+"), ("Y", "-FX+YFYF++YF+FX--FX-Y")],
        5,
        60.0,
        0.0,
    ),
)


def example_library() -> tuple[LSystem, ...]:
    """Return the ten example L-Systems, in menu order."""
    return _EXAMPLES