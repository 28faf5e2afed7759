"""Day 24: Crossed Wires

Part 2 checks the gates against the structure of a ripple-carry adder and
reports the outputs that break it.
"""
from __future__ import annotations
import re
from typing import Dict, List, Set, Tuple

from ...errors import InputParseError
from ...types import Solution
from .. import Solver

GATE_PATTERN = re.compile(r"^(\w+) (AND|OR|XOR) (\w+) -> (\w+)$")

Gate = Tuple[str, str, str]  # left, op, right


def _apply(op: str, a: int, b: int) -> int:
    if op == "AND":
        return a & b
    if op == "OR":
        return a | b
    return a ^ b


class SolverImpl(Solver):
    def __init__(self, input: str):
        super().__init__(input)
        blocks = input.strip().split("\n\n")
        if len(blocks) != 2:
            raise InputParseError("expected wire values and gates separated by a blank line")
        self.initial: Dict[str, int] = {}
        for line in blocks[0].splitlines():
            wire, sep, value = line.partition(":")
            if not sep:
                raise InputParseError(f"invalid wire value: {line!r}")
            self.initial[wire.strip()] = int(value)
        self.gates: Dict[str, Gate] = {}
        for line in blocks[1].splitlines():
            match = GATE_PATTERN.match(line.strip())
            if match is None:
                raise InputParseError(f"invalid gate: {line!r}")
            left, op, right, out = match.groups()
            self.gates[out] = (left, op, right)

    def evaluate(self) -> int:
        values = dict(self.initial)

        def value(wire: str) -> int:
            # gate chains are shallow enough for recursion
            if wire not in values:
                left, op, right = self.gates[wire]
                values[wire] = _apply(op, value(left), value(right))
            return values[wire]

        z_wires = sorted((w for w in self.gates if w.startswith("z")), reverse=True)
        result = 0
        for wire in z_wires:
            result = (result << 1) | value(wire)
        return result

    def swapped_wires(self) -> List[str]:
        last_z = max(w for w in self.gates if w.startswith("z"))
        consumers: Dict[str, Set[str]] = {}
        for left, op, right in self.gates.values():
            consumers.setdefault(left, set()).add(op)
            consumers.setdefault(right, set()).add(op)
        wrong: Set[str] = set()
        for out, (left, op, right) in self.gates.items():
            from_inputs = left[0] in "xy" and right[0] in "xy"
            first_bit = {left, right} == {"x00", "y00"}
            if out.startswith("z") and out != last_z and op != "XOR":
                wrong.add(out)
            elif out == last_z and op != "OR":
                wrong.add(out)
            elif op == "XOR" and not from_inputs and not out.startswith("z"):
                wrong.add(out)
            elif op == "XOR" and from_inputs and not first_bit and "XOR" not in consumers.get(out, set()):
                wrong.add(out)
            elif op == "AND" and not first_bit and "OR" not in consumers.get(out, set()):
                wrong.add(out)
        return sorted(wrong)

    def solve_part_1(self) -> Solution:
        return Solution.of("Decimal output on z wires", self.evaluate())

    def solve_part_2(self) -> Solution:
        return Solution.of("Swapped wires", ",".join(self.swapped_wires()))
