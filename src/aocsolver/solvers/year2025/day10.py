"""Day 10: Factory

Part 1 is a shortest XOR combination of button masks. Part 2 is an integer
program: press counts are non-negative integers whose per-counter sums
must hit the joltage targets exactly.
"""
from __future__ import annotations
import re
from dataclasses import dataclass
from itertools import combinations
from typing import List, Tuple

from ortools.sat.python import cp_model

from ...errors import InputParseError
from ...types import Solution
from .. import Solver

MACHINE_PATTERN = re.compile(r"^\[([.#]+)\]((?: \([\d,]+\))+) \{([\d,]+)\}$")


@dataclass(frozen=True)
class Machine:
    lights: int  # bit i set when light i must end up on
    buttons: Tuple[Tuple[int, ...], ...]
    joltages: Tuple[int, ...]

    @property
    def button_masks(self) -> List[int]:
        return [sum(1 << i for i in button) for button in self.buttons]


def parse_machine(line: str) -> Machine:
    match = MACHINE_PATTERN.match(line.strip())
    if match is None:
        raise InputParseError(f"invalid machine: {line!r}")
    lights = sum(1 << i for i, ch in enumerate(match.group(1)) if ch == "#")
    buttons = tuple(
        tuple(int(v) for v in button.strip("()").split(","))
        for button in match.group(2).split()
    )
    joltages = tuple(int(v) for v in match.group(3).split(","))
    return Machine(lights, buttons, joltages)


def fewest_presses_for_lights(machine: Machine) -> int:
    # pressing a button twice cancels out, so each is pressed at most once
    masks = machine.button_masks
    for count in range(len(masks) + 1):
        for chosen in combinations(masks, count):
            state = 0
            for mask in chosen:
                state ^= mask
            if state == machine.lights:
                return count
    raise ValueError(f"lights {machine.lights:b} cannot be configured")


def fewest_presses_for_joltage(machine: Machine) -> int:
    model = cp_model.CpModel()
    upper = max(machine.joltages, default=0)
    presses = [model.NewIntVar(0, upper, f"button_{i}") for i in range(len(machine.buttons))]
    for counter, target in enumerate(machine.joltages):
        terms = [p for p, button in zip(presses, machine.buttons) if counter in button]
        if not terms:
            if target:
                raise ValueError(f"no button increases counter {counter}")
            continue
        model.Add(sum(terms) == target)
    model.Minimize(sum(presses))
    solver = cp_model.CpSolver()
    status = solver.Solve(model)
    if status != cp_model.OPTIMAL:
        raise ValueError(f"joltages {machine.joltages} are unreachable (status {solver.StatusName(status)})")
    return int(round(solver.ObjectiveValue()))


class SolverImpl(Solver):
    def __init__(self, input: str):
        super().__init__(input)
        self.machines = [parse_machine(line) for line in input.splitlines() if line.strip()]

    def solve_part_1(self) -> Solution:
        total = sum(fewest_presses_for_lights(m) for m in self.machines)
        return Solution.of("Fewest presses to configure the lights", total)

    def solve_part_2(self) -> Solution:
        total = sum(fewest_presses_for_joltage(m) for m in self.machines)
        return Solution.of("Fewest presses to configure the joltages", total)
