"""Day 15: Lens Library"""
from __future__ import annotations
import re
from typing import Dict, List

from ...errors import InputParseError
from ...types import Solution
from .. import Solver

STEP_PATTERN = re.compile(r"^([a-z]+)(-|=(\d))$")


def hash_label(text: str) -> int:
    value = 0
    for char in text:
        value = (value + ord(char)) * 17 % 256
    return value


class SolverImpl(Solver):
    def __init__(self, input: str):
        super().__init__(input)
        self.steps = [step for step in input.replace("\n", "").split(",") if step]

    def solve_part_1(self) -> Solution:
        return Solution.of("Sum of HASHes", sum(hash_label(step) for step in self.steps))

    def solve_part_2(self) -> Solution:
        # dicts keep insertion order, which is the slot order within a box
        boxes: List[Dict[str, int]] = [{} for _ in range(256)]
        for step in self.steps:
            match = STEP_PATTERN.match(step)
            if match is None:
                raise InputParseError(f"invalid step {step!r}")
            label = match.group(1)
            box = boxes[hash_label(label)]
            if match.group(2) == "-":
                box.pop(label, None)
            else:
                box[label] = int(match.group(3))
        power = sum(
            (box_index + 1) * slot * focal_length
            for box_index, box in enumerate(boxes)
            for slot, focal_length in enumerate(box.values(), start=1)
        )
        return Solution.of("Focusing power", power)
