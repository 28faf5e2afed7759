"""Day 17: Chronospatial Computer

Part 2 assumes the program loops while shifting A right by three bits per
output, so A can be rebuilt three bits at a time from the last output.
"""
from __future__ import annotations
import re
from typing import List

from ...errors import InputParseError
from ...types import Solution
from .. import Solver

REGISTER = re.compile(r"Register ([ABC]): (\d+)")
PROGRAM = re.compile(r"Program: ([\d,]+)")


def run(program: List[int], a: int, b: int = 0, c: int = 0) -> List[int]:
    output: List[int] = []
    ip = 0
    while 0 <= ip < len(program) - 1:
        opcode, literal = program[ip], program[ip + 1]
        combo = (0, 1, 2, 3, a, b, c)[literal] if literal < 7 else None
        ip += 2
        if opcode == 0:
            a >>= combo
        elif opcode == 1:
            b ^= literal
        elif opcode == 2:
            b = combo % 8
        elif opcode == 3:
            if a != 0:
                ip = literal
        elif opcode == 4:
            b ^= c
        elif opcode == 5:
            output.append(combo % 8)
        elif opcode == 6:
            b = a >> combo
        elif opcode == 7:
            c = a >> combo
        else:
            raise InputParseError(f"invalid opcode {opcode}")
    return output


class SolverImpl(Solver):
    def __init__(self, input: str):
        super().__init__(input)
        registers = dict(REGISTER.findall(input))
        program = PROGRAM.search(input)
        if program is None or set(registers) != {"A", "B", "C"}:
            raise InputParseError("expected registers A, B, C and a program")
        self.a, self.b, self.c = (int(registers[r]) for r in "ABC")
        self.program = [int(v) for v in program.group(1).split(",")]

    def solve_part_1(self) -> Solution:
        output = run(self.program, self.a, self.b, self.c)
        return Solution.of("Program output", ",".join(str(v) for v in output))

    def solve_part_2(self) -> Solution:
        candidates = [0]
        for i in range(len(self.program) - 1, -1, -1):
            candidates = [
                a * 8 + bits
                for a in candidates
                for bits in range(8)
                if run(self.program, a * 8 + bits, self.b, self.c) == self.program[i:]
            ]
        valid = [a for a in candidates if a > 0]
        if not valid:
            raise ValueError("no initial value of A makes the program output itself")
        return Solution.of("Lowest A making the program output itself", min(valid))
