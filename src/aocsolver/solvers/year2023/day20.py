"""Day 20: Pulse Propagation

Part 2 assumes the usual input shape: ``rx`` is fed by a single conjunction
whose inputs each emit a high pulse periodically.
"""
from __future__ import annotations
from collections import deque
from dataclasses import dataclass, field
from math import lcm
from typing import Callable, Dict, List, Optional, Tuple

from ...errors import InputParseError
from ...types import Solution
from .. import Solver

Pulse = Tuple[str, bool, str]  # source, high, destination


@dataclass
class Module:
    kind: str  # '%', '&' or 'broadcaster'
    outputs: List[str]
    on: bool = False
    memory: Dict[str, bool] = field(default_factory=dict)

    def receive(self, source: str, high: bool) -> Optional[bool]:
        """Return the pulse to send, or None to stay silent."""
        if self.kind == "%":
            if high:
                return None
            self.on = not self.on
            return self.on
        if self.kind == "&":
            self.memory[source] = high
            return not all(self.memory.values())
        return high


def parse_modules(text: str) -> Dict[str, Module]:
    modules: Dict[str, Module] = {}
    for line in text.splitlines():
        if not line.strip():
            continue
        name, sep, targets = line.partition(" -> ")
        if not sep:
            raise InputParseError(f"invalid module line: {line!r}")
        outputs = [t.strip() for t in targets.split(",")]
        if name == "broadcaster":
            modules[name] = Module("broadcaster", outputs)
        elif name[0] in "%&":
            modules[name[1:]] = Module(name[0], outputs)
        else:
            raise InputParseError(f"unknown module type: {name!r}")
    for name, module in modules.items():
        for out in module.outputs:
            target = modules.get(out)
            if target is not None and target.kind == "&":
                target.memory[name] = False
    return modules


def press_button(modules: Dict[str, Module], observe: Callable[[Pulse], None]) -> None:
    queue = deque([("button", False, "broadcaster")])
    while queue:
        pulse = queue.popleft()
        observe(pulse)
        source, high, dest = pulse
        module = modules.get(dest)
        if module is None:
            continue
        sent = module.receive(source, high)
        if sent is None:
            continue
        for out in module.outputs:
            queue.append((dest, sent, out))


class SolverImpl(Solver):
    def __init__(self, input: str):
        super().__init__(input)
        # validate eagerly; each part works on a fresh copy
        parse_modules(input)

    def solve_part_1(self) -> Solution:
        modules = parse_modules(self.input)
        counts = [0, 0]

        def count(pulse: Pulse) -> None:
            counts[pulse[1]] += 1

        for _ in range(1000):
            press_button(modules, count)
        return Solution.of("Product of low and high pulse counts", counts[0] * counts[1])

    def solve_part_2(self) -> Solution:
        modules = parse_modules(self.input)
        feeders = [name for name, m in modules.items() if "rx" in m.outputs]
        if len(feeders) != 1 or modules[feeders[0]].kind != "&":
            raise InputParseError("rx must be fed by exactly one conjunction")
        hub = feeders[0]
        cycles: Dict[str, int] = {}
        presses = 0

        def watch(pulse: Pulse) -> None:
            source, high, dest = pulse
            if dest == hub and high and source not in cycles:
                cycles[source] = presses

        while len(cycles) < len(modules[hub].memory):
            presses += 1
            press_button(modules, watch)
        return Solution.of("Button presses until rx gets a low pulse", lcm(*cycles.values()))
