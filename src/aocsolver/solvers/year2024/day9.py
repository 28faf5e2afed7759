"""Day 9: Disk Fragmenter"""
from __future__ import annotations
from typing import List, Optional, Tuple

from ...errors import InputParseError
from ...types import Solution
from .. import Solver


class SolverImpl(Solver):
    def __init__(self, input: str):
        super().__init__(input)
        disk_map = input.strip()
        if not disk_map.isdigit():
            raise InputParseError("disk map must consist of digits")
        self.sizes = [int(ch) for ch in disk_map]

    def blocks(self) -> List[Optional[int]]:
        layout: List[Optional[int]] = []
        for i, size in enumerate(self.sizes):
            layout.extend([i // 2 if i % 2 == 0 else None] * size)
        return layout

    def solve_part_1(self) -> Solution:
        layout = self.blocks()
        left, right = 0, len(layout) - 1
        while left < right:
            if layout[left] is not None:
                left += 1
            elif layout[right] is None:
                right -= 1
            else:
                layout[left], layout[right] = layout[right], None
        checksum = sum(i * f for i, f in enumerate(layout) if f is not None)
        return Solution.of("Filesystem checksum", checksum)

    def solve_part_2(self) -> Solution:
        files: List[Tuple[int, int]] = []  # (start, length) per file id
        gaps: List[List[int]] = []  # [start, length]
        pos = 0
        for i, size in enumerate(self.sizes):
            if i % 2 == 0:
                files.append((pos, size))
            elif size:
                gaps.append([pos, size])
            pos += size
        for file_id in range(len(files) - 1, -1, -1):
            start, length = files[file_id]
            for gap in gaps:
                if gap[0] >= start:
                    break
                if gap[1] >= length:
                    files[file_id] = (gap[0], length)
                    gap[0] += length
                    gap[1] -= length
                    break
        checksum = sum(
            file_id * (start * length + length * (length - 1) // 2)
            for file_id, (start, length) in enumerate(files)
        )
        return Solution.of("Filesystem checksum moving whole files", checksum)
