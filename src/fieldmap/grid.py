from dataclasses import dataclass
from typing import List, NamedTuple

from .tiles import UNSET

class Point(NamedTuple):
    x: int
    y: int

@dataclass
class Grid:
    width: int
    height: int
    buf: List[str]

    @classmethod
    def empty(cls, width: int, height: int, fill: str = UNSET) -> "Grid":
        return cls(width=width, height=height, buf=[fill] * (width * height))

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def is_border(self, x: int, y: int) -> bool:
        return x == 0 or y == 0 or x == self.width - 1 or y == self.height - 1

    def is_interior(self, x: int, y: int) -> bool:
        return 1 <= x <= self.width - 2 and 1 <= y <= self.height - 2

    def idx(self, x: int, y: int) -> int:
        if not self.in_bounds(x, y):
            raise IndexError(f"({x}, {y}) outside {self.width}x{self.height} grid")
        return y * self.width + x

    def get(self, x: int, y: int) -> str:
        return self.buf[self.idx(x, y)]

    def set(self, x: int, y: int, v: str) -> None:
        self.buf[self.idx(x, y)] = v

    def fill(self, v: str) -> None:
        self.buf = [v] * (self.width * self.height)

    def count(self, v: str) -> int:
        return self.buf.count(v)

    def rows(self) -> List[str]:
        w = self.width
        return ["".join(self.buf[y * w:(y + 1) * w]) for y in range(self.height)]

    def copy(self) -> "Grid":
        return Grid(self.width, self.height, list(self.buf))
