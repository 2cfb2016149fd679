# src/mdbook_uwuify/transforms/base.py

from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True)
class ExpansionBound:
    """Worst-case output size a transform guarantees for a given input size.

    ``capacity(n)`` rounds ``n`` up to a multiple of ``block_size`` and
    multiplies by ``multiplier``. The defaults (16, 16) are generous enough for
    any of the built-in transforms.
    """

    block_size: int = 16
    multiplier: int = 16

    def __post_init__(self) -> None:
        if self.block_size <= 0:
            raise ValueError("block_size must be > 0")
        if self.multiplier <= 0:
            raise ValueError("multiplier must be > 0")

    def capacity(self, input_size: int) -> int:
        if input_size < 0:
            raise ValueError("input_size must be >= 0")
        blocks = -(-input_size // self.block_size)
        return blocks * self.block_size * self.multiplier


class TextTransform(Protocol):
    """Protocol for text transforms.

    A transform is a pure function over UTF-8 bytes. It must never return
    more than ``bound.capacity(len(data))`` bytes for an input ``data``.
    """

    name: str
    bound: ExpansionBound

    def __call__(self, data: bytes) -> bytes: ...
