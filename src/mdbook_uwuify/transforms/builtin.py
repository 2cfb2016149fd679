# src/mdbook_uwuify/transforms/builtin.py

"""Transforms shipped with the preprocessor."""

import re
from typing import Literal

from .base import ExpansionBound

_UWU_RULES: list[tuple[re.Pattern[str], str]] = [
    (re.compile(r"ove"), "uv"),
    (re.compile(r"OVE"), "UV"),
    (re.compile(r"[rl]"), "w"),
    (re.compile(r"[RL]"), "W"),
    (re.compile(r"n([aeiou])"), r"ny\1"),
    (re.compile(r"N([aeiou])"), r"Ny\1"),
    (re.compile(r"N([AEIOU])"), r"NY\1"),
]


class IdentityTransform:
    name = "identity"
    bound = ExpansionBound(block_size=1, multiplier=1)

    def __call__(self, data: bytes) -> bytes:
        return data


class CaseTransform:
    """Upper- or lower-cases text.

    Unicode case mapping can grow a character (``"ß".upper() == "SS"``), so
    the bound keeps the 16x default.
    """

    def __init__(self, mode: Literal["upper", "lower"]) -> None:
        if mode not in ("upper", "lower"):
            raise ValueError(f"Unknown case mode: {mode}")
        self.name = mode
        self.bound = ExpansionBound()
        self._mode = mode

    def __call__(self, data: bytes) -> bytes:
        text = data.decode("utf-8")
        text = text.upper() if self._mode == "upper" else text.lower()
        return text.encode("utf-8")


class UwuTransform:
    """Deterministic uwu-speak.

    - ``r``/``l`` become ``w``
    - ``n`` before a vowel gains a ``y``
    - ``ove`` becomes ``uv``
    """

    name = "uwu"
    bound = ExpansionBound()

    def __call__(self, data: bytes) -> bytes:
        text = data.decode("utf-8")
        for pattern, replacement in _UWU_RULES:
            text = pattern.sub(replacement, text)
        return text.encode("utf-8")
