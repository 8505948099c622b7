from __future__ import annotations

import re
from enum import Enum


class BlockType(str, Enum):
    FIXED = "fixed"
    FREE = "free"


FREE_WORDS: tuple[str, ...] = ("free", "open", "blank")

# Substring match, so "pe" also hits e.g. "Pep rally".
FIXED_WORDS: tuple[str, ...] = (
    "breakfast",
    "lunch",
    "dinner",
    "meeting",
    "assembly",
    "check-in",
    "lights out",
    "religious",
    "athletics",
    "pe",
    "dorm",
    "advisory",
    "win",
)

_LETTER_BLOCK_RE = re.compile(r"^(block\s*)?[a-z]$", re.IGNORECASE)


def infer_block_type(label: str | None) -> BlockType:
    if not label:
        return BlockType.FREE
    s = str(label).lower()

    if "study hall" in s:
        return BlockType.FREE
    if any(w in s for w in FREE_WORDS):
        return BlockType.FREE
    if any(w in s for w in FIXED_WORDS):
        return BlockType.FIXED
    if _LETTER_BLOCK_RE.match(s):
        return BlockType.FIXED

    # Unrecognized activity text is treated as unavailable.
    return BlockType.FIXED


def classify_cell(label: str | None, *, forced_free: bool = False) -> BlockType:
    if forced_free:
        return BlockType.FREE
    return infer_block_type(label)


def is_free(label: str | None, *, forced_free: bool = False) -> bool:
    return classify_cell(label, forced_free=forced_free) is BlockType.FREE
