"""DMV plate sequence — map an index to its plate and back.

Plates are six characters: a run of digits followed by a run of uppercase
letters. Numbers always come before letters:

    000000 → 999999 → 00000A → 99999Z → 0000AA → ... → ZZZZZZ

All plates with k letters precede all plates with k + 1 letters. Within one
split, plates are ordered by the digit prefix and then by the letter suffix
read as base 26 with A = 0.
"""

from __future__ import annotations

import re
import string

from platefetch.errors.exceptions import InvalidArgumentError, OutOfRangeError
from platefetch.types import PlateBlock

PLATE_WIDTH = 6
LETTERS = string.ascii_uppercase

_PLATE_RE = re.compile(r"[0-9]*[A-Z]*")


def _build_blocks() -> tuple[PlateBlock, ...]:
    blocks: list[PlateBlock] = []
    start = 0
    for letters in range(PLATE_WIDTH + 1):
        digits = PLATE_WIDTH - letters
        size = 10**digits * len(LETTERS) ** letters
        blocks.append(PlateBlock(letters=letters, digits=digits, start=start, size=size))
        start += size
    return tuple(blocks)


_BLOCKS = _build_blocks()

TOTAL_PLATES = sum(b.size for b in _BLOCKS)  # 501_363_136
MAX_PLATE_INDEX = TOTAL_PLATES - 1


def plate_blocks() -> list[PlateBlock]:
    """The seven digit/letter blocks, all-digits first."""
    return [b.model_copy() for b in _BLOCKS]


def nth_plate(n: int) -> str:
    """Return the nth plate in the sequence (0 to 501,363,135).

    Raises InvalidArgumentError if n is not a non-negative int and
    OutOfRangeError if n is past the last plate.
    """
    if isinstance(n, bool) or not isinstance(n, int) or n < 0:
        raise InvalidArgumentError('"n" must be a non-negative integer', argument="n")
    if n >= TOTAL_PLATES:
        raise OutOfRangeError(
            f'"n" is out of range (0 to {MAX_PLATE_INDEX:,})',
            value=n,
            maximum=MAX_PLATE_INDEX,
        )

    block = next(b for b in _BLOCKS if n in b)
    offset = n - block.start

    # split into digit and letter components
    digit_index, letter_index = divmod(offset, len(LETTERS) ** block.letters)

    digit_str = str(digit_index).zfill(block.digits) if block.digits else ""

    letter_str = ""
    for _ in range(block.letters):
        letter_index, char_index = divmod(letter_index, len(LETTERS))
        letter_str = LETTERS[char_index] + letter_str

    return digit_str + letter_str


def plate_index(plate: str) -> int:
    """Inverse of nth_plate: the position of a plate in the sequence."""
    if not isinstance(plate, str) or len(plate) != PLATE_WIDTH or not _PLATE_RE.fullmatch(plate):
        raise InvalidArgumentError(
            f"{plate!r} is not a plate (6 characters, digits then A-Z)", argument="plate"
        )

    digit_str = plate.rstrip(LETTERS)
    letter_str = plate[len(digit_str):]
    block = _BLOCKS[len(letter_str)]

    letter_index = 0
    for ch in letter_str:
        letter_index = letter_index * len(LETTERS) + LETTERS.index(ch)

    digit_index = int(digit_str) if digit_str else 0
    return block.start + digit_index * len(LETTERS) ** block.letters + letter_index
