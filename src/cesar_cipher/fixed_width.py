"""
Helpers for the fixed-width digit form of a message.

In this form every symbol code takes exactly `index_digit_number` digits and
`group_size` codes are concatenated per group, so a group is
`group_size * index_digit_number` characters wide.
"""
from typing import List, Optional, Sequence

from cesar_cipher.errors import ConfigInvalidError, ConfigNotSetError, IndexUnderflowError, NumericParseError
from cesar_cipher.pipeline import evaluate_grouped_value


def _is_digit_string(value: str) -> bool:
    return value.isascii() and value.isdigit()


def _group_width(group_size: Optional[int], index_digit_number: Optional[int]) -> int:
    if group_size is None:
        raise ConfigNotSetError("Error the size of characters group undefined")
    if group_size <= 0:
        raise ConfigInvalidError("Error the size of characters must be upper than 0")
    if index_digit_number is None:
        raise ConfigNotSetError("Error the number of digit per character undefined")
    if index_digit_number <= 0:
        raise ConfigInvalidError("The number of digit MUST be greater than 0")
    return group_size * index_digit_number


def add_missing_character(digits: str, group_size: Optional[int], index_digit_number: Optional[int]) -> str:
    """Right pad with '0' until the length is a multiple of the group width.

    An already aligned string is returned unchanged.
    """
    if digits and not _is_digit_string(digits):
        raise NumericParseError(f"The character MUST be a numeric value: {digits!r}")

    width = _group_width(group_size, index_digit_number)
    missing = -len(digits) % width
    return digits + "0" * missing


def split_digit_string(digits: str, group_size: Optional[int], index_digit_number: Optional[int]) -> List[str]:
    """Cut the digit string into group-width chunks. The last chunk may be short."""
    width = _group_width(group_size, index_digit_number)
    return [digits[i:i + width] for i in range(0, len(digits), width)]


def digit_groups_to_numbers(chunks: Sequence[str], start_index: int, index_digit_number: int) -> List[int]:
    """Parse every chunk slot by slot and pack the zero-based codes.

    "6566" with start index 65 and two digits per code is the pair (65, 66),
    which becomes (0, 1), i.e. the packed value 1.
    """
    if index_digit_number <= 0:
        raise ConfigInvalidError("The number of digit MUST be greater than 0")

    numbers = []
    for position, chunk in enumerate(chunks):
        if not _is_digit_string(chunk):
            raise NumericParseError(f"The character MUST be a numeric value: {chunk!r}")
        if len(chunk) % index_digit_number:
            raise NumericParseError(
                f"Chunk {chunk!r} at {position} is not a whole number of {index_digit_number}-digit codes"
            )

        slots = [
            int(chunk[i:i + index_digit_number]) - start_index
            for i in range(0, len(chunk), index_digit_number)
        ]
        if any(slot < 0 for slot in slots):
            raise IndexUnderflowError(
                f"Chunk {chunk!r} at {position} holds a code below the start index {start_index}",
                position=position,
            )
        numbers.append(evaluate_grouped_value(slots))
    return numbers


def numbers_to_fixed_width(values: Sequence[int], width: int) -> List[str]:
    """Render values as zero-padded decimal strings of at least `width` digits."""
    if width <= 0:
        raise ConfigInvalidError("The width MUST be greater than 0")
    return [f"{value:0{width}d}" for value in values]
