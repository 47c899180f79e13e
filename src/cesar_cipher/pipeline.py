from typing import List, Mapping, Sequence

from cesar_cipher.errors import AlphabetError, ConfigInvalidError, IndexUnderflowError
from cesar_cipher.log_config import get_logger

log = get_logger(__name__)

GROUP_BASE = 100
DELIMITER = "-"


def word_to_codes(word: str, encrypt_alphabet: Mapping[str, int]) -> List[int]:
    """Map every symbol of the word to its alphabet code, keeping the order."""
    codes = []
    for position, symbol in enumerate(word):
        code = encrypt_alphabet.get(symbol)
        if code is None:
            raise AlphabetError(
                f"A character of the message doesn't exist in the current alphabet: {symbol!r} at {position}",
                symbol=symbol,
                position=position,
            )
        codes.append(code)
    return codes


def remove_start_index(codes: Sequence[int], start_index: int) -> List[int]:
    """Shift codes down so the first alphabet symbol becomes 0."""
    normalized = []
    for position, code in enumerate(codes):
        value = code - start_index
        if value < 0:
            raise IndexUnderflowError(
                f"Code {code} at {position} is below the start index {start_index}",
                position=position,
            )
        normalized.append(value)
    return normalized


def evaluate_grouped_value(elements_to_group: Sequence[int]) -> int:
    """Pack a window of values into one integer, two decimal digits per extra element."""
    result = elements_to_group[0]
    for element in elements_to_group[1:]:
        result = result * GROUP_BASE + element
    return result


def group_codes(values: Sequence[int], group_size: int) -> List[int]:
    """Fold consecutive windows of group_size values. The last window may be short."""
    if group_size <= 0:
        raise ConfigInvalidError("The group size MUST be greater than 0")
    if len(values) <= 1:
        return list(values)

    if any(value >= GROUP_BASE for value in values) and group_size > 1:
        log.warning("grouped values overflow two digits", values=list(values), base=GROUP_BASE)

    return [
        evaluate_grouped_value(values[i:i + group_size])
        for i in range(0, len(values), group_size)
    ]


def add_key_value(values: Sequence[int], key_value: int, number_of_possibilities: int) -> List[int]:
    """Shift every value by the key, wrapping into [0, number_of_possibilities)."""
    if number_of_possibilities <= 0:
        raise ConfigInvalidError("The number of possibilities MUST be greater than 0")
    # Python's % already yields the non-negative remainder for negative sums.
    return [(value + key_value) % number_of_possibilities for value in values]


def numbers_to_strings(values: Sequence[int]) -> List[str]:
    return [str(value) for value in values]


def format_output(strings: Sequence[str], delimiter: str = DELIMITER) -> str:
    """Join the groups, each one followed by the delimiter."""
    return "".join(f"{value}{delimiter}" for value in strings)
