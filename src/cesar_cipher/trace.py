from dataclasses import dataclass, field
from typing import Tuple


@dataclass(frozen=True, slots=True)
class EncodingTrace:
    """Immutable record of every pipeline stage for one word."""

    word: str
    ciphertext: str

    codes: Tuple[int, ...] = field(default_factory=tuple)
    normalized: Tuple[int, ...] = field(default_factory=tuple)
    grouped: Tuple[int, ...] = field(default_factory=tuple)
    shifted: Tuple[int, ...] = field(default_factory=tuple)
    strings: Tuple[str, ...] = field(default_factory=tuple)

    @property
    def group_count(self) -> int:
        return len(self.strings)
