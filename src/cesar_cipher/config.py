from __future__ import annotations

from dataclasses import dataclass, fields, replace
from types import MappingProxyType
from typing import List, Mapping, Optional, Sequence

from cesar_cipher import fixed_width, pipeline
from cesar_cipher.alphabet import alphabet_from_symbols, generate_default_alphabet
from cesar_cipher.errors import ConfigInvalidError, ConfigNotSetError
from cesar_cipher.log_config import get_logger
from cesar_cipher.trace import EncodingTrace

log = get_logger(__name__)

DEFAULT_KEY_VALUE = 2
DEFAULT_GROUP_SIZE = 1
DEFAULT_NUMBER_OF_POSSIBILITIES = 26
DEFAULT_INDEX_DIGIT_NUMBER = 2
DEFAULT_START_INDEX = 65


@dataclass(frozen=True, slots=True)
class CesarSettings:
    """Raw configuration values. None means the field was never set."""

    key_value: Optional[int] = None
    group_size: Optional[int] = None
    number_of_possibilities: Optional[int] = None
    index_digit_number: Optional[int] = None
    start_index: Optional[int] = None
    decrypt_alphabet: Optional[Mapping[int, str]] = None
    encrypt_alphabet: Optional[Mapping[str, int]] = None


class CesarConfig:
    """Cipher configuration built with chained setters.

    Every setter returns a new configuration and leaves the receiver untouched,
    so a finished configuration can be shared freely:

        conf = CesarConfig.default().group_size(2).number_of_possibilities(2526)
        conf.encrypt_word("ABC")
    """

    def __init__(self, settings: Optional[CesarSettings] = None):
        self.__settings = settings if settings is not None else CesarSettings()

    @classmethod
    def new(cls) -> 'CesarConfig':
        return cls()

    @classmethod
    def default(cls) -> 'CesarConfig':
        decrypt_alphabet, encrypt_alphabet = generate_default_alphabet()
        return (
            cls()
            .key_value(DEFAULT_KEY_VALUE)
            .group_size(DEFAULT_GROUP_SIZE)
            .number_of_possibilities(DEFAULT_NUMBER_OF_POSSIBILITIES)
            .index_digit_number(DEFAULT_INDEX_DIGIT_NUMBER)
            .start_index(DEFAULT_START_INDEX)
            .decrypt_alphabet(decrypt_alphabet)
            .encrypt_alphabet(encrypt_alphabet)
        )

    @classmethod
    def from_symbols(cls, symbols: str, start_index: int = DEFAULT_START_INDEX) -> 'CesarConfig':
        """Default settings over a custom alphabet numbered from start_index."""
        decrypt_alphabet, encrypt_alphabet = alphabet_from_symbols(symbols, start_index=start_index)
        return (
            cls.default()
            .number_of_possibilities(len(symbols))
            .start_index(start_index)
            .decrypt_alphabet(decrypt_alphabet)
            .encrypt_alphabet(encrypt_alphabet)
        )

    def __repr__(self) -> str:
        s = self.__settings
        return (
            f"CesarConfig(key_value={s.key_value}, group_size={s.group_size}, "
            f"number_of_possibilities={s.number_of_possibilities}, "
            f"index_digit_number={s.index_digit_number}, start_index={s.start_index})"
        )

    @property
    def settings(self) -> CesarSettings:
        return self.__settings

    def __replace(self, **changes) -> 'CesarConfig':
        return CesarConfig(replace(self.__settings, **changes))

    def key_value(self, key_value: int) -> 'CesarConfig':
        return self.__replace(key_value=key_value)

    def group_size(self, group_size: int) -> 'CesarConfig':
        return self.__replace(group_size=group_size)

    def number_of_possibilities(self, number_of_possibilities: int) -> 'CesarConfig':
        return self.__replace(number_of_possibilities=number_of_possibilities)

    def index_digit_number(self, index_digit_number: int) -> 'CesarConfig':
        return self.__replace(index_digit_number=index_digit_number)

    def start_index(self, start_index: int) -> 'CesarConfig':
        return self.__replace(start_index=start_index)

    def decrypt_alphabet(self, decrypt_alphabet: Mapping[int, str]) -> 'CesarConfig':
        return self.__replace(decrypt_alphabet=MappingProxyType(dict(decrypt_alphabet)))

    def encrypt_alphabet(self, encrypt_alphabet: Mapping[str, int]) -> 'CesarConfig':
        return self.__replace(encrypt_alphabet=MappingProxyType(dict(encrypt_alphabet)))

    def is_set(self) -> bool:
        return all(getattr(self.__settings, f.name) is not None for f in fields(CesarSettings))

    def validate(self) -> None:
        """Raise ConfigInvalidError for the first numeric field out of range."""
        s = self.__settings
        if s.key_value == 0:
            raise ConfigInvalidError("The key value MUST be different from 0")
        if s.group_size is not None and s.group_size <= 0:
            raise ConfigInvalidError("The group size MUST be greater than 0")
        if s.index_digit_number is not None and s.index_digit_number <= 0:
            raise ConfigInvalidError("The number of digit MUST be greater than 0")
        if s.number_of_possibilities is not None and s.number_of_possibilities <= 0:
            raise ConfigInvalidError("The number of possibilities MUST be greater than 0")

    def trace_word(self, word: str) -> EncodingTrace:
        """Run the whole pipeline and keep every intermediate stage."""
        if not self.is_set():
            raise ConfigNotSetError("The config MUST be set")
        self.validate()

        if not word:
            return EncodingTrace(word=word, ciphertext="")

        s = self.__settings
        codes = pipeline.word_to_codes(word, s.encrypt_alphabet)
        normalized = pipeline.remove_start_index(codes, s.start_index)
        log.debug("removed index", normalized=normalized)

        grouped = pipeline.group_codes(normalized, s.group_size)
        log.debug("grouped", grouped=grouped, group_size=s.group_size)

        shifted = pipeline.add_key_value(grouped, s.key_value, s.number_of_possibilities)
        log.debug("added key", shifted=shifted, key_value=s.key_value)

        strings = pipeline.numbers_to_strings(shifted)
        ciphertext = pipeline.format_output(strings)

        return EncodingTrace(
            word=word,
            ciphertext=ciphertext,
            codes=tuple(codes),
            normalized=tuple(normalized),
            grouped=tuple(grouped),
            shifted=tuple(shifted),
            strings=tuple(strings),
        )

    def encrypt_word(self, word: str) -> str:
        return self.trace_word(word).ciphertext

    # Fixed-width digit form, driven by the configured sizes.

    def add_missing_character(self, digits: str) -> str:
        return fixed_width.add_missing_character(
            digits, self.__settings.group_size, self.__settings.index_digit_number
        )

    def split_digit_string(self, digits: str) -> List[str]:
        return fixed_width.split_digit_string(
            digits, self.__settings.group_size, self.__settings.index_digit_number
        )

    def digit_groups_to_numbers(self, chunks: Sequence[str]) -> List[int]:
        s = self.__settings
        if s.start_index is None or s.index_digit_number is None:
            raise ConfigNotSetError("The start index and the number of digit MUST be set")
        return fixed_width.digit_groups_to_numbers(chunks, s.start_index, s.index_digit_number)

    def numbers_to_fixed_width(self, values: Sequence[int]) -> List[str]:
        if self.__settings.group_size is None:
            raise ConfigNotSetError("Error the size of characters group undefined")
        return fixed_width.numbers_to_fixed_width(values, self.__settings.group_size)
