import dataclasses
from concurrent.futures import ThreadPoolExecutor

import pytest

from cesar_cipher.config import CesarConfig, CesarSettings
from cesar_cipher.errors import AlphabetError, ConfigInvalidError, ConfigNotSetError, IndexUnderflowError
from cesar_cipher.pipeline import add_key_value


class TestConstruction:
    """Test suite for building configurations"""

    def test_new_is_unset(self):
        """Test a new configuration has no values"""
        conf = CesarConfig.new()
        assert not conf.is_set()
        assert conf.settings == CesarSettings()

    def test_default_values(self):
        """Test the default configuration"""
        s = CesarConfig.default().settings
        assert s.key_value == 2
        assert s.group_size == 1
        assert s.number_of_possibilities == 26
        assert s.index_digit_number == 2
        assert s.start_index == 65
        assert s.encrypt_alphabet["A"] == 65
        assert s.decrypt_alphabet[90] == "Z"

    def test_default_is_set(self):
        """Test the default configuration is complete"""
        assert CesarConfig.default().is_set()

    def test_default_alphabets_are_independent(self):
        """Test each default call owns its own tables"""
        first = CesarConfig.default().settings.encrypt_alphabet
        second = CesarConfig.default().settings.encrypt_alphabet
        assert first == second
        assert first is not second

    def test_setters_return_new_config(self):
        """Test chained setters leave the receiver untouched"""
        base = CesarConfig.default()
        changed = base.group_size(2).number_of_possibilities(2526)
        assert base.settings.group_size == 1
        assert base.settings.number_of_possibilities == 26
        assert changed.settings.group_size == 2
        assert changed.settings.number_of_possibilities == 2526

    def test_settings_are_frozen(self):
        """Test settings cannot be assigned"""
        conf = CesarConfig.default()
        with pytest.raises(dataclasses.FrozenInstanceError):
            conf.settings.key_value = 5

    def test_alphabet_is_read_only(self):
        """Test stored alphabets cannot be mutated"""
        conf = CesarConfig.default()
        with pytest.raises(TypeError):
            conf.settings.encrypt_alphabet["a"] = 97

    def test_alphabet_is_copied(self):
        """Test later changes to the caller's dict do not leak in"""
        alphabet = {"A": 0, "B": 1}
        conf = CesarConfig.default().encrypt_alphabet(alphabet)
        alphabet["C"] = 2
        assert "C" not in conf.settings.encrypt_alphabet

    def test_partially_set(self):
        """Test a configuration missing one field is not set"""
        conf = CesarConfig.new().key_value(2).group_size(1).number_of_possibilities(26).index_digit_number(2)
        assert not conf.is_set()

    def test_from_symbols(self):
        """Test a custom contiguous alphabet"""
        conf = CesarConfig.from_symbols("abc", start_index=0).key_value(1)
        assert conf.settings.number_of_possibilities == 3
        assert conf.encrypt_word("abc") == "1-2-0-"


class TestValidate:
    """Test suite for configuration validation"""

    def test_zero_key(self):
        """Test a zero key is invalid"""
        with pytest.raises(ConfigInvalidError, match="key value"):
            CesarConfig.default().key_value(0).validate()

    def test_zero_group_size(self):
        """Test a zero group size is invalid"""
        with pytest.raises(ConfigInvalidError, match="group size"):
            CesarConfig.default().group_size(0).validate()

    def test_zero_digit_number(self):
        """Test a zero digit width is invalid"""
        with pytest.raises(ConfigInvalidError, match="number of digit"):
            CesarConfig.default().index_digit_number(0).validate()

    def test_zero_possibilities(self):
        """Test a zero modulus is invalid"""
        with pytest.raises(ConfigInvalidError, match="number of possibilities"):
            CesarConfig.default().number_of_possibilities(0).validate()

    def test_negative_key_is_valid(self):
        """Test negative keys are accepted"""
        CesarConfig.default().key_value(-2).validate()


class TestEncryptWord:
    """Test suite for the full encoding pipeline"""

    def test_encrypt_word(self):
        """Test the default configuration"""
        assert CesarConfig.default().encrypt_word("ABC") == "2-3-4-"

    def test_empty_input(self):
        """Test an empty word gives an empty string"""
        assert CesarConfig.default().encrypt_word("") == ""

    def test_empty_input_any_valid_config(self):
        """Test the empty word law holds for other configurations"""
        conf = CesarConfig.default().key_value(-7).group_size(3).number_of_possibilities(999999)
        assert conf.encrypt_word("") == ""

    def test_group_2(self):
        """Test pairs are packed before shifting"""
        conf = CesarConfig.default().group_size(2).number_of_possibilities(2526)
        assert conf.encrypt_word("ABC") == "3-4-"

    def test_group_2_even(self):
        """Test two full pairs"""
        conf = CesarConfig.default().group_size(2).number_of_possibilities(2526)
        # (1, 2) -> 102, (3, 4) -> 304
        assert conf.encrypt_word("BCDE") == "104-306-"

    def test_wraparound(self):
        """Test 'Y' and 'Z' wrap past the end of the alphabet"""
        assert CesarConfig.default().encrypt_word("YZ") == "0-1-"

    def test_negative_key(self):
        """Test a negative key wraps below 'A'"""
        assert CesarConfig.default().key_value(-2).encrypt_word("ABC") == "24-25-0-"

    def test_negative_key_symmetry(self):
        """Test key -2 undoes key +2 on the shifted values"""
        trace = CesarConfig.default().trace_word("HELLO")
        assert add_key_value(trace.shifted, -2, 26) == list(trace.normalized)

    def test_group_count_matches_symbols(self):
        """Test one group per symbol with a group size of one"""
        word = "THEQUICKBROWNFOX"
        ciphertext = CesarConfig.default().encrypt_word(word)
        assert ciphertext.endswith("-")
        assert len(ciphertext.split("-")[:-1]) == len(word)

    def test_deterministic(self):
        """Test repeated calls agree"""
        conf = CesarConfig.default().group_size(3).number_of_possibilities(252526)
        assert conf.encrypt_word("DETERMINISM") == conf.encrypt_word("DETERMINISM")

    def test_lowercase(self):
        """Test a lower case symbol misses the default alphabet"""
        with pytest.raises(AlphabetError):
            CesarConfig.default().encrypt_word("aBC")

    def test_unset_config(self):
        """Test an unset configuration is rejected"""
        with pytest.raises(ConfigNotSetError, match="MUST be set"):
            CesarConfig.new().encrypt_word("ABC")

    def test_unset_config_empty_word(self):
        """Test the set check runs before the empty word short-circuit"""
        with pytest.raises(ConfigNotSetError):
            CesarConfig.new().encrypt_word("")

    def test_invalid_config(self):
        """Test validation runs before the empty word short-circuit"""
        with pytest.raises(ConfigInvalidError):
            CesarConfig.default().key_value(0).encrypt_word("")

    def test_start_index_above_codes(self):
        """Test codes below the start index are rejected"""
        with pytest.raises(IndexUnderflowError):
            CesarConfig.default().start_index(70).encrypt_word("ABC")

    def test_concurrent_calls(self):
        """Test a shared configuration used from several threads"""
        conf = CesarConfig.default().group_size(2).number_of_possibilities(2526)
        words = ["ABC", "HELLO", "WORLD", "ZZ"] * 25
        with ThreadPoolExecutor(max_workers=8) as executor:
            results = list(executor.map(conf.encrypt_word, words))
        assert results == [conf.encrypt_word(word) for word in words]


class TestTraceWord:
    """Test suite for pipeline traces"""

    def test_trace(self):
        """Test every stage is recorded"""
        trace = CesarConfig.default().group_size(2).number_of_possibilities(2526).trace_word("ABC")
        assert trace.codes == (65, 66, 67)
        assert trace.normalized == (0, 1, 2)
        assert trace.grouped == (1, 2)
        assert trace.shifted == (3, 4)
        assert trace.strings == ("3", "4")
        assert trace.ciphertext == "3-4-"
        assert trace.group_count == 2

    def test_trace_empty_word(self):
        """Test an empty word records no stages"""
        trace = CesarConfig.default().trace_word("")
        assert trace.ciphertext == ""
        assert trace.codes == ()
        assert trace.group_count == 0


class TestFixedWidth:
    """Test suite for the configured fixed-width helpers"""

    def test_add_missing_character(self):
        """Test padding up to group_size * index_digit_number"""
        conf = CesarConfig.default().index_digit_number(2).group_size(3)
        assert conf.add_missing_character("65") == "650000"

    def test_add_missing_character_group_by_1(self):
        """Test an aligned string is unchanged"""
        conf = CesarConfig.default().index_digit_number(2).group_size(1)
        assert conf.add_missing_character("65") == "65"

    def test_split_digit_string(self):
        """Test splitting into per-symbol chunks"""
        assert CesarConfig.default().split_digit_string("656667") == ["65", "66", "67"]

    def test_split_digit_string_bad_group_size(self):
        """Test a zero group size is rejected"""
        conf = CesarConfig.default().group_size(0)
        with pytest.raises(ConfigInvalidError, match="must be upper than 0"):
            conf.split_digit_string("656667")

    def test_split_digit_string_unset_group_size(self):
        """Test an unset group size is rejected"""
        with pytest.raises(ConfigNotSetError, match="undefined"):
            CesarConfig.new().split_digit_string("656667")

    def test_digit_groups_to_numbers(self):
        """Test the start index is removed from every chunk"""
        assert CesarConfig.default().digit_groups_to_numbers(["65", "66", "67"]) == [0, 1, 2]

    def test_numbers_to_fixed_width(self):
        """Test values are padded to the group size"""
        conf = CesarConfig.default().group_size(3)
        assert conf.numbers_to_fixed_width([5, 56, 67]) == ["005", "056", "067"]
