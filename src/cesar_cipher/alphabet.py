from typing import Dict, Tuple

DecryptAlphabet = Dict[int, str]
EncryptAlphabet = Dict[str, int]

DEFAULT_FIRST_CODE = ord("A")
DEFAULT_LAST_CODE = ord("Z")


def generate_default_alphabet() -> Tuple[DecryptAlphabet, EncryptAlphabet]:
    """Build a fresh A-Z table keyed both ways on the character codes 65..90."""
    return alphabet_from_symbols(
        "".join(chr(code) for code in range(DEFAULT_FIRST_CODE, DEFAULT_LAST_CODE + 1)),
        start_index=DEFAULT_FIRST_CODE,
    )


def alphabet_from_symbols(symbols: str, start_index: int = 0) -> Tuple[DecryptAlphabet, EncryptAlphabet]:
    """Number the symbols consecutively from start_index.

    Returns the (decrypt, encrypt) pair. Duplicate symbols would break the
    inverse table, so they are rejected.
    """
    if len(set(symbols)) != len(symbols):
        raise ValueError("Alphabet symbols must be unique")

    decrypt_alphabet: DecryptAlphabet = {}
    encrypt_alphabet: EncryptAlphabet = {}
    for code, symbol in enumerate(symbols, start=start_index):
        decrypt_alphabet[code] = symbol
        encrypt_alphabet[symbol] = code

    return decrypt_alphabet, encrypt_alphabet
