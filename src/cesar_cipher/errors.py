class CesarError(Exception):
    pass


class ConfigNotSetError(CesarError):
    pass


class ConfigInvalidError(CesarError, ValueError):
    pass


class AlphabetError(CesarError, LookupError):
    """A symbol of the word has no usable code in the alphabet."""

    def __init__(self, message: str, symbol: str | None = None, position: int | None = None):
        super().__init__(message)
        self.symbol = symbol
        self.position = position


class IndexUnderflowError(AlphabetError):
    """A code is smaller than the alphabet start index."""


class NumericParseError(CesarError, ValueError):
    pass
