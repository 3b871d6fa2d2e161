"""Library-wide constants.

These constants centralize the values the directive parser relies on so the
loader, the extractors and the defaults structure agree with each other.
"""


class Constants:

    # Listener
    _DEFAULT_PORT: int = 9387
    _MIN_PORT: int = 1
    _MAX_PORT: int = 65535

    # Line handling
    _MAX_LINE_SIZE: int = 160
    _MIN_SIGNIFICANT_LENGTH: int = 2
    _COMMENT_CHAR: str = "#"

    # Duration suffixes
    _MINUTE_SUFFIX: str = "m"
    _HOUR_SUFFIX: str = "h"
    _MINUTE_MULTIPLIER: int = 60
    _HOUR_MULTIPLIER: int = 60 * 60

    # Returned by the integer extractor when a token is not a number
    _INVALID_INTEGER: int = -1

    # Authorized keys lookup
    _DEFAULT_AUTH_KEYS_PATTERN: str = ".ssh/authorized_keys"

    @classmethod
    def DEFAULT_PORT(cls) -> int:
        return cls._DEFAULT_PORT

    @classmethod
    def MIN_PORT(cls) -> int:
        return cls._MIN_PORT

    @classmethod
    def MAX_PORT(cls) -> int:
        return cls._MAX_PORT

    @classmethod
    def MAX_LINE_SIZE(cls) -> int:
        return cls._MAX_LINE_SIZE

    # Lines shorter than this after trimming are blank
    @classmethod
    def MIN_SIGNIFICANT_LENGTH(cls) -> int:
        return cls._MIN_SIGNIFICANT_LENGTH

    @classmethod
    def COMMENT_CHAR(cls) -> str:
        return cls._COMMENT_CHAR

    @classmethod
    def MINUTE_SUFFIX(cls) -> str:
        return cls._MINUTE_SUFFIX

    @classmethod
    def HOUR_SUFFIX(cls) -> str:
        return cls._HOUR_SUFFIX

    @classmethod
    def MINUTE_MULTIPLIER(cls) -> int:
        return cls._MINUTE_MULTIPLIER

    @classmethod
    def HOUR_MULTIPLIER(cls) -> int:
        return cls._HOUR_MULTIPLIER

    @classmethod
    def INVALID_INTEGER(cls) -> int:
        return cls._INVALID_INTEGER

    @classmethod
    def DEFAULT_AUTH_KEYS_PATTERN(cls) -> str:
        return cls._DEFAULT_AUTH_KEYS_PATTERN
