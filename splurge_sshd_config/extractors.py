"""Value extractors for directive payloads.

Both extractors receive the raw remainder of a directive line (everything
after the keyword) and skip the space characters separating it from the
keyword. Only ASCII spaces count as separators.
"""

import re

from splurge_sshd_config.constants import Constants
from splurge_sshd_config.exceptions import EmptyValueError, MemoryExhaustionError

_SEPARATOR = " "
_TOKEN = re.compile(r"[^ \n]+")
_DECIMAL = re.compile(r"[+-]?[0-9]+")


def create_string(raw: str) -> str:
    """Extract a string value, dropping leading spaces.

    Trailing content, trailing whitespace included, is kept as is.

    Args:
        raw: Remainder of the directive line

    Returns:
        The value

    Raises:
        EmptyValueError: If nothing but spaces follows the keyword
        MemoryExhaustionError: If the value cannot be copied
    """
    try:
        value = raw.lstrip(_SEPARATOR)
    except MemoryError as e:
        raise MemoryExhaustionError("Unable to allocate directive value") from e

    if not value:
        raise EmptyValueError("Directive value is empty")

    return value


def get_config_int(raw: str, *, is_time: bool = False) -> int:
    """Extract an integer value, optionally as a duration.

    The value is the first token after the keyword. With ``is_time`` set a
    trailing ``m`` means minutes and a trailing ``h`` means hours; the result
    is then in seconds. Only positive values are scaled, so ``"0m"`` is 0 and
    ``"-1h"`` is -1.

    Args:
        raw: Remainder of the directive line
        is_time: Whether unit suffixes are recognized

    Returns:
        The parsed value, or ``Constants.INVALID_INTEGER()`` if the token is
        not a base-10 integer

    Raises:
        EmptyValueError: If nothing but spaces follows the keyword
    """
    stripped = raw.lstrip(_SEPARATOR)
    if not stripped:
        raise EmptyValueError("Directive value is empty")

    match = _TOKEN.match(stripped)
    token = match.group(0) if match else ""

    multiplier = 1
    if is_time and token:
        if token.endswith(Constants.MINUTE_SUFFIX()):
            token = token[:-1]
            multiplier = Constants.MINUTE_MULTIPLIER()
        elif token.endswith(Constants.HOUR_SUFFIX()):
            token = token[:-1]
            multiplier = Constants.HOUR_MULTIPLIER()

    if not _DECIMAL.fullmatch(token):
        return Constants.INVALID_INTEGER()

    value = int(token, 10)
    if value > 0:
        value *= multiplier
    return value
