"""Authorized keys lookup pattern."""

import logging
import posixpath
from typing import Optional

from splurge_sshd_config.constants import Constants
from splurge_sshd_config.exceptions import BadArgumentError

logger = logging.getLogger(__name__)


class AuthKeysPattern:
    """Tracks the AuthorizedKeysFile pattern and resolves it per user.

    ``set_pattern`` has the shape of the loader's authorized keys hooks, so an
    instance can be wired straight into ``load_sshd``.
    """

    def __init__(self, pattern: Optional[str] = None) -> None:
        self._pattern = Constants.DEFAULT_AUTH_KEYS_PATTERN()
        self.set_pattern(pattern)

    @property
    def pattern(self) -> str:
        return self._pattern

    def set_pattern(self, pattern: Optional[str]) -> None:
        """Replace the pattern; None restores the default."""
        if pattern is None or pattern.strip() == "":
            self._pattern = Constants.DEFAULT_AUTH_KEYS_PATTERN()
        else:
            self._pattern = pattern.strip()
        logger.debug(f"Authorized keys pattern set to {self._pattern}")

    def resolve(self, user: str, home: str) -> str:
        """Expand the pattern for a user.

        ``%h`` becomes the home directory, ``%u`` the user name and ``%%`` a
        literal percent sign. A relative result is taken relative to the home
        directory.

        Args:
            user: Login name
            home: Home directory of the user

        Returns:
            Path of the user's authorized keys file

        Raises:
            BadArgumentError: If user or home is missing, or the pattern holds
                an unknown escape
        """
        if not user:
            raise BadArgumentError("User name cannot be empty")
        if not home:
            raise BadArgumentError("Home directory cannot be empty")

        parts = []
        idx = 0
        while idx < len(self._pattern):
            char = self._pattern[idx]
            if char != "%":
                parts.append(char)
                idx += 1
                continue

            escape = self._pattern[idx + 1:idx + 2]
            if escape == "h":
                parts.append(home)
            elif escape == "u":
                parts.append(user)
            elif escape == "%":
                parts.append("%")
            else:
                raise BadArgumentError(
                    f"Unknown escape '%{escape}' in authorized keys pattern {self._pattern}"
                )
            idx += 2

        path = "".join(parts)
        if not posixpath.isabs(path):
            path = posixpath.join(home, path)
        return path
