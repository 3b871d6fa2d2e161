"""Data models for the Splurge SSHD Config system."""

import logging
from dataclasses import dataclass, fields
from enum import Enum
from typing import Any, Optional

from splurge_sshd_config.constants import Constants

logger = logging.getLogger(__name__)


class _KeywordEnum(str, Enum):
    """String enum parsed from a directive value."""

    @classmethod
    def parse(cls, value: str) -> Optional["_KeywordEnum"]:
        """Parse a directive value into a member.

        An exact match wins. Values that merely begin with a member's keyword
        (``"yes  "``, ``"sandboxed"``) are still accepted because existing
        config files rely on it.

        Args:
            value: Trimmed directive value

        Returns:
            Matching member, or None when the value names no member
        """
        for member in cls:
            if value == member.value:
                return member
        for member in cls:
            if value.startswith(member.value):
                logger.debug(
                    f"Accepting '{value}' as '{member.value}' by keyword prefix",
                    extra={"value": value, "event": "keyword_prefix_match"},
                )
                return member
        return None


class PrivilegeSeparation(_KeywordEnum):
    """Privilege separation modes."""

    SANDBOX = "sandbox"
    YES = "yes"
    NO = "no"


class YesNo(_KeywordEnum):
    """Boolean directive values."""

    YES = "yes"
    NO = "no"


class ConfigOption(Enum):
    """Options readable through ``SshdConfig.get_option``."""

    EMPTY_PASSWORD = "empty-password"
    GRACE_LOGIN_TIME = "login-grace-time"


# Fields holding strings owned by the config
_STRING_FIELDS = (
    "banner",
    "chroot_dir",
    "ciphers",
    "host_key",
    "host_key_algos",
    "kex_algos",
    "listen_address",
    "auth_keys_file",
)


@dataclass
class SshdConfig:
    """Runtime policy of the SSH daemon.

    String values assigned to the config belong to it from then on. Callers
    hand a value over and must not keep using their own reference to manage
    it; ``release`` drops every owned string.
    """

    banner: Optional[str] = None
    chroot_dir: Optional[str] = None
    ciphers: Optional[str] = None
    host_key: Optional[str] = None
    host_key_algos: Optional[str] = None
    kex_algos: Optional[str] = None
    listen_address: Optional[str] = None
    auth_keys_file: Optional[str] = None
    login_grace_time: int = 0  # seconds
    port: int = Constants.DEFAULT_PORT()
    privilege_separation: Optional[PrivilegeSeparation] = None
    password_auth: bool = False
    pub_key_auth: bool = False
    permit_root_login: bool = False
    permit_empty_passwords: bool = False

    def get_option(self, option: ConfigOption) -> int:
        """Return a numeric view of a boolean or integer option.

        Args:
            option: Option to read

        Returns:
            1 or 0 for flags, the stored value for integers
        """
        if option is ConfigOption.EMPTY_PASSWORD:
            return int(self.permit_empty_passwords)
        if option is ConfigOption.GRACE_LOGIN_TIME:
            return self.login_grace_time
        return 0

    def release(self) -> None:
        """Drop every string the config owns."""
        for name in _STRING_FIELDS:
            setattr(self, name, None)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        result: dict[str, Any] = {}
        for item in fields(self):
            value = getattr(self, item.name)
            if isinstance(value, Enum):
                value = value.value
            result[item.name] = value
        return result
