"""Splurge SSHD Config - Directive file loader for an SSH server daemon.

This package reads the daemon's directive file into a configuration object
covering listener setup, authentication policy, session banner and privilege
separation mode.
"""

from splurge_sshd_config.config import DEFAULT_DEFAULTS, SshdConfigDefaults
from splurge_sshd_config.exceptions import (
    BadArgumentError,
    EmptyValueError,
    FileOperationError,
    HostKeyError,
    InvalidValueError,
    MemoryExhaustionError,
    SshdConfigError,
    UnrecognizedDirectiveError,
)
from splurge_sshd_config.models import ConfigOption, PrivilegeSeparation, SshdConfig
from splurge_sshd_config.sshd_config import (
    config_get_option,
    free_config,
    get_auth_keys_file,
    get_banner,
    get_host_private_key,
    get_port,
    load_sshd,
    new_config,
    set_auth_keys_file,
    set_host_private_key,
)

try:
    from importlib.metadata import version
    __version__ = version("splurge-sshd-config")
except ImportError:
    # Not installed as a distribution
    __version__ = "unknown"

__all__ = [
    "BadArgumentError",
    "ConfigOption",
    "DEFAULT_DEFAULTS",
    "EmptyValueError",
    "FileOperationError",
    "HostKeyError",
    "InvalidValueError",
    "MemoryExhaustionError",
    "PrivilegeSeparation",
    "SshdConfig",
    "SshdConfigDefaults",
    "SshdConfigError",
    "UnrecognizedDirectiveError",
    "config_get_option",
    "free_config",
    "get_auth_keys_file",
    "get_banner",
    "get_host_private_key",
    "get_port",
    "load_sshd",
    "new_config",
    "set_auth_keys_file",
    "set_host_private_key",
]
