"""Function-level API for creating, loading and reading SSHD configs.

Accessors accept ``None`` in place of a config and then return an empty
value instead of failing, so callers holding an optional config need no
guard of their own.
"""

import logging
from typing import Optional

from splurge_sshd_config.config import DEFAULT_DEFAULTS, SshdConfigDefaults
from splurge_sshd_config.directives import AuthKeysHook
from splurge_sshd_config.exceptions import BadArgumentError, MemoryExhaustionError
from splurge_sshd_config.loader import ConfigLoader, LineSourceFactory
from splurge_sshd_config.models import ConfigOption, SshdConfig

logger = logging.getLogger(__name__)


def new_config(defaults: Optional[SshdConfigDefaults] = None) -> SshdConfig:
    """Create a config holding only default values.

    Args:
        defaults: Defaults to apply (default: DEFAULT_DEFAULTS)

    Returns:
        New SshdConfig

    Raises:
        MemoryExhaustionError: If the config cannot be allocated
    """
    if defaults is None:
        defaults = DEFAULT_DEFAULTS

    try:
        return SshdConfig(
            port=defaults.port,
            login_grace_time=defaults.login_grace_time,
            permit_empty_passwords=defaults.permit_empty_passwords,
        )
    except MemoryError as e:
        logger.error("Issue allocating config structure for sshd")
        raise MemoryExhaustionError("Unable to allocate config structure for sshd") from e


def free_config(conf: Optional[SshdConfig]) -> None:
    """Release every string the config owns. Does nothing for None."""
    if conf is not None:
        conf.release()


def load_sshd(
    conf: SshdConfig,
    filename: str,
    *,
    line_source_factory: Optional[LineSourceFactory] = None,
    auth_keys_hook: Optional[AuthKeysHook] = None,
    post_load_hook: Optional[AuthKeysHook] = None,
    defaults: Optional[SshdConfigDefaults] = None
) -> None:
    """Load a directive file into an existing config.

    On error the config keeps whatever the lines before the failing one set
    and must not be treated as ready for use.

    Args:
        conf: Config to populate
        filename: Directive file
        line_source_factory: Replaces the file reader
        auth_keys_hook: Called whenever an AuthorizedKeysFile line applies
        post_load_hook: Called once with the final authorized keys path
        defaults: Supplies the line buffer size (default: DEFAULT_DEFAULTS)

    Raises:
        SshdConfigError: The first error met while loading
    """
    if defaults is None:
        defaults = DEFAULT_DEFAULTS

    loader = ConfigLoader(
        line_source_factory=line_source_factory,
        auth_keys_hook=auth_keys_hook,
        post_load_hook=post_load_hook,
        max_line_size=defaults.max_line_size,
    )
    loader.load(conf, filename)


def get_banner(conf: Optional[SshdConfig]) -> Optional[str]:
    return conf.banner if conf is not None else None


def get_port(conf: Optional[SshdConfig]) -> int:
    return conf.port if conf is not None else 0


def get_auth_keys_file(conf: Optional[SshdConfig]) -> Optional[str]:
    return conf.auth_keys_file if conf is not None else None


def get_host_private_key(conf: Optional[SshdConfig]) -> Optional[str]:
    return conf.host_key if conf is not None else None


def config_get_option(conf: Optional[SshdConfig], option: ConfigOption) -> int:
    """Read a flag (as 1/0) or integer option; 0 for a None config."""
    if conf is None:
        return 0
    return conf.get_option(option)


def set_auth_keys_file(conf: SshdConfig, path: str) -> None:
    """Hand an authorized keys path over to the config.

    The config owns ``path`` from here on; the caller must not keep managing
    it.

    Raises:
        BadArgumentError: If conf is None
    """
    if conf is None:
        raise BadArgumentError("Config cannot be None")
    conf.auth_keys_file = path


def set_host_private_key(conf: SshdConfig, path: str) -> None:
    """Hand a host key path over to the config.

    The config owns ``path`` from here on; the caller must not keep managing
    it.

    Raises:
        BadArgumentError: If conf is None
    """
    if conf is None:
        raise BadArgumentError("Config cannot be None")
    conf.host_key = path
