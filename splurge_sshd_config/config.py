"""Default values applied to new SSHD configuration objects."""

from dataclasses import dataclass

from splurge_sshd_config.constants import Constants


@dataclass(frozen=True)
class SshdConfigDefaults:
    """Defaults used by ``new_config`` when building an SshdConfig."""

    # Listener
    port: int = Constants.DEFAULT_PORT()

    # Authentication policy
    login_grace_time: int = 0  # seconds, 0 means no limit
    permit_empty_passwords: bool = False

    # Line handling
    max_line_size: int = Constants.MAX_LINE_SIZE()

    def __post_init__(self) -> None:
        """Validate defaults after initialization."""
        if not Constants.MIN_PORT() <= self.port <= Constants.MAX_PORT():
            raise ValueError(
                f"port must be between {Constants.MIN_PORT()} and {Constants.MAX_PORT()}"
            )
        if self.login_grace_time < 0:
            raise ValueError("login_grace_time must be non-negative")
        if self.max_line_size < Constants.MIN_SIGNIFICANT_LENGTH():
            raise ValueError(
                f"max_line_size must be at least {Constants.MIN_SIGNIFICANT_LENGTH()}"
            )


# Default configuration instance
DEFAULT_DEFAULTS = SshdConfigDefaults()
