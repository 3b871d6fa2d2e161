"""Directive table and dispatcher.

Each directive line starts with a case-sensitive keyword. The dispatcher walks
the table in order and hands the rest of the line to the first entry whose
keyword prefixes it.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Optional

from splurge_sshd_config.exceptions import InvalidValueError, UnrecognizedDirectiveError
from splurge_sshd_config.extractors import create_string, get_config_int
from splurge_sshd_config.models import PrivilegeSeparation, SshdConfig, YesNo

logger = logging.getLogger(__name__)

AuthKeysHook = Callable[[Optional[str]], None]
DirectiveHandler = Callable[[SshdConfig, str], None]


@dataclass(frozen=True)
class Directive:
    """One entry of the dispatch table."""

    keyword: str
    handler: DirectiveHandler
    requires_value: bool = True

    def matches(self, line: str) -> bool:
        """Check whether a line names this directive.

        Args:
            line: Directive line without leading spaces

        Returns:
            True if the line begins with the keyword (and, for directives
            taking a value, is longer than it)
        """
        if self.requires_value and len(line) <= len(self.keyword):
            return False
        return line.startswith(self.keyword)


# Keywords accepted for compatibility without any effect
UNSUPPORTED_KEYWORDS = (
    "Subsystem",
    "ChallengeResponseAuthentication",
    "UsePAM",
    "X11Forwarding",
    "PrintMotd",
    "AcceptEnv",
    "Protocol",
)


class DirectiveDispatcher:
    """Applies directive lines to an SshdConfig."""

    def __init__(self, *, auth_keys_hook: Optional[AuthKeysHook] = None) -> None:
        """Initialize the dispatcher.

        Args:
            auth_keys_hook: Called with the new path whenever an
                AuthorizedKeysFile directive is applied
        """
        self._auth_keys_hook = auth_keys_hook
        self._directives: tuple[Directive, ...] = (
            Directive("AuthorizedKeysFile", self._handle_auth_keys_file),
            Directive("UsePrivilegeSeparation", self._handle_privilege_separation),
            *(
                Directive(keyword, self._handle_unsupported, requires_value=False)
                for keyword in UNSUPPORTED_KEYWORDS
            ),
            Directive("LoginGraceTime", self._handle_login_grace_time),
            Directive("PermitEmptyPasswords", self._handle_permit_empty_passwords),
        )

    @property
    def directives(self) -> tuple[Directive, ...]:
        """Dispatch table in match order."""
        return self._directives

    def find(self, line: str) -> Optional[Directive]:
        """Return the first directive naming the line, if any."""
        for directive in self._directives:
            if directive.matches(line):
                return directive
        return None

    def dispatch(self, conf: SshdConfig, line: str) -> Directive:
        """Apply one directive line to the config.

        Args:
            conf: Config to update
            line: Directive line without leading spaces or line terminator

        Returns:
            The directive that was applied

        Raises:
            UnrecognizedDirectiveError: If no directive matches the line
            SshdConfigError: Whatever the directive's handler raised
        """
        directive = self.find(line)
        if directive is None:
            logger.error(
                "Unknown or unsupported config line",
                extra={"line": line, "event": "directive_unrecognized"},
            )
            raise UnrecognizedDirectiveError(f"Unknown or unsupported config line: {line}")

        directive.handler(conf, line[len(directive.keyword):])
        return directive

    def _handle_auth_keys_file(self, conf: SshdConfig, raw: str) -> None:
        conf.auth_keys_file = create_string(raw)
        if self._auth_keys_hook is not None:
            self._auth_keys_hook(conf.auth_keys_file)

    def _handle_privilege_separation(self, conf: SshdConfig, raw: str) -> None:
        value = create_string(raw)
        mode = PrivilegeSeparation.parse(value)

        if mode is PrivilegeSeparation.SANDBOX:
            logger.info("Sandbox privilege separation")
        elif mode is PrivilegeSeparation.YES:
            logger.info("Privilege separation enabled")
        elif mode is PrivilegeSeparation.NO:
            logger.info("Turning off privilege separation!")
        else:
            logger.error(
                "Unknown or unsupported privilege separation",
                extra={"value": value, "event": "privilege_separation_rejected"},
            )
            raise InvalidValueError(f"Unknown or unsupported privilege separation: {value}")

        conf.privilege_separation = mode

    def _handle_login_grace_time(self, conf: SshdConfig, raw: str) -> None:
        seconds = get_config_int(raw, is_time=True)
        if seconds < 0:
            logger.error("Issue getting login grace time", extra={"value": raw.strip()})
            raise InvalidValueError(f"Invalid login grace time: {raw.strip()}")

        conf.login_grace_time = seconds
        logger.info(f"Setting login grace time to {seconds}", extra={
            "login_grace_time": seconds,
            "event": "login_grace_time_set"
        })

    def _handle_permit_empty_passwords(self, conf: SshdConfig, raw: str) -> None:
        value = create_string(raw)
        answer = YesNo.parse(value)

        if answer is YesNo.YES:
            logger.info("Empty password enabled")
            conf.permit_empty_passwords = True
        elif answer is None:
            # Unknown answers keep the current setting
            logger.warning(
                f"Ignoring PermitEmptyPasswords value '{value}'",
                extra={"value": value, "event": "permit_empty_passwords_ignored"},
            )

    def _handle_unsupported(self, conf: SshdConfig, raw: str) -> None:
        logger.debug("Ignoring unsupported directive", extra={"value": raw.strip()})
