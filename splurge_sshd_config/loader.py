"""Load loop reading a directive file into an SshdConfig."""

import logging
from typing import Callable, ContextManager, Iterable, Optional

from splurge_sshd_config.constants import Constants
from splurge_sshd_config.directives import AuthKeysHook, DirectiveDispatcher
from splurge_sshd_config.exceptions import BadArgumentError, SshdConfigError
from splurge_sshd_config.line_source import FileLineSource
from splurge_sshd_config.models import SshdConfig

logger = logging.getLogger(__name__)

LineSourceFactory = Callable[[str], ContextManager[Iterable[str]]]


class ConfigLoader:
    """Reads directive lines and applies them to a config.

    Loading stops at the first line that cannot be applied. Lines applied
    before it stay applied, so a config whose load raised must not be used.
    """

    def __init__(
        self,
        *,
        line_source_factory: Optional[LineSourceFactory] = None,
        auth_keys_hook: Optional[AuthKeysHook] = None,
        post_load_hook: Optional[AuthKeysHook] = None,
        max_line_size: int = Constants.MAX_LINE_SIZE()
    ) -> None:
        """Initialize the loader.

        Args:
            line_source_factory: Builds the line source for a filename
                (default: FileLineSource)
            auth_keys_hook: Called each time an AuthorizedKeysFile line applies
            post_load_hook: Called once with the final authorized keys path
                after the whole file loaded
            max_line_size: Line buffer size handed to the default line source
        """
        self._max_line_size = max_line_size
        self._line_source_factory = line_source_factory or self._open_file
        self._post_load_hook = post_load_hook
        self._dispatcher = DirectiveDispatcher(auth_keys_hook=auth_keys_hook)

    @property
    def dispatcher(self) -> DirectiveDispatcher:
        return self._dispatcher

    def _open_file(self, filename: str) -> FileLineSource:
        return FileLineSource(filename, max_line_size=self._max_line_size)

    def load(self, conf: SshdConfig, filename: str) -> None:
        """Load directives from a file into the config.

        Args:
            conf: Config to populate
            filename: Directive file to read

        Raises:
            BadArgumentError: If conf or filename is None
            FileOperationError: If the file cannot be opened or read
            SshdConfigError: The error raised by the first rejected line,
                with ``line_number`` and ``line`` set
        """
        if conf is None:
            raise BadArgumentError("Config cannot be None")
        if filename is None:
            raise BadArgumentError("Config filename cannot be None")

        logger.info(f"Parsing config file {filename}", extra={
            "config_file": str(filename),
            "event": "config_load_started"
        })

        applied = 0
        with self._line_source_factory(filename) as source:
            for line_number, raw in enumerate(source, start=1):
                line = self._significant(raw)
                if line is None:
                    continue

                try:
                    self._dispatcher.dispatch(conf, line)
                except SshdConfigError as e:
                    e.line_number = line_number
                    e.line = line
                    logger.error(f"Unable to parse config line {line_number}: {line}")
                    raise
                applied += 1

        logger.debug(f"Applied {applied} directive(s) from {filename}", extra={
            "config_file": str(filename),
            "applied": applied,
            "event": "config_load_finished"
        })

        if self._post_load_hook is not None:
            self._post_load_hook(conf.auth_keys_file)

    @staticmethod
    def _significant(raw: str) -> Optional[str]:
        """Return the directive text of a line, or None for blank and comment lines."""
        line = raw.lstrip(" ")

        # The terminator counts toward the minimum, as it would in a C line buffer
        if len(line) < Constants.MIN_SIGNIFICANT_LENGTH():
            return None
        if line.startswith(Constants.COMMENT_CHAR()):
            return None

        return line.rstrip("\r\n")
