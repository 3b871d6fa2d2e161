#!/usr/bin/env python3
"""Command-line interface for the Splurge SSHD Config system."""

import argparse
import json
import logging
import sys
from typing import Any, Optional

from splurge_sshd_config.auth_keys import AuthKeysPattern
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
from splurge_sshd_config.host_key import load_host_key
from splurge_sshd_config.models import ConfigOption, SshdConfig
from splurge_sshd_config.sshd_config import (
    config_get_option,
    free_config,
    load_sshd,
    new_config,
    set_host_private_key,
)

# Most specific first
_ERROR_CODES: tuple[tuple[type[SshdConfigError], str], ...] = (
    (EmptyValueError, "empty_value"),
    (BadArgumentError, "bad_argument"),
    (UnrecognizedDirectiveError, "unrecognized_directive"),
    (InvalidValueError, "invalid_value"),
    (MemoryExhaustionError, "memory_exhaustion"),
    (FileOperationError, "file_error"),
    (HostKeyError, "host_key_error"),
)


class SshdConfigCLI:
    """Command-line interface for checking SSHD directive files."""

    def __init__(self) -> None:
        """Initialize the CLI."""
        self._parser = self._create_parser()
        self._pretty = False

    def _create_parser(self) -> argparse.ArgumentParser:
        """Create the argument parser.

        Returns:
            Configured argument parser
        """
        parser = argparse.ArgumentParser(
            description="Splurge SSHD Config - SSH daemon directive file checker",
            formatter_class=argparse.RawDescriptionHelpFormatter,
            epilog="""
Examples:
  # Load a directive file and print the resulting config
  splurge-sshd-config check -f /etc/ssh/sshd_config

  # Print one option
  splurge-sshd-config option -f /etc/ssh/sshd_config -o login-grace-time

  # Resolve the authorized keys file for a user
  splurge-sshd-config auth-keys -f /etc/ssh/sshd_config -u alice --home /home/alice

  # Load the host key and print its fingerprint
  splurge-sshd-config host-key -f /etc/ssh/sshd_config --host-key /etc/ssh/host_ed25519

  # Print the defaults of a fresh config
  splurge-sshd-config defaults
            """,
        )

        # Global arguments
        parser.add_argument(
            "--pretty",
            action="store_true",
            help="Pretty-print JSON outputs",
        )
        parser.add_argument(
            "-l",
            "--log-level",
            default="WARNING",
            choices=["DEBUG", "INFO", "WARNING", "ERROR"],
            help="Log level for messages written to stderr (default: WARNING)",
        )

        # Subcommands
        subparsers = parser.add_subparsers(
            dest="command",
            help="Available commands",
        )

        # Check command
        check_parser = subparsers.add_parser(
            "check",
            help="Load a directive file and print the config",
        )
        check_parser.add_argument(
            "-f",
            "--file",
            required=True,
            help="Directive file to load",
        )

        # Option command
        option_parser = subparsers.add_parser(
            "option",
            help="Print a single option",
        )
        option_parser.add_argument(
            "-f",
            "--file",
            required=True,
            help="Directive file to load",
        )
        option_parser.add_argument(
            "-o",
            "--option",
            required=True,
            choices=[option.value for option in ConfigOption],
            help="Option to print",
        )

        # Auth-keys command
        auth_keys_parser = subparsers.add_parser(
            "auth-keys",
            help="Resolve the authorized keys file for a user",
        )
        auth_keys_parser.add_argument(
            "-f",
            "--file",
            required=True,
            help="Directive file to load",
        )
        auth_keys_parser.add_argument(
            "-u",
            "--user",
            required=True,
            help="Login name",
        )
        auth_keys_parser.add_argument(
            "--home",
            required=True,
            help="Home directory of the user",
        )

        # Host-key command
        host_key_parser = subparsers.add_parser(
            "host-key",
            help="Load the host private key and print its fingerprint",
        )
        host_key_parser.add_argument(
            "-f",
            "--file",
            required=True,
            help="Directive file to load",
        )
        host_key_parser.add_argument(
            "-k",
            "--host-key",
            help="Host key file (overrides the configured one)",
        )
        host_key_parser.add_argument(
            "-p",
            "--password",
            help="Passphrase of an encrypted host key",
        )

        # Defaults command
        subparsers.add_parser(
            "defaults",
            help="Print the values of a fresh config",
        )

        return parser

    def _print_json(self, payload: dict[str, Any]) -> None:
        """Print a JSON payload to stdout."""
        print(json.dumps(payload, indent=2 if self._pretty else None))

    def _print_error(self, *, message: str, code: str = "error", extra: dict[str, Any] | None = None) -> None:
        """Print a JSON error to stderr and exit non-zero."""
        error_obj = {
            "success": False,
            "error_code": code,
            "message": message,
        }
        if extra:
            error_obj["data"] = extra
        print(json.dumps(error_obj, indent=2), file=sys.stderr)
        sys.exit(1)

    def _print_config_error(self, error: SshdConfigError) -> None:
        """Print a config error with its error code and offending line."""
        code = "error"
        for error_type, error_code in _ERROR_CODES:
            if isinstance(error, error_type):
                code = error_code
                break

        extra = None
        if error.line_number is not None:
            extra = {"line_number": error.line_number, "line": error.line}
        self._print_error(message=str(error), code=code, extra=extra)

    def _load(self, filename: str, *, pattern: AuthKeysPattern | None = None) -> SshdConfig:
        """Create a config and load a directive file into it."""
        conf = new_config()
        hook = pattern.set_pattern if pattern is not None else None
        try:
            load_sshd(conf, filename, auth_keys_hook=hook, post_load_hook=hook)
        except SshdConfigError:
            free_config(conf)
            raise
        return conf

    def _handle_check(self, args: argparse.Namespace) -> None:
        """Handle check command."""
        conf = self._load(args.file)
        self._print_json({
            "success": True,
            "command": "check",
            "file": args.file,
            "config": conf.to_dict(),
        })
        free_config(conf)

    def _handle_option(self, args: argparse.Namespace) -> None:
        """Handle option command."""
        conf = self._load(args.file)
        option = ConfigOption(args.option)
        self._print_json({
            "success": True,
            "command": "option",
            "option": option.value,
            "value": config_get_option(conf, option),
        })
        free_config(conf)

    def _handle_auth_keys(self, args: argparse.Namespace) -> None:
        """Handle auth-keys command."""
        pattern = AuthKeysPattern()
        conf = self._load(args.file, pattern=pattern)
        self._print_json({
            "success": True,
            "command": "auth-keys",
            "user": args.user,
            "pattern": pattern.pattern,
            "path": pattern.resolve(args.user, args.home),
        })
        free_config(conf)

    def _handle_host_key(self, args: argparse.Namespace) -> None:
        """Handle host-key command."""
        conf = self._load(args.file)
        if args.host_key:
            set_host_private_key(conf, args.host_key)

        host_key = load_host_key(conf, password=args.password)
        self._print_json({
            "success": True,
            "command": "host-key",
            "host_key": host_key.to_dict(),
        })
        free_config(conf)

    def _handle_defaults(self, args: argparse.Namespace) -> None:
        """Handle defaults command."""
        conf = new_config()
        self._print_json({
            "success": True,
            "command": "defaults",
            "config": conf.to_dict(),
        })
        free_config(conf)

    def run(self, args: Optional[list[str]] = None) -> None:
        """Run the CLI with given arguments."""
        try:
            parsed_args = self._parser.parse_args(args)
            self._pretty = bool(getattr(parsed_args, "pretty", False))
            logging.basicConfig(
                level=getattr(logging, parsed_args.log_level),
                format="%(levelname)s %(name)s: %(message)s",
                stream=sys.stderr,
            )

            if not parsed_args.command:
                self._print_error(message="No command specified", code="missing_command")

            # Handle commands
            if parsed_args.command == "check":
                self._handle_check(parsed_args)
            elif parsed_args.command == "option":
                self._handle_option(parsed_args)
            elif parsed_args.command == "auth-keys":
                self._handle_auth_keys(parsed_args)
            elif parsed_args.command == "host-key":
                self._handle_host_key(parsed_args)
            elif parsed_args.command == "defaults":
                self._handle_defaults(parsed_args)
            else:
                self._print_error(message=f"Unknown command: {parsed_args.command}", code="unknown_command")

        except SshdConfigError as e:
            self._print_config_error(e)
        except KeyboardInterrupt:
            self._print_error(message="Operation cancelled by user", code="cancelled")
        except Exception as e:
            self._print_error(message=str(e), code="unexpected_error")


def main() -> None:
    """Main entry point for the CLI."""
    cli = SshdConfigCLI()
    cli.run()


if __name__ == "__main__":
    main()
