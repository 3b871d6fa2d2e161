#!/usr/bin/env python3
"""Example usage of the SSHD directive loader."""

import logging
import tempfile
from pathlib import Path

from splurge_sshd_config import (
    ConfigOption,
    SshdConfigError,
    config_get_option,
    free_config,
    get_auth_keys_file,
    get_port,
    load_sshd,
    new_config,
)
from splurge_sshd_config.auth_keys import AuthKeysPattern


def main():
    """Load a small directive file and print what it set."""
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(message)s")

    with tempfile.TemporaryDirectory() as temp_dir:
        config_file = Path(temp_dir) / "sshd_config"
        config_file.write_text(
            "# example directives\n"
            "AuthorizedKeysFile /etc/ssh/authorized_keys/%u\n"
            "UsePrivilegeSeparation sandbox\n"
            "LoginGraceTime 2m\n"
            "PermitEmptyPasswords no\n"
            "Subsystem sftp internal-sftp\n",
            encoding="utf-8",
        )

        pattern = AuthKeysPattern()
        conf = new_config()
        try:
            load_sshd(
                conf,
                str(config_file),
                auth_keys_hook=pattern.set_pattern,
                post_load_hook=pattern.set_pattern,
            )
        except SshdConfigError as e:
            print(f"Config rejected at line {e.line_number}: {e}")
            free_config(conf)
            return

        print(f"Port: {get_port(conf)}")
        print(f"Authorized keys pattern: {get_auth_keys_file(conf)}")
        print(f"Keys for alice: {pattern.resolve('alice', '/home/alice')}")
        print(f"Login grace time: {config_get_option(conf, ConfigOption.GRACE_LOGIN_TIME)}s")
        print(f"Empty passwords: {bool(config_get_option(conf, ConfigOption.EMPTY_PASSWORD))}")
        print(f"Privilege separation: {conf.privilege_separation.value}")

        free_config(conf)

        # A file with an unknown directive stops at that line
        config_file.write_text("LoginGraceTime 30\nMaxStartups 10\n", encoding="utf-8")
        conf = new_config()
        try:
            load_sshd(conf, str(config_file))
        except SshdConfigError as e:
            print(f"Rejected line {e.line_number}: {e.line!r}")
            print(f"Grace time applied before the error: {conf.login_grace_time}s")
        finally:
            free_config(conf)


if __name__ == "__main__":
    main()
