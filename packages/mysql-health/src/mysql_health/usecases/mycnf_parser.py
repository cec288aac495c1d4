"""Parser for MySQL client option files (``~/.my.cnf``)."""

from __future__ import annotations

import configparser
import logging
from pathlib import Path
from typing import Any

from mysql_health.domain.exceptions import MySQLHealthConfigError
from mysql_health.domain.settings import DEFAULT_DATABASE_PORT, DEFAULT_DATABASE_USER

logger = logging.getLogger(__name__)

_CLIENT_SECTION = "client"


def _unquote(value: str) -> str:
    value = value.strip()
    if len(value) >= 2 and value[0] == value[-1] and value[0] in ("'", '"'):
        return value[1:-1]
    return value


class MyCnfParser:
    """Reads connection options from the ``[client]`` section of an option file.

    Recognized keys: ``user``, ``password``, ``host`` (or the legacy
    ``hostname``), ``port`` and ``socket``. When a socket is configured the
    host and port are not read.
    """

    def parse(self, content: str) -> dict[str, Any]:
        """Parse option file content into DatabaseSettings keyword arguments.

        Args:
            content: Text of the option file.

        Returns:
            Dict with keys user, password and either socket or host/port.

        Raises:
            MySQLHealthConfigError: If the file is malformed, has no
                [client] section, or has no password.
        """
        parser = configparser.ConfigParser(
            allow_no_value=True,
            interpolation=None,
            strict=False,
            inline_comment_prefixes=("#", ";"),
        )
        # !include and !includedir directives are not followed
        lines = [line for line in content.splitlines() if not line.lstrip().startswith("!")]

        try:
            parser.read_string("\n".join(lines))
        except configparser.Error as e:
            raise MySQLHealthConfigError(f"Invalid option file: {e}") from e

        if not parser.has_section(_CLIENT_SECTION):
            raise MySQLHealthConfigError("Option file has no [client] section")

        client = parser[_CLIENT_SECTION]
        options: dict[str, Any] = {}

        socket = client.get("socket")
        if socket:
            options["socket"] = _unquote(socket)
        else:
            host = client.get("host") or client.get("hostname")
            if host:
                options["host"] = _unquote(host)

            port = client.get("port")
            if port:
                try:
                    options["port"] = int(_unquote(port))
                except ValueError as e:
                    raise MySQLHealthConfigError(f"Invalid port in option file: {port!r}") from e
            else:
                logger.info(
                    f"No database port is present in config file. "
                    f"Assuming default value ({DEFAULT_DATABASE_PORT})."
                )
                options["port"] = DEFAULT_DATABASE_PORT

        user = client.get("user")
        if user:
            options["user"] = _unquote(user)
        else:
            logger.info(
                f"No database user is present in config file. "
                f"Assuming default value ({DEFAULT_DATABASE_USER})."
            )
            options["user"] = DEFAULT_DATABASE_USER

        password = client.get("password")
        if not password:
            raise MySQLHealthConfigError(
                "No database password is present in config file. Please, provide it."
            )
        options["password"] = _unquote(password)

        return options

    def parse_file(self, path: str | Path) -> dict[str, Any]:
        """Read and parse an option file.

        Raises:
            MySQLHealthConfigError: If the file does not exist or is invalid.
        """
        path = Path(path).expanduser()
        if not path.is_file():
            raise MySQLHealthConfigError(f"`{path}`: Not found.")

        return self.parse(path.read_text(encoding="utf-8"))
