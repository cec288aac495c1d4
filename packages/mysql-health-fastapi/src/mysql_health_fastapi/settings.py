"""Settings reader for the FastAPI mysql-health service."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from mysql_health.domain.exceptions import MySQLHealthConfigError
from mysql_health.domain.settings import (
    DEFAULT_DATABASE_USER,
    DatabaseSettings,
    ServiceSettings,
)
from mysql_health.usecases.config_parser import ConfigParser
from mysql_health.usecases.mycnf_parser import MyCnfParser

# Required fields that must be present to connect to the database
_REQUIRED_DATABASE_FIELDS = ("password",)

_DATABASE_FIELDS = (
    "user",
    "password",
    "host",
    "port",
    "socket",
    "database",
    "replication_status_statement",
    "pool_size",
    "connect_timeout",
)

_SERVICE_FIELDS = (
    "listen_address",
    "listen_port",
    "failure_status_code",
    "metrics_enabled",
    "log_level",
    "master_marker_path",
)


def get_database_settings(options: dict[str, Any]) -> DatabaseSettings:
    """Convert a flat options dict to a DatabaseSettings domain object.

    Unknown keys and keys set to None are ignored.

    Raises:
        MySQLHealthConfigError: If required settings are missing or invalid.
    """
    missing = [key for key in _REQUIRED_DATABASE_FIELDS if options.get(key) in (None, "")]
    if missing:
        raise MySQLHealthConfigError(
            "Empty required arguments to start connection to database: "
            f"{', '.join(sorted(missing))}"
        )

    kwargs: dict[str, Any] = {
        field: options[field] for field in _DATABASE_FIELDS if options.get(field) is not None
    }
    kwargs.setdefault("user", DEFAULT_DATABASE_USER)

    try:
        return DatabaseSettings(**kwargs)
    except TypeError as e:
        raise MySQLHealthConfigError(f"Invalid database settings: {e}") from e


def get_service_settings(options: dict[str, Any]) -> ServiceSettings:
    """Convert a flat options dict to a ServiceSettings domain object.

    Raises:
        MySQLHealthConfigError: If settings are invalid.
    """
    kwargs: dict[str, Any] = {
        field: options[field] for field in _SERVICE_FIELDS if options.get(field) is not None
    }
    try:
        return ServiceSettings(**kwargs)
    except TypeError as e:
        raise MySQLHealthConfigError(f"Invalid service settings: {e}") from e


def load_settings(
    overrides: dict[str, Any],
    config_path: str | Path | None = None,
) -> tuple[ServiceSettings, DatabaseSettings]:
    """Resolve service and database settings from every source.

    Precedence, highest first: explicit overrides (command line), the
    MySQL option file, the YAML config file, built-in defaults.

    Args:
        overrides: Flat options; None values mean "not given".
        config_path: Optional YAML config file.

    Returns:
        Tuple of (ServiceSettings, DatabaseSettings).

    Raises:
        MySQLHealthConfigError: If any source is invalid.
    """
    service_options: dict[str, Any] = {}
    database_options: dict[str, Any] = {}

    if config_path is not None:
        path = Path(config_path)
        if not path.is_file():
            raise MySQLHealthConfigError(f"`{path}`: Not found.")
        document = ConfigParser().parse(path.read_text(encoding="utf-8"))
        service_options.update(document["service"])
        database_options.update(document["database"])

    config_cnf = database_options.pop("cnf", None)
    cnf = overrides.get("cnf") or config_cnf
    if cnf:
        database_options.update(MyCnfParser().parse_file(cnf))

    for key, value in overrides.items():
        if value is None or key == "cnf":
            continue
        if key in _SERVICE_FIELDS:
            service_options[key] = value
        elif key in _DATABASE_FIELDS:
            database_options[key] = value

    return get_service_settings(service_options), get_database_settings(database_options)
