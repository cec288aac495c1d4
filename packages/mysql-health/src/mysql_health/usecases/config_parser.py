"""Config parser use case for the YAML service configuration."""

from __future__ import annotations

from typing import Any

import yaml

from mysql_health.domain.exceptions import MySQLHealthConfigError

_DATABASE_KEYS = frozenset(
    {
        "user",
        "password",
        "host",
        "port",
        "socket",
        "cnf",
        "database",
        "replication_status_statement",
        "pool_size",
        "connect_timeout",
    }
)


class ConfigParser:
    """Parses the YAML service configuration into flat option dicts.

    Example document::

        listen:
          address: 0.0.0.0
          port: 3307
        failure_status_code: 403
        log_level: INFO
        master_marker_path: /master
        metrics:
          enabled: true
        database:
          cnf: ~/.my.cnf
          replication_status_statement: SHOW REPLICA STATUS
    """

    def parse(self, yaml_str: str) -> dict[str, dict[str, Any]]:
        """Parse YAML config.

        Args:
            yaml_str: YAML string representing the service configuration.

        Returns:
            Dict with a "service" and a "database" option dict. Only keys
            present in the document are included.

        Raises:
            MySQLHealthConfigError: If YAML is invalid or has unknown keys.
        """
        try:
            config = yaml.safe_load(yaml_str)
        except yaml.YAMLError as e:
            raise MySQLHealthConfigError(f"Invalid YAML: {e}") from e

        if config is None:
            config = {}

        if not isinstance(config, dict):
            raise MySQLHealthConfigError("Config must be a dictionary")

        service: dict[str, Any] = {}

        listen = config.get("listen") or {}
        if not isinstance(listen, dict):
            raise MySQLHealthConfigError("listen must be a dictionary")
        if "address" in listen:
            service["listen_address"] = listen["address"]
        if "port" in listen:
            service["listen_port"] = listen["port"]

        for key in ("failure_status_code", "log_level", "master_marker_path"):
            if key in config:
                service[key] = config[key]

        metrics = config.get("metrics") or {}
        if not isinstance(metrics, dict):
            raise MySQLHealthConfigError("metrics must be a dictionary")
        if "enabled" in metrics:
            if not isinstance(metrics["enabled"], bool):
                raise MySQLHealthConfigError("metrics.enabled must be a boolean")
            service["metrics_enabled"] = metrics["enabled"]

        database = config.get("database") or {}
        if not isinstance(database, dict):
            raise MySQLHealthConfigError("database must be a dictionary")

        unknown = sorted(set(database) - _DATABASE_KEYS)
        if unknown:
            raise MySQLHealthConfigError(f"Unknown database settings: {', '.join(unknown)}")

        return {"service": service, "database": dict(database)}
