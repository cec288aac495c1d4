"""Settings domain entities."""

from dataclasses import dataclass

from mysql_health.domain.exceptions import MySQLHealthConfigError

# Statements accepted for reading the replica status row. MySQL 8.0.22+
# prefers the REPLICA spelling, older servers and MariaDB the SLAVE one.
REPLICATION_STATUS_STATEMENTS = ("SHOW SLAVE STATUS", "SHOW REPLICA STATUS")

DEFAULT_DATABASE_PORT = 3306
DEFAULT_DATABASE_USER = "mysql"
DEFAULT_LISTEN_PORT = 3307
DEFAULT_FAILURE_STATUS_CODE = 403
DEFAULT_MASTER_MARKER_PATH = "/master"


def _require_type(field: str, value: object, expected: type) -> None:
    """Raise a config error unless ``value`` is an instance of ``expected``.

    ``bool`` is rejected where an ``int`` is expected.
    """
    if (isinstance(value, bool) and expected is not bool) or not isinstance(value, expected):
        raise MySQLHealthConfigError(
            f"{field} must be of type {expected.__name__}, got: {value!r}"
        )


@dataclass(frozen=True)
class DatabaseSettings:
    """Connection settings for the monitored MySQL node.

    Value object with zero external dependencies. Either ``host`` or
    ``socket`` must be provided; when ``socket`` is set it takes precedence.

    Attributes:
        user: Database user with privileges to read status variables.
        password: Password of the database user. Must be non-empty.
        host: Hostname or IP of the target database.
        port: TCP port of the target database (1-65535).
        socket: Optional unix socket path.
        database: Schema to connect to. Defaults to "mysql".
        replication_status_statement: Statement used to read replica status.
        pool_size: Size of the connection pool shared by requests.
        connect_timeout: Connection timeout in seconds.
    """

    user: str
    password: str
    host: str = "localhost"
    port: int = DEFAULT_DATABASE_PORT
    socket: str | None = None
    database: str = "mysql"
    replication_status_statement: str = "SHOW SLAVE STATUS"
    pool_size: int = 5
    connect_timeout: int = 5

    def __post_init__(self) -> None:
        """Validate database settings."""
        self._validate_types()
        self._validate_credentials()
        self._validate_endpoint()
        self._validate_statement()
        self._validate_pool()

    def _validate_types(self) -> None:
        for field in ("user", "password", "host", "database"):
            _require_type(field, getattr(self, field), str)
        for field in ("port", "pool_size", "connect_timeout"):
            _require_type(field, getattr(self, field), int)
        if self.socket is not None:
            _require_type("socket", self.socket, str)

    def _validate_credentials(self) -> None:
        if not self.user or not self.user.strip():
            raise MySQLHealthConfigError("database user cannot be empty")

        if not self.password:
            raise MySQLHealthConfigError("database password cannot be empty")

    def _validate_endpoint(self) -> None:
        if self.socket is not None and not self.socket.strip():
            raise MySQLHealthConfigError("socket cannot be whitespace-only")

        if self.socket is None and (not self.host or not self.host.strip()):
            raise MySQLHealthConfigError("either host or socket must be provided")

        if not 1 <= self.port <= 65535:
            raise MySQLHealthConfigError(
                f"database port must be in range 1-65535, got: {self.port}"
            )

    def _validate_statement(self) -> None:
        if self.replication_status_statement not in REPLICATION_STATUS_STATEMENTS:
            raise MySQLHealthConfigError(
                f"replication_status_statement must be one of "
                f"{REPLICATION_STATUS_STATEMENTS}, got: {self.replication_status_statement!r}"
            )

    def _validate_pool(self) -> None:
        if self.pool_size < 1:
            raise MySQLHealthConfigError(
                f"pool_size must be at least 1, got: {self.pool_size}"
            )

        if self.connect_timeout < 1:
            raise MySQLHealthConfigError(
                f"connect_timeout must be at least 1 second, got: {self.connect_timeout}"
            )

    @property
    def uses_socket(self) -> bool:
        """True if the connection goes through a unix socket."""
        return self.socket is not None


@dataclass(frozen=True)
class ServiceSettings:
    """HTTP service settings.

    Attributes:
        listen_address: Address where the API listens for requests.
        listen_port: Port where the API listens (1024-65535).
        failure_status_code: HTTP status returned for a negative answer.
            A single fixed code, never randomized.
        metrics_enabled: Expose Prometheus metrics on /metrics.
        log_level: Name of the root logging level.
        master_marker_path: File whose presence forces the master role
            answer to succeed. An empty string disables the check.
    """

    listen_address: str = "0.0.0.0"
    listen_port: int = DEFAULT_LISTEN_PORT
    failure_status_code: int = DEFAULT_FAILURE_STATUS_CODE
    metrics_enabled: bool = False
    log_level: str = "INFO"
    master_marker_path: str = DEFAULT_MASTER_MARKER_PATH

    def __post_init__(self) -> None:
        """Validate service settings."""
        _require_type("listen_address", self.listen_address, str)
        _require_type("listen_port", self.listen_port, int)
        _require_type("failure_status_code", self.failure_status_code, int)
        _require_type("metrics_enabled", self.metrics_enabled, bool)
        _require_type("log_level", self.log_level, str)
        _require_type("master_marker_path", self.master_marker_path, str)

        if not self.listen_address or not self.listen_address.strip():
            raise MySQLHealthConfigError("listen_address cannot be empty")

        if not 1024 <= self.listen_port <= 65535:
            raise MySQLHealthConfigError(
                f"API port out of allowed ports range (1024-65535), got: {self.listen_port}"
            )

        if not 400 <= self.failure_status_code <= 599:
            raise MySQLHealthConfigError(
                f"failure_status_code must be a 4xx or 5xx code, got: {self.failure_status_code}"
            )

        if self.log_level.upper() not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise MySQLHealthConfigError(f"unknown log_level: {self.log_level!r}")
