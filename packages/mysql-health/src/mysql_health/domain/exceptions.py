"""Domain exceptions.

Exception hierarchy:
- MySQLHealthConfigError: Base domain exception for configuration errors.
  Raised by settings entities and config parsers when validation fails.
  - DatabaseUnreachableError: Initial connectivity check failed.
- ProbeUnavailableError: A diagnostic query could not be executed.
  Never escapes the signal probe; it is mapped to the negative signal.
"""


class MySQLHealthConfigError(Exception):
    """Raised when service or database configuration is invalid.

    This is the base exception for all domain-level configuration errors.
    It is the only error class that is allowed to abort start-up.
    """

    pass


class DatabaseUnreachableError(MySQLHealthConfigError):
    """Raised when the start-up connectivity check against the database fails.

    Attributes:
        message: Human-readable error description.
        original_error: The underlying driver exception (optional).
    """

    def __init__(
        self,
        message: str,
        original_error: Exception | None = None,
    ) -> None:
        """Initialize DatabaseUnreachableError.

        Args:
            message: Human-readable error description.
            original_error: The underlying exception that caused the failure.
        """
        super().__init__(message)
        self.message = message
        self.original_error = original_error


class ProbeUnavailableError(Exception):
    """Raised by a query port when a diagnostic statement fails.

    Attributes:
        statement: The SQL statement that failed.
        original_error: The underlying driver exception (optional).
    """

    def __init__(
        self,
        statement: str,
        original_error: Exception | None = None,
    ) -> None:
        super().__init__(f"Diagnostic query failed: {statement!r}: {original_error}")
        self.statement = statement
        self.original_error = original_error
