"""Error types for dbmeta."""

from typing import Optional, Dict, Any


class DBMetaError(Exception):
    """Base exception for dbmeta errors."""

    def __init__(self, message: str, code: str = "DBMETA_ERROR", details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary for structured output."""
        return {
            "code": self.code,
            "message": self.message,
            "details": self.details,
        }


class ConnectionError(DBMetaError):
    """Error opening a database connection."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, code="CONNECTION_ERROR", details=details)


class MetadataAccessError(DBMetaError):
    """A metadata query failed in the underlying driver.

    The driver exception is chained as ``__cause__``.
    """

    def __init__(self, message: str, operation: Optional[str] = None, details: Optional[Dict[str, Any]] = None):
        details = dict(details or {})
        if operation:
            details["operation"] = operation
        super().__init__(message, code="METADATA_ACCESS_ERROR", details=details)
        self.operation = operation


class UnsupportedConnectionError(DBMetaError):
    """No metadata source is available for the given connection object."""

    def __init__(self, connection: Any):
        connection_type = f"{type(connection).__module__}.{type(connection).__name__}"
        super().__init__(
            f"Unsupported connection type: {connection_type}",
            code="UNSUPPORTED_CONNECTION",
            details={"connection_type": connection_type},
        )
