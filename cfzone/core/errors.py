"""
Errors raised by cfzone.

Everything the tool reports as a terminal condition derives from CfzoneError,
so the CLI can turn it into a single message and a non-zero exit code.
"""


class CfzoneError(Exception):
    """Base exception for cfzone."""


class ConfigurationError(CfzoneError):
    """Raised when configuration or credentials are missing or invalid."""


class ZoneParseError(CfzoneError):
    """Raised when the zone file cannot be read or parsed."""


class ProviderError(CfzoneError):
    """Raised when the DNS provider rejects a lookup or listing request."""


class ProviderMutationError(ProviderError):
    """Raised when a create, update or delete call fails."""

    def __init__(self, operation: str, record, reason):
        self.operation = operation
        self.record = record
        self.reason = reason
        super().__init__(f"Failed to {operation} record {record}: {reason}")


class PolicyAbort(CfzoneError):
    """Raised when the operator declines a confirmation prompt."""
