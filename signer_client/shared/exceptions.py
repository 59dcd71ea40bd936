"""
Custom Exceptions

Defines custom exception classes for the signer client.
"""

from typing import Any, Optional


class SignerClientError(Exception):
    """Base exception class for all signer client errors."""
    pass


class ConfigurationError(SignerClientError):
    """Raised when configuration-related errors occur."""
    
    def __init__(self, message: str, details: Optional[dict] = None):
        super().__init__(message)
        self.details = details


class InvalidConfigurationError(ConfigurationError):
    """Raised when configuration is invalid."""
    pass


class MissingConfigurationError(ConfigurationError):
    """Raised when required configuration is missing."""
    pass


class ConstructionError(ConfigurationError):
    """Raised when a client cannot be built from the given server URL."""
    
    def __init__(self, message: str, server_url: Optional[str] = None):
        super().__init__(message, details={"server_url": server_url})
        self.server_url = server_url


class MissingNetworkError(SignerClientError):
    """
    Raised when a request needs a network selector and none is available.
    
    This is a caller contract violation. It is raised before anything is
    sent and is intentionally not a TransportError.
    """
    
    def __init__(self, message: str = "Unable to wrap request, missing network.",
                 command: Optional[str] = None):
        super().__init__(message)
        self.command = command


class ProtocolError(SignerClientError):
    """Raised when protocol-related errors occur."""
    
    def __init__(self, message: str, message_data: Optional[str] = None, expected_format: Optional[str] = None):
        super().__init__(message)
        self.message_data = message_data
        self.expected_format = expected_format


class InvalidMessageFormatError(ProtocolError):
    """Raised when a message on the wire has an unexpected shape."""
    pass


class UnsupportedCommandError(ProtocolError):
    """Raised when a command name is not in the dispatch table."""
    
    def __init__(self, command: str):
        super().__init__(f"Unsupported command: {command!r}")
        self.command = command


class CodecError(ProtocolError):
    """Raised when a value cannot be encoded or a body cannot be decoded."""
    pass


class NetworkError(SignerClientError):
    """Raised when network-related errors occur."""
    
    def __init__(self, message: str, operation: Optional[str] = None, address: Optional[str] = None):
        super().__init__(message)
        self.operation = operation
        self.address = address


class TransportError(NetworkError):
    """
    Raised when a request fails at the network or codec layer.
    
    Covers refused connections, transport timeouts, non-success statuses
    and malformed bodies. The underlying exception is chained as __cause__.
    """
    
    def __init__(self, message: str, command: Optional[str] = None,
                 address: Optional[str] = None, status_code: Optional[int] = None):
        super().__init__(message, operation=command, address=address)
        self.command = command
        self.status_code = status_code


class ConnectionTimeoutError(TransportError):
    """Raised when the transport times out."""
    pass


class HttpStatusError(TransportError):
    """Raised when the signing service answers with a non-success status."""
    pass


class RemoteOperationError(SignerClientError):
    """Raised by RemoteResult.unwrap() when the service reported a domain failure."""
    
    def __init__(self, message: str, error: Any = None):
        super().__init__(message)
        self.error = error
