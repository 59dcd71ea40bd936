"""
Data Models

Defines the values exchanged with the signing service: the network envelope,
the no-payload get marker and the two-variant remote result.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Generic, Optional, TypeVar

from .constants import (
    ENVELOPE_MESSAGE_KEY,
    ENVELOPE_NETWORK_KEY,
    GET_REQUEST_MARKER,
    RESULT_ERR_KEY,
    RESULT_OK_KEY,
)
from .exceptions import InvalidMessageFormatError, MissingNetworkError, RemoteOperationError

# Network selectors are opaque identifiers such as "TestNet" or "MainNet".
Network = str

T = TypeVar("T")
E = TypeVar("E")


class GetRequest(Enum):
    """No-payload request marker for commands that only read from the signer."""
    GET = GET_REQUEST_MARKER
    
    def to_wire(self) -> str:
        """Convert the marker to its wire representation."""
        return self.value


GET_REQUEST = GetRequest.GET


@dataclass(frozen=True)
class Envelope(Generic[T]):
    """A request paired with the network it targets."""
    network: Network
    message: T
    
    def __post_init__(self) -> None:
        if self.network is None or self.network == "":
            raise MissingNetworkError()
        if not isinstance(self.network, str):
            raise TypeError(
                f"Network selector must be a string, got {type(self.network).__name__}"
            )
    
    def to_wire(self) -> Dict[str, Any]:
        """Convert envelope to its wire representation."""
        return {
            ENVELOPE_NETWORK_KEY: self.network,
            ENVELOPE_MESSAGE_KEY: self.message,
        }
    
    @classmethod
    def from_wire(cls, data: Any) -> "Envelope[Any]":
        """Create an envelope from its decoded wire representation."""
        if not isinstance(data, dict) or set(data) != {ENVELOPE_NETWORK_KEY, ENVELOPE_MESSAGE_KEY}:
            raise InvalidMessageFormatError(
                "Envelope must be an object with 'network' and 'message' keys",
                message_data=repr(data),
                expected_format='{"network": ..., "message": ...}'
            )
        return cls(network=data[ENVELOPE_NETWORK_KEY], message=data[ENVELOPE_MESSAGE_KEY])


@dataclass(frozen=True)
class RemoteResult(Generic[T, E]):
    """
    Outcome reported by the signing service for sync and sign commands.
    
    A successful HTTP exchange can still carry a domain failure such as a
    stale checkpoint or an invalid signing key. Those arrive here as the
    error variant and are passed through uninterpreted.
    """
    value: Optional[T] = None
    error: Optional[E] = None
    is_ok: bool = True
    
    @classmethod
    def ok(cls, value: T) -> "RemoteResult[T, Any]":
        """Create a success result."""
        return cls(value=value, error=None, is_ok=True)
    
    @classmethod
    def err(cls, error: E) -> "RemoteResult[Any, E]":
        """Create a failure result."""
        return cls(value=None, error=error, is_ok=False)
    
    @property
    def is_err(self) -> bool:
        """Check whether the service reported a failure."""
        return not self.is_ok
    
    def unwrap(self) -> T:
        """
        Return the success value.
        
        Raises:
            RemoteOperationError: If the result holds a failure.
        """
        if self.is_err:
            raise RemoteOperationError(f"Remote operation failed: {self.error!r}", error=self.error)
        return self.value  # type: ignore[return-value]
    
    def to_wire(self) -> Dict[str, Any]:
        """Convert result to its wire representation."""
        if self.is_ok:
            return {RESULT_OK_KEY: self.value}
        return {RESULT_ERR_KEY: self.error}
    
    @classmethod
    def from_wire(cls, data: Any) -> "RemoteResult[Any, Any]":
        """
        Create a result from its decoded wire representation.
        
        Args:
            data: A single-key object, either {"Ok": value} or {"Err": error}.
            
        Returns:
            The decoded result.
            
        Raises:
            InvalidMessageFormatError: If data is not one of the two variants.
        """
        if isinstance(data, dict) and len(data) == 1:
            if RESULT_OK_KEY in data:
                return cls.ok(data[RESULT_OK_KEY])
            if RESULT_ERR_KEY in data:
                return cls.err(data[RESULT_ERR_KEY])
        raise InvalidMessageFormatError(
            "Result must be an object with exactly one of 'Ok' or 'Err'",
            message_data=repr(data),
            expected_format='{"Ok": ...} | {"Err": ...}'
        )


def passthrough(data: Any) -> Any:
    """Decode a value the client relays without interpretation (null stays None)."""
    return data
