"""
Type Protocols and Interfaces

Defines protocol interfaces for structural typing throughout the signer client.
"""

from typing import Any, Awaitable, Optional, Protocol, runtime_checkable
from abc import abstractmethod

from .models import Network, RemoteResult


@runtime_checkable
class Transport(Protocol):
    """Protocol for the HTTP transport the client dispatches commands over."""

    @abstractmethod
    async def post(self, path: str, body: Any) -> Any:
        """
        POST a serialized body to a path relative to the base address.

        Args:
            path: Command path.
            body: Value to serialize as the request body.

        Returns:
            The deserialized response body.

        Raises:
            TransportError: On connection, timeout, status or codec failure.
        """
        ...

    @abstractmethod
    async def aclose(self) -> None:
        """Release the underlying HTTP resources."""
        ...


@runtime_checkable
class SignerConnection(Protocol):
    """Protocol for the capability surface a wallet needs from a signer."""

    @abstractmethod
    def set_network(self, network: Optional[Network]) -> None:
        """Replace or clear the network selector used for later requests."""
        ...

    @abstractmethod
    def sync(self, request: Any, *, network: Optional[Network] = None) -> Awaitable[RemoteResult]:
        ...

    @abstractmethod
    def sbt_sync(self, request: Any, *, network: Optional[Network] = None) -> Awaitable[RemoteResult]:
        ...

    @abstractmethod
    def initial_sync(self, request: Any, *, network: Optional[Network] = None) -> Awaitable[RemoteResult]:
        ...

    @abstractmethod
    def sign(self, request: Any, *, network: Optional[Network] = None) -> Awaitable[RemoteResult]:
        ...

    @abstractmethod
    def address(self) -> Awaitable[Optional[Any]]:
        ...

    @abstractmethod
    def transaction_data(self, request: Any, *, network: Optional[Network] = None) -> Awaitable[Any]:
        ...

    @abstractmethod
    def identity_proof(self, request: Any, *, network: Optional[Network] = None) -> Awaitable[Any]:
        ...

    @abstractmethod
    def sign_with_transaction_data(self, request: Any, *,
                                   network: Optional[Network] = None) -> Awaitable[RemoteResult]:
        ...

    @abstractmethod
    def transfer_parameters(self) -> Awaitable[Any]:
        ...
