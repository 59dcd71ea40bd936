"""
Signer Client

The connection a wallet uses to drive a remote signing service over HTTP.
"""

import logging
from typing import Any, Awaitable, Optional, Union

import httpx

from signer_client.client.commands import Command, get_command
from signer_client.client.network import HttpTransport, normalize_base_url
from signer_client.shared.config import ClientConfig
from signer_client.shared.constants import (
    ADDRESS_COMMAND,
    DEFAULT_TIMEOUT,
    DEFAULT_USER_AGENT,
    IDENTITY_COMMAND,
    INITIAL_SYNC_COMMAND,
    SBT_SYNC_COMMAND,
    SIGN_COMMAND,
    SIGN_WITH_TRANSACTION_DATA_COMMAND,
    SYNC_COMMAND,
    TRANSACTION_DATA_COMMAND,
    TRANSFER_PARAMETERS_COMMAND,
)
from signer_client.shared.exceptions import (
    ConstructionError,
    InvalidMessageFormatError,
    MissingNetworkError,
    TransportError,
)
from signer_client.shared.models import GET_REQUEST, Envelope, Network, RemoteResult
from signer_client.shared.protocols import SignerConnection, Transport

logger = logging.getLogger(__name__)


class SignerClient(SignerConnection):
    """
    HTTP signer connection.

    Each operation wraps its request with the network selector at call time
    and returns an awaitable that performs exactly one POST to the command's
    path. The client keeps no per-request state, so one instance can be
    reused for the whole wallet session.

    The selector is plain mutable state without locking. An operation
    captures it when the operation is called, so a later set_network() never
    changes what an already issued operation sends. Callers that interleave
    networks can pass ``network=`` per call instead.
    """

    def __init__(self,
                 server_url: Optional[Union[str, httpx.URL]] = None,
                 *,
                 network: Optional[Network] = None,
                 timeout: Optional[float] = DEFAULT_TIMEOUT,
                 user_agent: str = DEFAULT_USER_AGENT,
                 transport: Optional[Transport] = None) -> None:
        """
        Initialize the client.

        Args:
            server_url: Base URL of the signing service.
            network: Initial network selector, None for no selector.
            timeout: Transport timeout in seconds.
            user_agent: User-Agent header for outgoing requests.
            transport: Transport to use instead of building an HttpTransport.
                server_url is still validated when both are given, but the
                injected transport decides where requests go.

        Raises:
            ConstructionError: If server_url is missing or malformed.
        """
        if transport is None:
            if server_url is None:
                raise ConstructionError("A server URL is required to build a signer client")
            transport = HttpTransport(server_url, timeout=timeout, user_agent=user_agent)
        elif server_url is not None:
            normalize_base_url(server_url)
        self.transport = transport
        self._network = network

    @classmethod
    def new(cls, server_url: Union[str, httpx.URL]) -> "SignerClient":
        """Build a client for server_url with no network selector."""
        return cls(server_url)

    @classmethod
    def from_config(cls, config: ClientConfig) -> "SignerClient":
        """Build a client from a validated configuration."""
        config.validate()
        return cls(
            config.server_url,
            network=config.network,
            timeout=config.effective_timeout,
            user_agent=config.user_agent,
        )

    @property
    def network(self) -> Optional[Network]:
        """Currently configured network selector."""
        return self._network

    def set_network(self, network: Optional[Network]) -> None:
        """Set or clear the network used to wrap subsequent requests."""
        self._network = network

    def wrap_request(self, request: Any, network: Optional[Network] = None) -> Envelope:
        """
        Pair a request with a network selector.

        Args:
            request: Request payload.
            network: Explicit selector; defaults to the configured one.

        Returns:
            Envelope carrying the request and the selector.

        Raises:
            MissingNetworkError: If no selector is given or configured.
        """
        selector = network if network is not None else self._network
        if selector is None:
            raise MissingNetworkError()
        return Envelope(network=selector, message=request)

    def submit(self, command_name: str, request: Any, *,
               network: Optional[Network] = None) -> Awaitable[Any]:
        """
        Dispatch a request to a named command.

        Wrapping happens before this method returns, so a missing selector
        fails here and nothing is sent.

        Args:
            command_name: Name of a command in the dispatch table.
            request: Request payload of the command's request type.
            network: Explicit selector for this call.

        Returns:
            Awaitable resolving to the decoded response.

        Raises:
            UnsupportedCommandError: If command_name is unknown.
            MissingNetworkError: If the command needs a selector and none is set.
        """
        command = get_command(command_name)
        if command.wrapped:
            try:
                body = self.wrap_request(request, network)
            except MissingNetworkError:
                raise MissingNetworkError(command=command.name) from None
            logger.debug(f"Dispatching {command.name} on network {body.network}")
        else:
            body = request
            logger.debug(f"Dispatching {command.name}")
        return self._send(command, body)

    async def _send(self, command: Command, body: Any) -> Any:
        reply = await self.transport.post(command.path, body)
        try:
            return command.decode(reply)
        except InvalidMessageFormatError as e:
            logger.warning(f"Unexpected {command.name} response shape: {e}")
            raise TransportError(f"Malformed {command.name} response: {e}", command=command.name) from e

    def sync(self, request: Any, *, network: Optional[Network] = None) -> Awaitable[RemoteResult]:
        return self.submit(SYNC_COMMAND, request, network=network)

    def sbt_sync(self, request: Any, *, network: Optional[Network] = None) -> Awaitable[RemoteResult]:
        return self.submit(SBT_SYNC_COMMAND, request, network=network)

    def initial_sync(self, request: Any, *, network: Optional[Network] = None) -> Awaitable[RemoteResult]:
        return self.submit(INITIAL_SYNC_COMMAND, request, network=network)

    def sign(self, request: Any, *, network: Optional[Network] = None) -> Awaitable[RemoteResult]:
        return self.submit(SIGN_COMMAND, request, network=network)

    def address(self) -> Awaitable[Optional[Any]]:
        """Fetch the signer's receiving address; None if it has none configured."""
        return self.submit(ADDRESS_COMMAND, GET_REQUEST)

    def transaction_data(self, request: Any, *, network: Optional[Network] = None) -> Awaitable[Any]:
        return self.submit(TRANSACTION_DATA_COMMAND, request, network=network)

    def identity_proof(self, request: Any, *, network: Optional[Network] = None) -> Awaitable[Any]:
        return self.submit(IDENTITY_COMMAND, request, network=network)

    def sign_with_transaction_data(self, request: Any, *,
                                   network: Optional[Network] = None) -> Awaitable[RemoteResult]:
        return self.submit(SIGN_WITH_TRANSACTION_DATA_COMMAND, request, network=network)

    def transfer_parameters(self) -> Awaitable[Any]:
        """Fetch the transfer parameter bundle the signer proves against."""
        return self.submit(TRANSFER_PARAMETERS_COMMAND, GET_REQUEST)

    async def aclose(self) -> None:
        """Release the transport."""
        await self.transport.aclose()

    async def __aenter__(self) -> "SignerClient":
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Async context manager exit."""
        await self.aclose()

    def __repr__(self) -> str:
        return f"SignerClient(transport={self.transport!r}, network={self._network!r})"
