"""
Pytest Configuration and Shared Fixtures

Provides a simulated signing service and client factories for the test suite.
"""

import json
from typing import Any, Callable, Dict, List, Optional, Tuple, Union

import httpx
import pytest

from signer_client.client import SignerClient
from signer_client.client.network import HttpTransport
from signer_client.shared.config import ClientConfig


TEST_SERVER_URL = "http://signer.test/"

Reply = Union[Tuple[int, Any], Callable[[httpx.Request], httpx.Response], Exception]


class FakeSignerService:
    """
    In-memory signing service behind an httpx.MockTransport.

    Replies are registered per command path. Every received request is kept
    so tests can assert on paths and decoded bodies.
    """

    def __init__(self) -> None:
        self.requests: List[httpx.Request] = []
        self._replies: Dict[str, Reply] = {}

    def reply(self, command: str, body: Any, status_code: int = 200) -> None:
        """Answer command with a JSON body."""
        self._replies[command] = (status_code, body)

    def reply_raw(self, command: str, content: bytes, status_code: int = 200) -> None:
        """Answer command with raw bytes."""
        self._replies[command] = lambda request: httpx.Response(status_code, content=content)

    def fail(self, command: str, error: Exception) -> None:
        """Raise error from the transport when command is requested."""
        self._replies[command] = error

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        command = request.url.path.rsplit("/", 1)[-1]
        reply = self._replies.get(command)
        if reply is None:
            return httpx.Response(404, json={"error": f"unknown command {command}"})
        if isinstance(reply, Exception):
            raise reply
        if callable(reply):
            return reply(request)
        status_code, body = reply
        return httpx.Response(status_code, json=body)

    @property
    def paths(self) -> List[str]:
        return [request.url.path for request in self.requests]

    def body(self, index: int = -1) -> Any:
        """Decoded JSON body of a received request."""
        return json.loads(self.requests[index].content)


@pytest.fixture
def signer_service() -> FakeSignerService:
    """Provide a fresh simulated signing service."""
    return FakeSignerService()


@pytest.fixture
def http_transport(signer_service: FakeSignerService) -> HttpTransport:
    """Provide an HttpTransport wired to the simulated service."""
    client = httpx.AsyncClient(transport=httpx.MockTransport(signer_service.handler))
    return HttpTransport(TEST_SERVER_URL, client=client)


@pytest.fixture
def make_client(http_transport: HttpTransport) -> Callable[..., SignerClient]:
    """Provide a factory for signer clients sharing the simulated service."""
    def factory(network: Optional[str] = None) -> SignerClient:
        return SignerClient(TEST_SERVER_URL, network=network, transport=http_transport)
    return factory


@pytest.fixture
def client_config() -> ClientConfig:
    """Provide a test client configuration."""
    return ClientConfig(
        server_url=TEST_SERVER_URL,
        network="TestNet",
        timeout=5.0
    )


@pytest.fixture
def sample_sync_request() -> Dict[str, Any]:
    """Provide a sample sync request payload."""
    return {
        "with_recovery": False,
        "origin_checkpoint": {"receiver_index": [0, 12], "sender_index": 7},
        "data": {"receivers": [], "senders": []},
    }


@pytest.fixture
def sample_sign_request() -> Dict[str, Any]:
    """Provide a sample sign request payload."""
    return {
        "transaction": {"ToPrivate": {"id": 1, "value": "100"}},
        "metadata": None,
    }


@pytest.fixture
def temp_log_file(tmp_path) -> str:
    """Provide a temporary log file path."""
    return str(tmp_path / "test.log")


@pytest.fixture(autouse=True)
def reset_logging():
    """Reset logging configuration between tests."""
    import logging
    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    yield

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
