"""
HTTP Transport

POSTs serialized request bodies to command paths under a fixed base URL and
decodes the replies. Every failure surfaces as a TransportError.
"""

import logging
from typing import Any, Dict, Optional, Union

import httpx

from signer_client.shared.codec import JsonCodec
from signer_client.shared.constants import (
    DEFAULT_TIMEOUT,
    DEFAULT_USER_AGENT,
    JSON_CONTENT_TYPE,
    SUPPORTED_URL_SCHEMES,
)
from signer_client.shared.exceptions import (
    CodecError,
    ConnectionTimeoutError,
    ConstructionError,
    HttpStatusError,
    TransportError,
)
from signer_client.shared.protocols import Transport

logger = logging.getLogger(__name__)


def normalize_base_url(server_url: Union[str, httpx.URL]) -> str:
    """
    Validate a server URL and make sure command paths resolve beneath it.
    
    Args:
        server_url: Absolute http(s) URL of the signing service.
        
    Returns:
        The URL as a string ending in a slash.
        
    Raises:
        ConstructionError: If the URL is malformed or not http(s).
    """
    try:
        url = httpx.URL(str(server_url))
    except (httpx.InvalidURL, TypeError, ValueError) as e:
        raise ConstructionError(f"Invalid server URL {server_url!r}: {e}", server_url=str(server_url)) from e
    
    if url.scheme not in SUPPORTED_URL_SCHEMES or not url.host:
        raise ConstructionError(
            f"Invalid server URL {server_url!r}: expected an absolute http or https URL",
            server_url=str(server_url)
        )

    if url.query or url.fragment:
        raise ConstructionError(
            f"Invalid server URL {server_url!r}: query strings and fragments are not supported",
            server_url=str(server_url)
        )

    if not url.path.endswith("/"):
        url = url.copy_with(path=url.path + "/")
    return str(url)


class HttpTransport(Transport):
    """
    Transport bound to one signing service base URL.
    
    Makes a single attempt per call. Retry policy and request ordering are
    the caller's concern; timeouts are whatever httpx is configured with.
    """
    
    def __init__(self,
                 server_url: Union[str, httpx.URL],
                 *,
                 timeout: Optional[float] = DEFAULT_TIMEOUT,
                 user_agent: str = DEFAULT_USER_AGENT,
                 codec: Optional[JsonCodec] = None,
                 client: Optional[httpx.AsyncClient] = None) -> None:
        """
        Initialize the transport.
        
        Args:
            server_url: Base URL of the signing service.
            timeout: Transport timeout in seconds, None to wait indefinitely.
            user_agent: User-Agent header sent with every request.
            codec: Body codec, JSON by default.
            client: Pre-built httpx client. The transport does not close it.
            
        Raises:
            ConstructionError: If server_url is malformed.
        """
        self.base_url = normalize_base_url(server_url)
        self.codec = codec or JsonCodec()
        self._headers: Dict[str, str] = {
            "Content-Type": JSON_CONTENT_TYPE,
            "Accept": JSON_CONTENT_TYPE,
            "User-Agent": user_agent,
        }
        self._owns_client = client is None
        self._client = client if client is not None else httpx.AsyncClient(timeout=timeout)
    
    def url_for(self, path: str) -> str:
        """Get the absolute URL of a command path."""
        return self.base_url + path.lstrip("/")
    
    async def post(self, path: str, body: Any) -> Any:
        """
        POST a body to a command path and decode the reply.
        
        Args:
            path: Command path relative to the base URL.
            body: Value to serialize as the request body.
            
        Returns:
            The decoded response body.
            
        Raises:
            TransportError: On encode, connection, timeout, status or decode failure.
        """
        url = self.url_for(path)
        
        try:
            content = self.codec.encode(body)
        except CodecError as e:
            raise TransportError(f"Failed to encode request for {path}: {e}", command=path, address=url) from e
        
        try:
            response = await self._client.post(url, content=content, headers=self._headers)
            response.raise_for_status()
        except httpx.TimeoutException as e:
            logger.warning(f"Request to {url} timed out: {e}")
            raise ConnectionTimeoutError(f"Request to {path} timed out: {e}", command=path, address=url) from e
        except httpx.HTTPStatusError as e:
            status_code = e.response.status_code
            logger.warning(f"Request to {url} failed with status {status_code}")
            raise HttpStatusError(
                f"Request to {path} failed with status {status_code}",
                command=path, address=url, status_code=status_code
            ) from e
        except httpx.HTTPError as e:
            logger.warning(f"Request to {url} failed: {e}")
            raise TransportError(f"Request to {path} failed: {e}", command=path, address=url) from e
        
        try:
            return self.codec.decode(response.content)
        except CodecError as e:
            logger.warning(f"Malformed response body from {url}: {e}")
            raise TransportError(
                f"Malformed response from {path}: {e}",
                command=path, address=url, status_code=response.status_code
            ) from e
    
    async def aclose(self) -> None:
        """Close the underlying httpx client if this transport created it."""
        if self._owns_client:
            await self._client.aclose()
    
    def __repr__(self) -> str:
        return f"HttpTransport(base_url={self.base_url!r})"
