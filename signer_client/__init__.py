"""
Signer Client Package

HTTP connection adapter between a wallet and a remote signing service.
"""

from .client import SignerClient
from .client.commands import COMMANDS, Command
from .shared.constants import VERSION as __version__
from .shared.exceptions import (
    SignerClientError,
    ConstructionError,
    MissingNetworkError,
    TransportError,
)
from .shared.models import Envelope, GET_REQUEST, RemoteResult

__all__ = [
    "SignerClient",
    "Command",
    "COMMANDS",
    "Envelope",
    "GET_REQUEST",
    "RemoteResult",
    "SignerClientError",
    "ConstructionError",
    "MissingNetworkError",
    "TransportError",
    "__version__",
]
