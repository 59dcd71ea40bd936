"""
Command Table

Every remote capability of the signing service is one entry in this table.
Adding a capability means adding an entry, not new control flow.
"""

from dataclasses import dataclass
from typing import Any, Callable, Dict

from signer_client.shared.constants import (
    ADDRESS_COMMAND,
    IDENTITY_COMMAND,
    INITIAL_SYNC_COMMAND,
    SBT_SYNC_COMMAND,
    SIGN_COMMAND,
    SIGN_WITH_TRANSACTION_DATA_COMMAND,
    SYNC_COMMAND,
    TRANSACTION_DATA_COMMAND,
    TRANSFER_PARAMETERS_COMMAND,
)
from signer_client.shared.exceptions import UnsupportedCommandError
from signer_client.shared.models import RemoteResult, passthrough


@dataclass(frozen=True)
class Command:
    """A named remote operation with a fixed request/response pair."""
    name: str
    request_type: str
    response_type: str
    wrapped: bool = True
    decode: Callable[[Any], Any] = passthrough

    @property
    def path(self) -> str:
        """Path of the endpoint relative to the server URL."""
        return self.name


def _register(*commands: Command) -> Dict[str, Command]:
    return {command.name: command for command in commands}


COMMANDS: Dict[str, Command] = _register(
    Command(SYNC_COMMAND, "SyncRequest", "Result[SyncResponse, SyncError]",
            decode=RemoteResult.from_wire),
    Command(SBT_SYNC_COMMAND, "SyncRequest", "Result[SyncResponse, SyncError]",
            decode=RemoteResult.from_wire),
    Command(INITIAL_SYNC_COMMAND, "InitialSyncRequest", "Result[SyncResponse, SyncError]",
            decode=RemoteResult.from_wire),
    Command(SIGN_COMMAND, "SignRequest", "Result[SignResponse, SignError]",
            decode=RemoteResult.from_wire),
    Command(ADDRESS_COMMAND, "GetRequest", "Optional[Address]", wrapped=False),
    Command(TRANSACTION_DATA_COMMAND, "TransactionDataRequest", "TransactionDataResponse"),
    Command(IDENTITY_COMMAND, "IdentityRequest", "IdentityResponse"),
    Command(SIGN_WITH_TRANSACTION_DATA_COMMAND, "SignRequest",
            "Result[SignWithTransactionDataResponse, SignError]",
            decode=RemoteResult.from_wire),
    Command(TRANSFER_PARAMETERS_COMMAND, "GetRequest", "TransferParameters", wrapped=False),
)


def get_command(name: str) -> Command:
    """
    Look up a command by name.

    Raises:
        UnsupportedCommandError: If the name is not in the table.
    """
    try:
        return COMMANDS[name]
    except KeyError:
        raise UnsupportedCommandError(name) from None
