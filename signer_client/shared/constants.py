"""
Application Constants

Defines constants used throughout the signer client.
"""

VERSION = "1.0.0"

# Command names (remote endpoint paths)
SYNC_COMMAND = "sync"
SBT_SYNC_COMMAND = "sbt_sync"
INITIAL_SYNC_COMMAND = "initial_sync"
SIGN_COMMAND = "sign"
ADDRESS_COMMAND = "address"
TRANSACTION_DATA_COMMAND = "transaction_data"
IDENTITY_COMMAND = "identity"
SIGN_WITH_TRANSACTION_DATA_COMMAND = "sign_with_transaction_data"
TRANSFER_PARAMETERS_COMMAND = "transfer_parameters"

# Wire format constants
GET_REQUEST_MARKER = "Get"
ENVELOPE_NETWORK_KEY = "network"
ENVELOPE_MESSAGE_KEY = "message"
RESULT_OK_KEY = "Ok"
RESULT_ERR_KEY = "Err"
JSON_CONTENT_TYPE = "application/json"
DEFAULT_ENCODING = "utf-8"

# Default connection settings
DEFAULT_SERVER_URL = "http://127.0.0.1:29987/"
DEFAULT_TIMEOUT = 30.0
DEFAULT_USER_AGENT = f"signer-client/{VERSION}"
SUPPORTED_URL_SCHEMES = ("http", "https")

# Log format constants
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
