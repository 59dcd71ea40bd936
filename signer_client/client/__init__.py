"""
Signer Client Package

Provides the command table, HTTP transport and the signer connection.
"""

from .signer_client import SignerClient

__all__ = ["SignerClient"]
