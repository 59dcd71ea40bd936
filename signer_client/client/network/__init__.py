"""
Client Network Layer

Provides the HTTP transport used to reach the signing service.
"""

from .transport import HttpTransport, normalize_base_url

__all__ = ["HttpTransport", "normalize_base_url"]
