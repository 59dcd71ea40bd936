"""
Unit tests for signer_client.shared.protocols module.
"""

import pytest

from signer_client.client import SignerClient
from signer_client.shared.models import GET_REQUEST
from signer_client.shared.protocols import SignerConnection, Transport


class RecordingTransport:
    """Duck-typed transport that answers every post from a dictionary."""
    
    def __init__(self, replies):
        self.replies = replies
        self.posts = []
        self.closed = False
    
    async def post(self, path, body):
        self.posts.append((path, body))
        return self.replies[path]
    
    async def aclose(self):
        self.closed = True


class TestTransportProtocol:
    """Test Transport protocol."""
    
    def test_protocol_structure(self):
        """Test that Transport protocol has required methods."""
        assert hasattr(Transport, 'post')
        assert hasattr(Transport, 'aclose')
    
    def test_duck_typed_transport(self):
        """Test that a plain class satisfies the protocol."""
        assert isinstance(RecordingTransport({}), Transport)
    
    def test_incomplete_transport(self):
        """Test that a class without aclose does not satisfy the protocol."""
        class PostOnly:
            async def post(self, path, body):
                return None
        
        assert not isinstance(PostOnly(), Transport)
    
    @pytest.mark.asyncio
    async def test_client_with_custom_transport(self):
        """Test that the client relays unencoded values to any transport."""
        transport = RecordingTransport({"sign": {"Err": "InvalidSigningKey"}, "address": None})
        client = SignerClient(transport=transport, network="TestNet")
        
        result = await client.sign({"transaction": 1})
        address = await client.address()
        await client.aclose()
        
        assert result.error == "InvalidSigningKey"
        assert address is None
        assert transport.posts[0][0] == "sign"
        assert transport.posts[0][1].network == "TestNet"
        assert transport.posts[0][1].message == {"transaction": 1}
        assert transport.posts[1] == ("address", GET_REQUEST)
        assert transport.closed


class TestSignerConnectionProtocol:
    """Test SignerConnection protocol."""
    
    def test_protocol_structure(self):
        """Test that the capability surface is complete."""
        for name in ("set_network", "sync", "sbt_sync", "initial_sync", "sign", "address",
                     "transaction_data", "identity_proof", "sign_with_transaction_data",
                     "transfer_parameters"):
            assert hasattr(SignerConnection, name)
    
    def test_client_satisfies_protocol(self):
        """Test that SignerClient satisfies the protocol."""
        client = SignerClient(transport=RecordingTransport({}))
        
        assert isinstance(client, SignerConnection)
