"""Tests for CosmosDBClient state handling that need no live account."""

import pytest

from src.clients import CosmosDBClient


class TestCosmosDBClientState:
    """Test CosmosDBClient before connect."""

    @pytest.fixture
    def client(self):
        return CosmosDBClient(
            endpoint="https://test.documents.azure.com:443/",
            key="secret-key",
            database_name="TestDb",
            container_name="TestProducts",
        )

    def test_products_requires_connection(self, client):
        with pytest.raises(RuntimeError, match="not connected"):
            client.products

    @pytest.mark.asyncio
    async def test_close_without_connect_is_noop(self, client):
        await client.close()

        with pytest.raises(RuntimeError):
            client.products

    def test_default_partition_key_is_id(self, client):
        assert client._partition_key_path == "/id"
