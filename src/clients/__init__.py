"""Client modules for external services."""

from src.clients.cosmosdb_client import CosmosDBClient

__all__ = ["CosmosDBClient"]
