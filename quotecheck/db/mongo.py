"""MongoDB connection setup using Motor async driver."""

import os
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase

# Configuration from environment variables with defaults
MONGODB_URL = os.getenv("MONGODB_URL", "mongodb://localhost:27017")
DATABASE_NAME = os.getenv("DATABASE_NAME", "quotecheck")

# Connect/selection timeout so requests fail fast if MongoDB is unavailable
CONNECT_TIMEOUT_MS = 5000

_client: AsyncIOMotorClient | None = None


async def get_database() -> AsyncIOMotorDatabase:
    """Get the database instance, creating the client on first use."""
    global _client
    if _client is None:
        _client = AsyncIOMotorClient(
            MONGODB_URL,
            serverSelectionTimeoutMS=CONNECT_TIMEOUT_MS,
            connectTimeoutMS=CONNECT_TIMEOUT_MS,
        )
    return _client[DATABASE_NAME]


async def close_database() -> None:
    """Close the database connection."""
    global _client
    if _client is not None:
        _client.close()
        _client = None


def set_client(client: AsyncIOMotorClient | None) -> None:
    """Replace the client instance (used by tests to inject a mock)."""
    global _client
    _client = client
