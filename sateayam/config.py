"""Connection to the MongoDB database that backs the shop."""

from __future__ import annotations

import logging

from pymongo import MongoClient
from pymongo.database import Database

DEFAULT_URI = "mongodb://localhost:27017"
DEFAULT_DATABASE = "sateayammadura"
DEFAULT_TIMEOUT = 10.0

log = logging.getLogger(__name__)


def connect(
    uri: str = DEFAULT_URI,
    database_name: str = DEFAULT_DATABASE,
    timeout: float = DEFAULT_TIMEOUT,
) -> Database:
    """Connect to MongoDB, check the server answers a ping, and return the database.

    Any failure to reach the server is raised to the caller.
    """
    timeout_ms = int(timeout * 1000)
    client = MongoClient(
        uri,
        serverSelectionTimeoutMS=timeout_ms,
        connectTimeoutMS=timeout_ms,
    )
    try:
        client.admin.command("ping")
    except Exception:
        client.close()
        raise
    log.info("Connected to MongoDB")
    return client[database_name]