import logging
from typing import Optional

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorCollection

from mongodb_isolation import config

logger = logging.getLogger(__name__)


async def connect(
    uri: Optional[str] = None,
    db_name: Optional[str] = None,
    collection_name: Optional[str] = None,
) -> tuple[AsyncIOMotorClient, AsyncIOMotorCollection]:
    """Open a client and resolve the accounts collection.

    The client is lazy, so a ``ping`` is issued to surface connectivity
    errors here. Those errors are not caught.
    """
    uri = uri or config.MONGO_URI
    db_name = db_name or config.MONGO_DB
    collection_name = collection_name or config.MONGO_COLLECTION

    logger.debug("Connecting to %s", uri)
    client = AsyncIOMotorClient(uri)
    try:
        await client.admin.command("ping")
    except Exception:
        client.close()
        raise

    logger.debug("Using collection %s.%s", db_name, collection_name)
    return client, client[db_name][collection_name]
