import logging

from mongodb_isolation.models import BASELINE_ACCOUNTS

logger = logging.getLogger(__name__)


async def setup_test_environment(coll) -> None:
    """Clear the collection and insert the baseline accounts."""
    deleted = await coll.delete_many({})
    logger.debug("Removed %d existing documents", deleted.deleted_count)

    await coll.insert_many([account.to_document() for account in BASELINE_ACCOUNTS])
    print("Test environment prepared.")
