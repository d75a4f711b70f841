import asyncio
import logging

from mongodb_isolation import config
from mongodb_isolation.connector import connect
from mongodb_isolation.prober import probe_isolation_level
from mongodb_isolation.seeder import setup_test_environment


async def main() -> None:
    logging.basicConfig(level=config.LOG_LEVEL.upper())

    client, coll = await connect()
    try:
        print("Preparing test environment...")
        await setup_test_environment(coll)

        print("Testing transaction isolation level...")
        await probe_isolation_level(client, coll)

        print("Test completed.")
    finally:
        client.close()


def run() -> None:
    asyncio.run(main())
