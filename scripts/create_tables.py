import asyncio

from movies_api import config
from movies_api.db.postgres import create_movie_table, create_pool
from movies_api.logger import logger


async def main():
    pool = await create_pool(config.get_database_url())

    logger.info("creating database tables")
    await create_movie_table(pool)
    logger.info("created all required tables")
    await pool.close()


if __name__ == "__main__":
    asyncio.run(main())
