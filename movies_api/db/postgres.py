"""
Functions and classes to interact with PostgreSQL database.
"""

from typing import Any

import asyncpg

from movies_api.exceptions import MovieNotFoundError, NoFieldsToUpdateError
from movies_api.logger import logger
from movies_api.models import Movie, MovieUpdate

MOVIE_COLUMNS = "id, name, release_year, rating, genres, director"
# order in which supplied fields appear in the SET clause
UPDATABLE_COLUMNS = ("name", "release_year", "rating", "genres", "director")


def _log_query(record) -> None:
    logger.debug(
        f"SQL {record.query!r} args={record.args} "
        f"elapsed={1000 * record.elapsed:.2f} ms exception={record.exception}"
    )


async def _init_connection(connection: asyncpg.Connection) -> None:
    connection.add_query_logger(_log_query)


async def create_pool(dsn: str) -> asyncpg.Pool:
    return await asyncpg.create_pool(dsn, init=_init_connection)


async def create_movie_table(pool: asyncpg.Pool) -> None:
    async with pool.acquire() as connection:
        with open("./sql/create_movie.sql", "r") as f:
            await connection.execute(f.read())


def _row_to_movie(row) -> Movie:
    return Movie(
        id=row["id"],
        name=row["name"],
        release_year=row["release_year"],
        rating=row["rating"],
        genres=row["genres"],
        director=row["director"],
    )


def _rows_affected(status: str) -> int:
    # asyncpg returns the command tag, e.g. "UPDATE 1" or "DELETE 0"
    return int(status.split()[-1])


def build_update_query(movie: MovieUpdate, movie_id: str) -> tuple[str, list[Any]]:
    """
    Build an UPDATE statement that sets only the supplied fields of `movie`.

    Placeholders are numbered in column order and the id always takes the
    last one. Raises NoFieldsToUpdateError when nothing was supplied, since
    the resulting SET clause would be empty.
    """
    statements = []
    params = []
    counter = 1
    for column in UPDATABLE_COLUMNS:
        value = getattr(movie, column)
        if value is None:
            continue
        statements.append(f"{column} = ${counter}")
        params.append(value)
        counter += 1

    if not statements:
        raise NoFieldsToUpdateError()

    params.append(movie_id)
    query = f"update movie set {', '.join(statements)} where id = ${counter}"
    return query, params


class MovieDatabase:
    """CRUD access to the movie table. Every write runs in its own transaction."""

    def __init__(self, pool: asyncpg.Pool):
        self.pool = pool

    async def get(self, movie_id: str) -> Movie:
        async with self.pool.acquire() as connection:
            rows = await connection.fetch(
                f"SELECT {MOVIE_COLUMNS} FROM movie WHERE id = $1", movie_id
            )
        if len(rows) != 1:
            raise MovieNotFoundError()
        return _row_to_movie(rows[0])

    async def get_all(self) -> list[Movie]:
        async with self.pool.acquire() as connection:
            rows = await connection.fetch(f"SELECT {MOVIE_COLUMNS} FROM movie")
        return [_row_to_movie(row) for row in rows]

    async def insert(self, movie: Movie) -> str:
        async with self.pool.acquire() as connection:
            async with connection.transaction():
                rows = await connection.fetch(
                    """
                    INSERT INTO movie (name, release_year, rating, genres, director)
                    VALUES ($1, $2, $3, $4, $5)
                    RETURNING id
                """,
                    movie.name,
                    movie.release_year,
                    movie.rating,
                    movie.genres,
                    movie.director,
                )
                if len(rows) != 1:
                    raise RuntimeError(f"expected one inserted row, got {len(rows)}")
        return str(rows[0]["id"])

    async def update(self, movie_id: str, movie: MovieUpdate) -> None:
        query, params = build_update_query(movie, movie_id)
        async with self.pool.acquire() as connection:
            async with connection.transaction():
                status = await connection.execute(query, *params)
                if _rows_affected(status) == 0:
                    raise MovieNotFoundError()

    async def delete(self, movie_id: str) -> None:
        async with self.pool.acquire() as connection:
            async with connection.transaction():
                status = await connection.execute("DELETE FROM movie WHERE id = $1", movie_id)
                if _rows_affected(status) == 0:
                    raise MovieNotFoundError()
