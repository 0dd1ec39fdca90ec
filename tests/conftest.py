"""
In-memory stand-ins for the asyncpg pool, connection and transaction.

Only the statements issued by MovieDatabase are understood.
"""

import copy
import re
from contextlib import asynccontextmanager
from uuid import uuid4

import pytest

SET_FRAGMENT = re.compile(r"(\w+) = \$(\d+)")
WHERE_ID = re.compile(r"where id = \$(\d+)")


def _normalize(query: str) -> str:
    return " ".join(query.split()).lower()


class FakeTransaction:
    def __init__(self, pool):
        self.pool = pool

    async def __aenter__(self):
        self.snapshot = copy.deepcopy(self.pool.rows)
        return self

    async def __aexit__(self, exc_type, exc, tb):
        if exc_type is None:
            self.pool.commits += 1
        else:
            self.pool.rows = self.snapshot
            self.pool.rollbacks += 1
        return False


class FakeConnection:
    def __init__(self, pool):
        self.pool = pool

    def transaction(self):
        return FakeTransaction(self.pool)

    def _matching(self, movie_id):
        return [row for row in self.pool.rows if str(row["id"]) == str(movie_id)]

    async def fetch(self, query, *args):
        query = _normalize(query)
        self.pool.queries.append((query, args))
        if self.pool.fail_with is not None:
            raise self.pool.fail_with
        if query.startswith("insert into movie"):
            name, release_year, rating, genres, director = args
            row = {
                "id": uuid4(),
                "name": name,
                "release_year": release_year,
                "rating": rating,
                "genres": list(genres) if genres is not None else None,
                "director": director,
            }
            self.pool.rows.append(row)
            return [{"id": row["id"]}]
        if "where id = $1" in query:
            return [dict(row) for row in self._matching(args[0])]
        return [dict(row) for row in self.pool.rows]

    async def execute(self, query, *args):
        query = _normalize(query)
        self.pool.queries.append((query, args))
        if self.pool.fail_with is not None:
            raise self.pool.fail_with
        movie_id = args[int(WHERE_ID.search(query).group(1)) - 1]
        matching = self._matching(movie_id)
        if query.startswith("delete"):
            for row in matching:
                self.pool.rows.remove(row)
            return f"DELETE {len(matching)}"
        set_clause = query[len("update movie set "):query.index(" where ")]
        for row in matching:
            for column, placeholder in SET_FRAGMENT.findall(set_clause):
                row[column] = args[int(placeholder) - 1]
        return f"UPDATE {len(matching)}"


class FakePool:
    def __init__(self):
        self.rows = []
        self.queries = []
        self.commits = 0
        self.rollbacks = 0
        self.fail_with = None

    @asynccontextmanager
    async def acquire(self):
        yield FakeConnection(self)


@pytest.fixture
def pool():
    return FakePool()
