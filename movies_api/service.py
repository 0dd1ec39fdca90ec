"""
Service layer: delegates to the database and annotates failures with the
operation that produced them.
"""

from typing import Protocol

from movies_api.exceptions import ServiceError
from movies_api.models import Movie, MovieUpdate


class Database(Protocol):
    async def get(self, movie_id: str) -> Movie: ...

    async def get_all(self) -> list[Movie]: ...

    async def insert(self, movie: Movie) -> str: ...

    async def update(self, movie_id: str, movie: MovieUpdate) -> None: ...

    async def delete(self, movie_id: str) -> None: ...


class Service(Protocol):
    async def get_movie(self, movie_id: str) -> Movie: ...

    async def get_all_movies(self) -> list[Movie]: ...

    async def create_movie(self, movie: Movie) -> str: ...

    async def update_movie(self, movie_id: str, movie: MovieUpdate) -> None: ...

    async def delete_movie(self, movie_id: str) -> None: ...


class MovieService:
    def __init__(self, db: Database):
        self.db = db

    async def get_movie(self, movie_id: str) -> Movie:
        try:
            return await self.db.get(movie_id)
        except Exception as exc:
            raise ServiceError("error fetching by id", exc) from exc

    async def get_all_movies(self) -> list[Movie]:
        try:
            return await self.db.get_all()
        except Exception as exc:
            raise ServiceError("error fetching movies", exc) from exc

    async def create_movie(self, movie: Movie) -> str:
        try:
            return await self.db.insert(movie)
        except Exception as exc:
            raise ServiceError("error creating movie", exc) from exc

    async def update_movie(self, movie_id: str, movie: MovieUpdate) -> None:
        try:
            await self.db.update(movie_id, movie)
        except Exception as exc:
            raise ServiceError("error updating movie", exc) from exc

    async def delete_movie(self, movie_id: str) -> None:
        try:
            await self.db.delete(movie_id)
        except Exception as exc:
            raise ServiceError("error deleting movie", exc) from exc
