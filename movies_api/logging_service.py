"""
Service wrapper that logs every call without changing its outcome.
"""

import time

from movies_api.logger import logger
from movies_api.models import Movie, MovieUpdate
from movies_api.service import Service
from movies_api.utils import elapsed_ms


def _describe(movie: Movie) -> str:
    return (
        f"id: {movie.id}, name: {movie.name}, release_year: {movie.release_year}, "
        f"rating: {movie.rating}, genres: {movie.genres}, director: {movie.director}"
    )


class LoggingService:
    def __init__(self, next_service: Service):
        self.next = next_service

    def _log(self, operation: str, init: float, error, details: list[str]) -> None:
        lines = [f"{operation} results"] + [f" - {line}" for line in details]
        lines.append(f" - err: {error}")
        lines.append(f" - time: {elapsed_ms(init):.2f} ms")
        if error is None:
            logger.info("\n".join(lines))
        else:
            logger.error("\n".join(lines))

    async def get_movie(self, movie_id: str) -> Movie:
        init = time.perf_counter()
        try:
            movie = await self.next.get_movie(movie_id)
        except Exception as exc:
            self._log("get_movie", init, exc, [f"movie_id: {movie_id}"])
            raise
        self._log("get_movie", init, None, [f"movie_id: {movie_id}", _describe(movie)])
        return movie

    async def get_all_movies(self) -> list[Movie]:
        init = time.perf_counter()
        try:
            movies = await self.next.get_all_movies()
        except Exception as exc:
            self._log("get_all_movies", init, exc, [])
            raise
        self._log("get_all_movies", init, None, [_describe(m) for m in movies])
        return movies

    async def create_movie(self, movie: Movie) -> str:
        init = time.perf_counter()
        try:
            movie_id = await self.next.create_movie(movie)
        except Exception as exc:
            self._log("create_movie", init, exc, [_describe(movie)])
            raise
        self._log("create_movie", init, None, [_describe(movie), f"id: {movie_id}"])
        return movie_id

    async def update_movie(self, movie_id: str, movie: MovieUpdate) -> None:
        init = time.perf_counter()
        try:
            await self.next.update_movie(movie_id, movie)
        except Exception as exc:
            self._log("update_movie", init, exc, [f"movie_id: {movie_id}", f"update: {movie}"])
            raise
        self._log("update_movie", init, None, [f"movie_id: {movie_id}", f"update: {movie}"])

    async def delete_movie(self, movie_id: str) -> None:
        init = time.perf_counter()
        try:
            await self.next.delete_movie(movie_id)
        except Exception as exc:
            self._log("delete_movie", init, exc, [f"movie_id: {movie_id}"])
            raise
        self._log("delete_movie", init, None, [f"movie_id: {movie_id}"])
