from decimal import Decimal
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from pydantic import BaseModel, StrictInt, StrictStr, field_validator
from starlette import status
from starlette.responses import JSONResponse, Response

from movies_api import config
from movies_api.db.postgres import MovieDatabase, create_pool
from movies_api.exceptions import MovieError
from movies_api.logger import logger
from movies_api.logging_service import LoggingService
from movies_api.models import Movie, MovieUpdate
from movies_api.service import MovieService, Service
from movies_api.utils import timed

app = FastAPI()


class MovieParams(BaseModel):
    name: StrictStr = ""
    release_year: StrictInt = 0
    rating: Decimal = Decimal(0)
    genres: list[StrictStr] = []
    director: StrictStr = ""

    @field_validator("genres", mode="before")
    @classmethod
    def null_genres_as_empty(cls, value):
        return [] if value is None else value


class MovieUpdateParams(BaseModel):
    name: Optional[StrictStr] = None
    release_year: Optional[StrictInt] = None
    rating: Optional[Decimal] = None
    genres: Optional[list[StrictStr]] = None
    director: Optional[StrictStr] = None


def _error_response(exc: MovieError) -> JSONResponse:
    return JSONResponse({"error": exc.message}, status_code=exc.status_code)


@app.exception_handler(RequestValidationError)
async def malformed_body_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    msg = "; ".join(
        f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}" for err in exc.errors()
    )
    logger.info(f"rejected malformed request to {request.url.path}: {msg}")
    return JSONResponse({"error": msg}, status_code=status.HTTP_400_BAD_REQUEST)


@app.on_event("startup")
@timed
async def startup_event():
    app.state.pool = await create_pool(config.get_database_url())
    app.state.service = LoggingService(MovieService(MovieDatabase(app.state.pool)))


@app.on_event("shutdown")
async def shutdown_event():
    await app.state.pool.close()


@app.get("/movies/{movie_id}")
async def get_movie(request: Request, movie_id: str) -> JSONResponse:
    service: Service = request.app.state.service
    try:
        movie = await service.get_movie(movie_id)
    except MovieError as exc:
        return _error_response(exc)
    return JSONResponse(jsonable_encoder(movie), status_code=status.HTTP_200_OK)


@app.get("/movies")
async def get_all_movies(request: Request) -> JSONResponse:
    service: Service = request.app.state.service
    try:
        movies = await service.get_all_movies()
    except MovieError as exc:
        return _error_response(exc)
    return JSONResponse(jsonable_encoder(movies), status_code=status.HTTP_200_OK)


@app.post("/movies")
async def create_movie(request: Request, body: MovieParams) -> JSONResponse:
    service: Service = request.app.state.service
    try:
        movie_id = await service.create_movie(Movie(**body.model_dump()))
    except MovieError as exc:
        return _error_response(exc)
    return JSONResponse({"id": movie_id}, status_code=status.HTTP_201_CREATED)


@app.put("/movies/{movie_id}")
async def update_movie(request: Request, movie_id: str, body: MovieUpdateParams) -> Response:
    service: Service = request.app.state.service
    try:
        await service.update_movie(movie_id, MovieUpdate(**body.model_dump()))
    except MovieError as exc:
        return _error_response(exc)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@app.delete("/movies/{movie_id}")
async def delete_movie(request: Request, movie_id: str) -> Response:
    service: Service = request.app.state.service
    try:
        await service.delete_movie(movie_id)
    except MovieError as exc:
        return _error_response(exc)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


if __name__ == "__main__":
    uvicorn.run(app, host=config.HOST, port=config.PORT)
