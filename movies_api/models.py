"""
Data models and types.
"""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Optional
from uuid import UUID


@dataclass
class Movie:
    id: Optional[UUID] = None
    name: str = ""
    release_year: int = 0
    rating: Decimal = Decimal(0)
    genres: list[str] = field(default_factory=list)
    director: str = ""


@dataclass
class MovieUpdate:
    """Partial update of a movie. None means the field was not supplied."""

    name: Optional[str] = None
    release_year: Optional[int] = None
    rating: Optional[Decimal] = None
    genres: Optional[list[str]] = None
    director: Optional[str] = None
