from .base_repository import BaseRepository
from .movie_repository import MovieRepository
from .user_repository import UserRepository, WatchlistRepository

__all__ = [
    "BaseRepository",
    "MovieRepository",
    "UserRepository",
    "WatchlistRepository"
]
