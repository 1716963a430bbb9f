from popcornpick.db import Base
from .movie import Movie
from .user import User, WatchlistItem

__all__ = ['Base', 'Movie', 'User', 'WatchlistItem']
