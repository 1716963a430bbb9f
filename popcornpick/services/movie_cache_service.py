import logging
import math
from typing import Any, Dict, List, Optional
from sqlalchemy.orm import Session
from popcornpick.core.gateway import UpstreamGateway
from popcornpick.models.movie import Movie
from popcornpick.repositories.movie_repository import MovieRepository

logger = logging.getLogger(__name__)

def to_cache_fields(item: Dict[str, Any]) -> Dict[str, Any]:
    """Denormalized fields copied from a TMDB trending entry"""
    return {
        "title": item.get("title"),
        "poster": item.get("poster_path"),
        "rating": item.get("vote_average"),
        "overview": item.get("overview"),
        "language": item.get("original_language"),
        "release_date": item.get("release_date"),
    }

class MovieCacheService:
    """Local copy of today's trending movies, read by search and filter"""

    def __init__(self, db: Session, gateway: Optional[UpstreamGateway] = None):
        self.db = db
        self.gateway = gateway
        self.movie_repository = MovieRepository(db)

    def refresh_cache(self) -> int:
        """Upsert today's trending movies; returns how many were processed"""
        results = self.gateway.fetch_daily_trending()
        count = 0
        for item in results:
            tmdb_id = item.get("id")
            if tmdb_id is None:
                logger.warning("Skipping trending entry without id")
                continue
            self.movie_repository.upsert(tmdb_id, to_cache_fields(item))
            count += 1
        logger.info(f"Movie cache refreshed with {count} movies")
        return count

    def search(self, q: Optional[str]) -> List[Movie]:
        return self.movie_repository.search_title((q or "").strip())

    def filter(self, rating: Optional[str] = None, language: Optional[str] = None) -> List[Movie]:
        min_rating = None
        if rating:
            try:
                min_rating = float(rating)
            except ValueError:
                logger.debug(f"Ignoring non-numeric rating filter: {rating}")
            if min_rating is not None and not math.isfinite(min_rating):
                min_rating = None
        return self.movie_repository.filter_by_rating_language(min_rating, (language or "").strip() or None)
