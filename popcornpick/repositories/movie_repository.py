from typing import Any, Dict, List, Optional
from sqlalchemy.orm import Session
from popcornpick.repositories.base_repository import BaseRepository
from popcornpick.models.movie import Movie

class MovieRepository(BaseRepository[Movie]):
    """Repository for cached movie records"""

    def __init__(self, db: Session):
        super().__init__(Movie, db)

    def get_by_tmdb_id(self, tmdb_id: int) -> Optional[Movie]:
        return self.filter_one_by(tmdb_id=tmdb_id)

    def upsert(self, tmdb_id: int, fields: Dict[str, Any]) -> Movie:
        """Create or overwrite the record keyed by tmdb_id"""
        existing = self.get_by_tmdb_id(tmdb_id)
        if existing:
            return self.update(existing, fields)
        return self.create({"tmdb_id": tmdb_id, **fields})

    def search_title(self, q: str) -> List[Movie]:
        """Case-insensitive substring match on title"""
        query = self.db.query(Movie)
        if q:
            escaped = q.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
            query = query.filter(Movie.title.ilike(f"%{escaped}%", escape="\\"))
        return query.order_by(Movie.id).all()

    def filter_by_rating_language(self, min_rating: Optional[float] = None, language: Optional[str] = None) -> List[Movie]:
        query = self.db.query(Movie)
        if min_rating is not None:
            query = query.filter(Movie.rating >= min_rating)
        if language:
            query = query.filter(Movie.language == language)
        return query.order_by(Movie.id).all()
