from typing import Optional, List
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from popcornpick.repositories.base_repository import BaseRepository
from popcornpick.models.user import User, WatchlistItem
from popcornpick.core.exceptions import EmailTakenException

class UserRepository(BaseRepository[User]):
    """User repository with user-specific operations"""

    def __init__(self, db: Session):
        super().__init__(User, db)

    def get_by_email(self, email: str) -> Optional[User]:
        """Get user by email"""
        return self.filter_one_by(email=email)

    def email_exists(self, email: str) -> bool:
        """Check if email exists"""
        return self.exists(email=email)

    def create_user(self, name: str, email: str, password_hash: str) -> User:
        """Create new user; the unique email constraint has the final say"""
        try:
            return self.create({
                "name": name,
                "email": email,
                "password_hash": password_hash,
            })
        except IntegrityError:
            self.db.rollback()
            raise EmailTakenException()

class WatchlistRepository(BaseRepository[WatchlistItem]):
    """Per-user set of TMDB ids"""

    def __init__(self, db: Session):
        super().__init__(WatchlistItem, db)

    def contains(self, user_id: int, tmdb_id: int) -> bool:
        return self.exists(user_id=user_id, tmdb_id=tmdb_id)

    def add(self, user_id: int, tmdb_id: int) -> bool:
        """Set-add; returns False when the id was already present"""
        if self.contains(user_id, tmdb_id):
            return False
        try:
            self.create({"user_id": user_id, "tmdb_id": tmdb_id})
        except IntegrityError:
            # a concurrent add of the same pair won the insert
            self.db.rollback()
            return False
        return True

    def list_ids(self, user_id: int) -> List[int]:
        rows = (
            self.db.query(WatchlistItem.tmdb_id)
            .filter(WatchlistItem.user_id == user_id)
            .order_by(WatchlistItem.id)
            .all()
        )
        return [row[0] for row in rows]
