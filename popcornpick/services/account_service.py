import logging
from typing import List, Union
from fastapi import status
from sqlalchemy.orm import Session
from popcornpick.core.auth import MAX_PASSWORD_BYTES, get_password_hash, verify_password
from popcornpick.core.exceptions import (
    ValidationException, EmailTakenException, UserNotFoundException, WrongPasswordException
)
from popcornpick.core.validation import is_valid_email, parse_tmdb_id
from popcornpick.repositories.user_repository import UserRepository, WatchlistRepository
from popcornpick.models.user import User

logger = logging.getLogger(__name__)

class AccountService:
    """Users and their watchlists"""

    def __init__(self, db: Session, bcrypt_rounds: int = 10):
        self.db = db
        self.bcrypt_rounds = bcrypt_rounds
        self.user_repository = UserRepository(db)
        self.watchlist_repository = WatchlistRepository(db)

    def get_user(self, user_id: int) -> User:
        user = self.user_repository.get(user_id)
        if not user:
            raise UserNotFoundException()
        return user

    def create(self, name: str, email: str, raw_password: str) -> User:
        """Validate and register a new user.

        The existence check only exits early; a duplicate that slips past it
        is rejected by the unique constraint on ``users.email`` and surfaces
        as the same ``EmailTakenException``.
        """
        name = (name or "").strip()
        email = (email or "").strip()
        if not name or not email or not raw_password:
            raise ValidationException("All fields are required")

        if not is_valid_email(email):
            raise ValidationException("Invalid email address")

        if len(raw_password.encode("utf-8")) > MAX_PASSWORD_BYTES:
            raise ValidationException("Password is too long")

        if self.user_repository.email_exists(email):
            raise EmailTakenException()

        password_hash = get_password_hash(raw_password, rounds=self.bcrypt_rounds)
        user = self.user_repository.create_user(name=name, email=email, password_hash=password_hash)
        logger.info(f"User created with ID: {user.id}")
        return user

    def authenticate(self, email: str, raw_password: str) -> User:
        email = (email or "").strip()
        if not email or not raw_password:
            raise ValidationException("All fields are required")

        user = self.user_repository.get_by_email(email)
        if not user:
            raise UserNotFoundException(status_code=status.HTTP_400_BAD_REQUEST)

        if not verify_password(raw_password, user.password_hash):
            raise WrongPasswordException()

        return user

    def add_to_watchlist(self, user_id: int, movie_id: Union[str, int]) -> bool:
        """Idempotent set-add; True when the id was newly added"""
        tmdb_id = parse_tmdb_id(movie_id)
        if not self.user_repository.exists(id=user_id):
            raise UserNotFoundException()
        added = self.watchlist_repository.add(user_id, tmdb_id)
        if added:
            logger.info(f"User {user_id} added {tmdb_id} to watchlist")
        return added

    def get_watchlist(self, user_id: int) -> List[int]:
        if not self.user_repository.exists(id=user_id):
            raise UserNotFoundException()
        return self.watchlist_repository.list_ids(user_id)
