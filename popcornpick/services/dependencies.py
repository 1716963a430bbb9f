from fastapi import Depends
from sqlalchemy.orm import Session
from popcornpick.core.config import Settings, get_settings
from popcornpick.core.gateway import UpstreamGateway
from popcornpick.core.tmdb_service import get_gateway
from popcornpick.db import get_db
from popcornpick.services.account_service import AccountService
from popcornpick.services.movie_cache_service import MovieCacheService

def get_account_service(
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
) -> AccountService:
    return AccountService(db, bcrypt_rounds=settings.BCRYPT_ROUNDS)

def get_movie_cache_service(
    db: Session = Depends(get_db),
    gateway: UpstreamGateway = Depends(get_gateway),
) -> MovieCacheService:
    return MovieCacheService(db, gateway)
