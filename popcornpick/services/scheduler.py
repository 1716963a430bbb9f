import logging
from apscheduler.schedulers.background import BackgroundScheduler
from popcornpick.core.config import Settings
from popcornpick.core.exceptions import BaseAppException
from popcornpick.core.tmdb_service import TMDBServiceFactory
from popcornpick.db import SessionLocal
from popcornpick.services.movie_cache_service import MovieCacheService

logger = logging.getLogger(__name__)

def refresh_movie_cache(settings: Settings) -> None:
    """Scheduled job: refresh the trending cache in its own session"""
    db = SessionLocal()
    gateway = TMDBServiceFactory.create_gateway(settings)
    try:
        service = MovieCacheService(db, gateway)
        service.refresh_cache()
    except BaseAppException as e:
        logger.error(f"Scheduled cache refresh failed: {e.message}")
    finally:
        gateway.close()
        db.close()

def create_scheduler(settings: Settings) -> BackgroundScheduler:
    scheduler = BackgroundScheduler(timezone="UTC")
    scheduler.add_job(
        refresh_movie_cache,
        trigger="cron",
        hour=settings.SCHEDULE_HOUR,
        minute=settings.SCHEDULE_MINUTE,
        args=[settings],
        id="daily_movie_cache_refresh",
        replace_existing=True,
    )
    return scheduler
