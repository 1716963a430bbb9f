import logging
from fastapi import Depends
from .config import Settings, get_settings
from .gateway import UpstreamGateway
from .interfaces import TMDBConfig
from .tmdb_client import TMDBClient

logger = logging.getLogger(__name__)

class TMDBServiceFactory:
    """Factory class for creating TMDB services"""

    @staticmethod
    def create_config(settings: Settings) -> TMDBConfig:
        return TMDBConfig(
            api_key=settings.TMDB_API_KEY,
            base_url=settings.TMDB_BASE_URL,
            language=settings.TMDB_LANGUAGE,
            region=settings.TMDB_REGION,
            timeout=settings.TMDB_TIMEOUT,
        )

    @staticmethod
    def create_gateway(settings: Settings) -> UpstreamGateway:
        """Create a gateway backed by a new HTTP client"""
        if not settings.TMDB_API_KEY:
            logger.warning("TMDB_API_KEY is not set; upstream calls will be rejected")
        config = TMDBServiceFactory.create_config(settings)
        return UpstreamGateway(TMDBClient(config), region=config.region)

def get_gateway(settings: Settings = Depends(get_settings)):
    """Dependency to get the upstream gateway, closed after the request"""
    gateway = TMDBServiceFactory.create_gateway(settings)
    try:
        yield gateway
    finally:
        gateway.close()
