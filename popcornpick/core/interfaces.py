from abc import ABC, abstractmethod
from typing import Dict, Optional
from dataclasses import dataclass

@dataclass
class TMDBConfig:
    """Configuration class for TMDB API"""
    api_key: str
    base_url: str = "https://api.themoviedb.org/3"
    language: Optional[str] = None
    region: str = "IN"  # watch-provider region surfaced as ottLink
    timeout: int = 10

class TMDBResponse:
    """Response wrapper for TMDB API calls"""
    def __init__(self, data: Dict, status_code: int, success: bool):
        self.data = data
        self.status_code = status_code
        self.success = success

class TMDBError(Exception):
    """Custom exception for TMDB API errors"""
    def __init__(self, message: str, status_code: int = None):
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)

class TMDBClientInterface(ABC):
    """Abstract interface for TMDB client"""

    @abstractmethod
    def make_request(self, endpoint: str, params: Dict = None) -> TMDBResponse:
        pass

    def close(self) -> None:
        """Release any held connections"""
