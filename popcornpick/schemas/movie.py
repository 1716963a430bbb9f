import logging
import math
from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator
from typing import Optional, List, Dict, Any, Mapping
from popcornpick.core.enums import ContentKind

logger = logging.getLogger(__name__)

class MovieListQuery(BaseModel):
    """Recognized query parameters of the movie listing endpoint"""
    model_config = ConfigDict(extra="ignore")

    type: str = "movie"
    page: int = 1
    search: str = ""
    genre: str = ""
    rating: str = ""
    language: str = ""

    @field_validator("page", mode="before")
    @classmethod
    def coerce_page(cls, value: Any) -> int:
        try:
            page = int(value)
        except (TypeError, ValueError):
            return 1
        return page if page >= 1 else 1

    @field_validator("rating", mode="before")
    @classmethod
    def numeric_rating(cls, value: Any) -> str:
        if value is None:
            return ""
        value = str(value).strip()
        try:
            number = float(value)
        except ValueError:
            return ""
        return value if math.isfinite(number) else ""

    @field_validator("search", "genre", "language", mode="before")
    @classmethod
    def strip_text(cls, value: Any) -> str:
        return "" if value is None else str(value).strip()

    @classmethod
    def from_params(cls, params: Mapping[str, str]) -> "MovieListQuery":
        """Build from raw query params, dropping unrecognized keys"""
        # repeated keys keep their first value
        getlist = getattr(params, "getlist", None)
        known = {
            k: (getlist(k)[0] if getlist else params[k])
            for k in params.keys() if k in cls.model_fields
        }
        ignored = sorted(set(params.keys()) - set(known))
        if ignored:
            logger.debug(f"Ignoring unrecognized query params: {ignored}")
        return cls(**known)

    @property
    def kind(self) -> Optional[ContentKind]:
        return ContentKind.parse(self.type)

    @property
    def first_genre(self) -> str:
        # TMDB honours a single with_genres value here
        return self.genre.split(",")[0].strip()

class MovieListResponse(BaseModel):
    results: List[Dict[str, Any]] = []

class MovieDetailsResponse(BaseModel):
    """Combined details payload for a movie or show"""
    details: Dict[str, Any]
    credits: Dict[str, Any]
    trailer_key: Optional[str] = Field(
        None, validation_alias=AliasChoices("trailer_key", "trailerKey"), serialization_alias="trailerKey"
    )
    ott_link: Optional[Dict[str, Any]] = Field(
        None, validation_alias=AliasChoices("ott_link", "ottLink"), serialization_alias="ottLink"
    )

class CachedMovieResponse(BaseModel):
    """Movie record as stored by the trending refresh"""
    model_config = ConfigDict(from_attributes=True)

    id: int
    tmdb_id: int = Field(
        ..., validation_alias=AliasChoices("tmdb_id", "tmdbId"), serialization_alias="tmdbId"
    )
    title: Optional[str] = None
    poster: Optional[str] = None
    rating: Optional[float] = None
    overview: Optional[str] = None
    language: Optional[str] = None
    release_date: Optional[str] = Field(
        None, validation_alias=AliasChoices("release_date", "releaseDate"), serialization_alias="releaseDate"
    )

class CacheRefreshResponse(BaseModel):
    success: bool
    count: int

class SuccessResponse(BaseModel):
    success: bool = True
