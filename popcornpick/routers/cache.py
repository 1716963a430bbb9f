from typing import List, Optional
from fastapi import APIRouter, Depends, Query
from popcornpick.core.exceptions import handle_exception
from popcornpick.schemas.movie import CachedMovieResponse, CacheRefreshResponse
from popcornpick.services.dependencies import get_movie_cache_service
from popcornpick.services.movie_cache_service import MovieCacheService

router = APIRouter(tags=["cache"])

@router.get("/fetch-movies", response_model=CacheRefreshResponse)
def fetch_movies(cache_service: MovieCacheService = Depends(get_movie_cache_service)):
    """Store today's trending movies in the local cache"""
    try:
        count = cache_service.refresh_cache()
        return {"success": True, "count": count}
    except Exception as e:
        raise handle_exception(e, "TMDB fetch failed")

@router.get("/search", response_model=List[CachedMovieResponse])
def search_cached(
    q: Optional[str] = Query("", description="Title substring"),
    cache_service: MovieCacheService = Depends(get_movie_cache_service),
):
    try:
        return cache_service.search(q)
    except Exception as e:
        raise handle_exception(e)

@router.get("/filter", response_model=List[CachedMovieResponse])
def filter_cached(
    rating: Optional[str] = Query(None, description="Minimum rating"),
    language: Optional[str] = Query(None, description="Original language code"),
    cache_service: MovieCacheService = Depends(get_movie_cache_service),
):
    try:
        return cache_service.filter(rating, language)
    except Exception as e:
        raise handle_exception(e)
