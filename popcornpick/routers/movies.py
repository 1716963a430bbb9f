import logging
from fastapi import APIRouter, Depends, Query, Request
from popcornpick.core.exceptions import handle_exception
from popcornpick.core.gateway import UpstreamGateway
from popcornpick.core.tmdb_service import get_gateway
from popcornpick.schemas.movie import MovieListQuery, MovieListResponse, MovieDetailsResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["movies"])

@router.get("/movies", response_model=MovieListResponse)
def list_movies(request: Request, gateway: UpstreamGateway = Depends(get_gateway)):
    """Search or default listing; always answers 200"""
    try:
        query = MovieListQuery.from_params(request.query_params)
        return {"results": gateway.list_movies(query)}
    except Exception:
        logger.exception("/movies failed, returning empty results")
        return {"results": []}

@router.get("/trending", response_model=MovieListResponse)
def trending(
    type: str = Query("movie", description="'movie' or 'tv'"),
    gateway: UpstreamGateway = Depends(get_gateway),
):
    try:
        return {"results": gateway.trending(type)}
    except Exception:
        logger.exception("/trending failed, returning empty results")
        return {"results": []}

@router.get("/movie/{content_id}", response_model=MovieDetailsResponse)
async def get_details(
    content_id: str,
    type: str = Query("movie", description="'movie' or 'tv'"),
    gateway: UpstreamGateway = Depends(get_gateway),
):
    """Details, credits, trailer key and regional providers"""
    try:
        return await gateway.details(content_id, type)
    except Exception as e:
        raise handle_exception(e, "Details fetch failed")
