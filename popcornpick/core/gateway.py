import asyncio
import logging
from typing import Any, Dict, List, Optional, Union
from .enums import ContentKind, VideoSite, VideoType
from .exceptions import BadRequestException, UpstreamException
from .interfaces import TMDBClientInterface, TMDBError, TMDBResponse
from .validation import parse_tmdb_id
from popcornpick.schemas.movie import MovieDetailsResponse, MovieListQuery

logger = logging.getLogger(__name__)

DEFAULT_DISCOVER_SORT = "popularity.desc"

class UpstreamGateway:
    """Shapes TMDB calls for the API.

    Listing and trending degrade to an empty list on any upstream failure.
    Details and the daily trending fetch used by the cache refresh raise
    ``UpstreamException`` instead.
    """

    def __init__(self, client: TMDBClientInterface, region: str = "IN"):
        self.client = client
        self.region = region

    def close(self) -> None:
        self.client.close()

    def list_movies(self, query: MovieListQuery) -> List[Dict[str, Any]]:
        """Search or default listing for movies or shows"""
        kind = query.kind
        if kind is None:
            return []

        params: Dict[str, Any] = {"page": query.page}
        if query.search:
            endpoint = f"search/{kind.value}"
            params["query"] = query.search
        elif kind is ContentKind.MOVIE:
            endpoint = "discover/movie"
            params["sort_by"] = DEFAULT_DISCOVER_SORT
        else:
            endpoint = "trending/tv/week"

        if query.first_genre:
            params["with_genres"] = query.first_genre
        if query.rating:
            params["vote_average.gte"] = query.rating
        if query.language:
            params["with_original_language"] = query.language

        return self._results_or_empty(endpoint, params)

    def trending(self, kind: Optional[str]) -> List[Dict[str, Any]]:
        """Today's trending titles; anything but a show alias means movies"""
        content_kind = ContentKind.parse(kind) or ContentKind.MOVIE
        return self._results_or_empty(f"trending/{content_kind.value}/day")

    async def details(self, content_id: Union[str, int], kind: Optional[str]) -> MovieDetailsResponse:
        """Details, credits, trailer and regional providers, all or nothing"""
        content_kind = ContentKind.parse(kind)
        if content_kind is None:
            raise BadRequestException("Invalid type")
        content_id = parse_tmdb_id(content_id, "Invalid id")

        base = f"{content_kind.value}/{content_id}"
        endpoints = [base, f"{base}/credits", f"{base}/videos", f"{base}/watch/providers"]

        loop = asyncio.get_running_loop()
        try:
            details, credits, videos, providers = await asyncio.gather(
                *[loop.run_in_executor(None, self._fetch, endpoint) for endpoint in endpoints]
            )
        except UpstreamException as e:
            logger.warning(f"Details for {base} failed: {e.message}")
            raise UpstreamException("Details fetch failed")

        return MovieDetailsResponse(
            details=details,
            credits=credits,
            trailer_key=self.select_trailer_key(videos),
            ott_link=self.select_region(providers, self.region),
        )

    def fetch_daily_trending(self) -> List[Dict[str, Any]]:
        """Today's trending movies for the cache refresh; raises on failure"""
        try:
            data = self._fetch("trending/movie/day")
        except UpstreamException:
            raise UpstreamException("TMDB fetch failed")
        results = data.get("results")
        if not isinstance(results, list):
            raise UpstreamException("TMDB fetch failed")
        return results

    @staticmethod
    def select_trailer_key(videos: Dict[str, Any]) -> Optional[str]:
        for video in videos.get("results") or []:
            if video.get("type") == VideoType.TRAILER.value and video.get("site") == VideoSite.YOUTUBE.value:
                return video.get("key")
        return None

    @staticmethod
    def select_region(providers: Dict[str, Any], region: str) -> Optional[Dict[str, Any]]:
        return (providers.get("results") or {}).get(region)

    def _fetch(self, endpoint: str, params: Dict[str, Any] = None) -> Dict[str, Any]:
        try:
            response: TMDBResponse = self.client.make_request(endpoint, params)
        except TMDBError as e:
            raise UpstreamException(e.message)
        if not response.success or not isinstance(response.data, dict):
            raise UpstreamException(f"TMDB returned {response.status_code} for {endpoint}")
        return response.data

    def _results_or_empty(self, endpoint: str, params: Dict[str, Any] = None) -> List[Dict[str, Any]]:
        try:
            data = self._fetch(endpoint, params)
        except UpstreamException as e:
            logger.warning(f"{endpoint} failed, returning empty results: {e.message}")
            return []
        results = data.get("results")
        return results if isinstance(results, list) else []
