from enum import Enum
from typing import Optional

class ContentKind(str, Enum):
    """Kinds of TMDB content; the value is the TMDB path segment"""
    MOVIE = "movie"
    SHOW = "tv"

    @classmethod
    def parse(cls, value: Optional[str]) -> Optional["ContentKind"]:
        """Map a wire value to a kind; ``tv`` and ``show`` both mean SHOW"""
        if value == "movie":
            return cls.MOVIE
        if value in ("tv", "show"):
            return cls.SHOW
        return None

class VideoSite(str, Enum):
    YOUTUBE = "YouTube"

class VideoType(str, Enum):
    TRAILER = "Trailer"
