import re
from typing import Union
from .exceptions import ValidationException

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
TMDB_ID_PATTERN = re.compile(r"^\d+$")
# ids are stored in 32-bit INTEGER columns
MAX_TMDB_ID = 2**31 - 1

def is_valid_email(email: str) -> bool:
    """Basic local@domain.tld shape"""
    return bool(EMAIL_PATTERN.match(email))

def parse_tmdb_id(value: Union[str, int, None], message: str = "Invalid movie id") -> int:
    """Positive integer TMDB id or ValidationException"""
    if isinstance(value, bool):
        raise ValidationException(message)
    if isinstance(value, int):
        tmdb_id = value
    elif isinstance(value, str) and TMDB_ID_PATTERN.match(value.strip()):
        tmdb_id = int(value.strip())
    else:
        raise ValidationException(message)
    if tmdb_id <= 0 or tmdb_id > MAX_TMDB_ID:
        raise ValidationException(message)
    return tmdb_id
