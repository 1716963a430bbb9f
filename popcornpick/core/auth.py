import logging
from datetime import datetime, timedelta, timezone
from typing import Optional
import bcrypt
import jwt
from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from .config import Settings, get_settings
from .exceptions import UnauthorizedException

logger = logging.getLogger(__name__)

# bcrypt only looks at the first 72 bytes of a password
MAX_PASSWORD_BYTES = 72

bearer_scheme = HTTPBearer(auto_error=False)

def get_password_hash(password: str, rounds: int = 10) -> str:
    """Hash a password with a per-password bcrypt salt"""
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt(rounds=rounds)).decode("utf-8")

def verify_password(plain_password: str, hashed_password: str) -> bool:
    try:
        return bcrypt.checkpw(plain_password.encode("utf-8"), hashed_password.encode("utf-8"))
    except ValueError:
        return False

class TokenService:
    """Issues and verifies signed bearer tokens carrying a user id"""

    def __init__(self, secret_key: str, algorithm: str = "HS256", expires_delta: timedelta = timedelta(days=7)):
        self.secret_key = secret_key
        self.algorithm = algorithm
        self.expires_delta = expires_delta

    def issue(self, user_id: int, now: Optional[datetime] = None) -> str:
        issued_at = now or datetime.now(timezone.utc)
        payload = {
            "sub": str(user_id),
            "iat": issued_at,
            "exp": issued_at + self.expires_delta,
        }
        return jwt.encode(payload, self.secret_key, algorithm=self.algorithm)

    def verify(self, token: Optional[str]) -> int:
        """Return the user id of a valid token or raise UnauthorizedException"""
        if not token:
            raise UnauthorizedException("No token")
        try:
            payload = jwt.decode(token, self.secret_key, algorithms=[self.algorithm])
        except jwt.ExpiredSignatureError:
            raise UnauthorizedException("Token expired")
        except jwt.PyJWTError as e:
            logger.info(f"Rejected bearer token: {str(e)}")
            raise UnauthorizedException("Invalid token")
        try:
            return int(payload["sub"])
        except (KeyError, TypeError, ValueError):
            raise UnauthorizedException("Invalid token")

def get_token_service(settings: Settings = Depends(get_settings)) -> TokenService:
    return TokenService(
        secret_key=settings.SECRET_KEY,
        algorithm=settings.ALGORITHM,
        expires_delta=timedelta(days=settings.ACCESS_TOKEN_EXPIRE_DAYS),
    )

def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    token_service: TokenService = Depends(get_token_service),
) -> int:
    """Guard for protected routes; returns the caller's user id"""
    token = credentials.credentials if credentials else None
    return token_service.verify(token)
