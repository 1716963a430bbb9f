import logging
from fastapi import status

logger = logging.getLogger(__name__)

class BaseAppException(Exception):
    """Base exception for application"""
    def __init__(self, message: str, status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR):
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)

    def to_dict(self):
        return {"error": self.message}

class ValidationException(BaseAppException):
    """Raised when client input is malformed"""
    def __init__(self, message: str = "Invalid input"):
        super().__init__(message, status.HTTP_400_BAD_REQUEST)

class BadRequestException(BaseAppException):
    """Raised when a request parameter has an unsupported value"""
    def __init__(self, message: str = "Bad request"):
        super().__init__(message, status.HTTP_400_BAD_REQUEST)

class UnauthorizedException(BaseAppException):
    """Raised when the bearer token is missing, invalid or expired"""
    def __init__(self, message: str = "Invalid token"):
        super().__init__(message, status.HTTP_401_UNAUTHORIZED)

class UserNotFoundException(BaseAppException):
    """Raised when user is not found"""
    def __init__(self, message: str = "User not found", status_code: int = status.HTTP_404_NOT_FOUND):
        super().__init__(message, status_code)

class EmailTakenException(BaseAppException):
    """Raised when a signup reuses a registered email"""
    def __init__(self, message: str = "Email already exists"):
        super().__init__(message, status.HTTP_400_BAD_REQUEST)

class WrongPasswordException(BaseAppException):
    """Raised when the password does not match the stored hash"""
    def __init__(self, message: str = "Wrong password"):
        super().__init__(message, status.HTTP_400_BAD_REQUEST)

class UpstreamException(BaseAppException):
    """Raised when TMDB fails where an empty result is not acceptable"""
    def __init__(self, message: str = "Upstream error"):
        super().__init__(message, status.HTTP_500_INTERNAL_SERVER_ERROR)

class ServerErrorException(BaseAppException):
    """Raised for unexpected failures"""
    def __init__(self, message: str = "Server error"):
        super().__init__(message, status.HTTP_500_INTERNAL_SERVER_ERROR)

def handle_exception(e: Exception, message: str = "Server error") -> BaseAppException:
    """Pass application errors through, wrap anything else as a server error"""
    if isinstance(e, BaseAppException):
        return e
    logger.exception(f"Unhandled error: {str(e)}")
    return ServerErrorException(message)
